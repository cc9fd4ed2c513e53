from enum import Enum
from rest_framework import status


class AppHealthStatus(Enum):
    UP = status.HTTP_200_OK
    DOWN = status.HTTP_503_SERVICE_UNAVAILABLE

    @property
    def http_status(self) -> int:
        return self.value


class ComponentHealthStatus(Enum):
    UP = "UP"
    DOWN = "DOWN"
