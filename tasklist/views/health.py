from rest_framework.views import APIView
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiResponse

from tasklist.constants.health import AppHealthStatus, ComponentHealthStatus
from tasklist_project.db.config import DatabaseManager


class HealthView(APIView):
    @extend_schema(
        operation_id="health_check",
        summary="Health check",
        description="Check the health status of the application and its components",
        tags=["health"],
        responses={
            200: OpenApiResponse(description="Application is healthy"),
            503: OpenApiResponse(description="Application is unhealthy"),
        },
    )
    def get(self, request):
        is_mongodb_healthy = DatabaseManager().check_database_health()
        overall_status = AppHealthStatus.UP if is_mongodb_healthy else AppHealthStatus.DOWN

        response = {
            "status": overall_status.name,
            "components": {
                "mongodb": {
                    "status": ComponentHealthStatus.UP.name if is_mongodb_healthy else ComponentHealthStatus.DOWN.name
                },
            },
        }
        return Response(response, overall_status.http_status)
