from pydantic import EmailStr, Field
from typing import ClassVar
from datetime import datetime, timezone

from tasklist.models.common.document import Document


class UserModel(Document):
    """
    Users are provisioned by the external identity provider; this service only reads them.
    """

    collection_name: ClassVar[str] = "users"

    email_id: EmailStr
    name: str
    picture: str | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime | None = None
