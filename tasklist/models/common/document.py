from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from tasklist.models.common.pyobjectid import PyObjectId


class Document(BaseModel):
    collection_name: ClassVar[str]

    id: PyObjectId | None = Field(None, alias="_id")

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)
