"""Request/response schemas for /schools."""

from typing import Optional

from pydantic import BaseModel, Field

from school_api.models.school import School
from school_api.schemas.common import EntityResponse


class SchoolIn(BaseModel):
    """
    Body of POST /schools and PUT /schools/{id}.

    `id` is accepted so clients can send back what they read, but it is
    never trusted: create ignores it and update replaces it with the path id.
    """
    id: Optional[int] = Field(default=None, description="Ignored; the path id wins")
    name: str = Field(default="", description="School name")
    class_id: int = Field(default=0, ge=0, description="Associated class id (unenforced)")

    def to_model(self, entity_id: Optional[int] = None) -> School:
        return School(id=entity_id, name=self.name, class_id=self.class_id)


class SchoolResponse(EntityResponse):
    name: str
    class_id: int
