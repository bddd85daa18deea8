"""Request/response schemas for /classes."""

from typing import Optional

from pydantic import BaseModel, Field

from school_api.models.school_class import SchoolClass
from school_api.schemas.common import EntityResponse


class ClassIn(BaseModel):
    """Body of POST /classes and PUT /classes/{id}; `id` is never trusted."""
    id: Optional[int] = Field(default=None, description="Ignored; the path id wins")
    class_id: int = Field(default=0, ge=0, description="Class number chosen by the caller")
    class_name: str = Field(default="", description="Display name, e.g. '10-A'")
    student_id: int = Field(default=0, ge=0, description="Associated student id (unenforced)")

    def to_model(self, entity_id: Optional[int] = None) -> SchoolClass:
        return SchoolClass(
            id=entity_id,
            class_id=self.class_id,
            class_name=self.class_name,
            student_id=self.student_id,
        )


class ClassResponse(EntityResponse):
    class_id: int
    class_name: str
    student_id: int
