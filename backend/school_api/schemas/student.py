"""
Request/response schemas for /students.

The address is nested in JSON and flattened into three columns in the
table; the Student model's `address` composite bridges the two.
"""

from typing import Optional

from pydantic import BaseModel, Field

from school_api.models.student import Address, Student
from school_api.schemas.common import EntityResponse


class AddressSchema(BaseModel):
    street: str = ""
    city: str = ""
    state: str = ""

    model_config = {"from_attributes": True}


class StudentIn(BaseModel):
    """Body of POST /students and PUT /students/{id}; `id` is never trusted."""
    id: Optional[int] = Field(default=None, description="Ignored; the path id wins")
    student_id: int = Field(default=0, description="Roll number (informational, not the primary key)")
    name: str = Field(default="", description="Student name")
    marks: int = Field(default=0, description="Marks obtained")
    address: AddressSchema = Field(default_factory=AddressSchema)

    def to_model(self, entity_id: Optional[int] = None) -> Student:
        return Student(
            id=entity_id,
            student_id=self.student_id,
            name=self.name,
            marks=self.marks,
            address=Address(**self.address.model_dump()),
        )


class StudentResponse(EntityResponse):
    student_id: int
    name: str
    marks: int
    address: AddressSchema
