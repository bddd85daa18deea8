"""Data access for the `students` table."""

from school_api.models.student import Student
from school_api.repositories.base import CRUDRepository


class StudentRepository(CRUDRepository[Student]):
    model = Student
    resource = "student"
