"""Data access for the `schools` table."""

from school_api.models.school import School
from school_api.repositories.base import CRUDRepository


class SchoolRepository(CRUDRepository[School]):
    model = School
    resource = "school"
