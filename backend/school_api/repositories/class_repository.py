"""Data access for the `classes` table."""

from school_api.models.school_class import SchoolClass
from school_api.repositories.base import CRUDRepository


class ClassRepository(CRUDRepository[SchoolClass]):
    model = SchoolClass
    resource = "class"
