# Models package init
"""
ORM models. Importing this package registers every table with Base.metadata,
which create_tables() and Alembic both rely on.
"""

from school_api.models.school import School
from school_api.models.school_class import SchoolClass
from school_api.models.student import Address, Student

__all__ = ["Address", "School", "SchoolClass", "Student"]
