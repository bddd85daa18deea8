# Repositories package init
"""
School Records API: Data Access Layer
=======================================

What:  One repository per entity table, all built on CRUDRepository.
Why:   Keeps SQL out of services and routes; the rest of the app only sees
       list_all / get_by_id / create / update / delete.
How:   Each repository receives the shared Database handle at construction.

Repository Inventory:
    - SchoolRepository:  schools
    - ClassRepository:   classes
    - StudentRepository: students
"""

from school_api.repositories.base import CRUDRepository
from school_api.repositories.class_repository import ClassRepository
from school_api.repositories.school_repository import SchoolRepository
from school_api.repositories.student_repository import StudentRepository

__all__ = ["CRUDRepository", "ClassRepository", "SchoolRepository", "StudentRepository"]
