"""
School Records API: Entity Services
=====================================

What:  The seam between route handlers and repositories.
Why:   Routes depend on a service, never on SQLAlchemy, so the storage
       implementation can change without touching the API layer.
How:   Every method forwards to the repository method of the same name with
       the same arguments, and returns its result (or lets its exception
       propagate) unchanged. There is no validation or aggregation here.
"""

from typing import Generic, List, TypeVar

from school_api.models.base import EntityMixin
from school_api.models.school import School
from school_api.models.school_class import SchoolClass
from school_api.models.student import Student
from school_api.repositories.base import CRUDRepository
from school_api.repositories.class_repository import ClassRepository
from school_api.repositories.school_repository import SchoolRepository
from school_api.repositories.student_repository import StudentRepository

ModelT = TypeVar("ModelT", bound=EntityMixin)


class EntityService(Generic[ModelT]):
    """Forwards each call to the injected repository."""

    def __init__(self, repository: CRUDRepository[ModelT]):
        self.repository = repository

    async def list_all(self) -> List[ModelT]:
        return await self.repository.list_all()

    async def get_by_id(self, entity_id: int) -> ModelT:
        return await self.repository.get_by_id(entity_id)

    async def create(self, entity: ModelT) -> ModelT:
        return await self.repository.create(entity)

    async def update(self, entity: ModelT) -> ModelT:
        return await self.repository.update(entity)

    async def delete(self, entity_id: int) -> None:
        await self.repository.delete(entity_id)


class SchoolService(EntityService[School]):
    def __init__(self, repository: SchoolRepository):
        super().__init__(repository)


class ClassService(EntityService[SchoolClass]):
    def __init__(self, repository: ClassRepository):
        super().__init__(repository)


class StudentService(EntityService[Student]):
    def __init__(self, repository: StudentRepository):
        super().__init__(repository)
