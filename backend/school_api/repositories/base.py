"""
School Records API: Generic CRUD Repository
=============================================

What:  Data access for one entity table: list, get, create, update, delete.
Why:   The three entity repositories differ only in their model class, so
       the queries are written once here and parameterized by model.
How:   Every call opens its own AsyncSession from the injected Database,
       executes one statement (plus a refresh after writes), commits and
       closes. No transactions span calls; nothing is retried.

Soft-delete rule:
    A row is "active" while deleted_at IS NULL. active_filter() is the only
    place that predicate is built, and list/get/update/delete all go through
    it, so a deleted row is never read back or resurrected by an update.

Update of an absent id:
    When no active row matches, update inserts the entity under the
    requested id. If a soft-deleted row holds that id the insert hits the
    primary key and fails, so a deleted row is reported as a store error
    and stays deleted.

Key range:
    Primary keys are INTEGER columns. Ids above MAX_STORED_ID cannot be in
    the table, so get, update and delete answer them without a query.

Error translation:
    SQLAlchemyError → DatabaseError (message = driver error text)
    missing active row on get → NotFoundError
"""

import logging
from datetime import datetime, timezone
from typing import Generic, List, Type, TypeVar

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError

from school_api.database import Database
from school_api.exceptions import DatabaseError, NotFoundError
from school_api.models.base import EntityMixin

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=EntityMixin)

# Largest value an INTEGER primary key column can hold
MAX_STORED_ID = 2_147_483_647


def _store_error(action: str, resource: str, exc: SQLAlchemyError) -> DatabaseError:
    """Wrap a SQLAlchemy failure, surfacing the driver's own message."""
    detail = str(getattr(exc, "orig", None) or exc)
    logger.error("Database error during %s %s: %s", action, resource, detail)
    return DatabaseError(
        message=detail,
        context={"action": action, "resource": resource, "error_type": type(exc).__name__},
    )


class CRUDRepository(Generic[ModelT]):
    """
    CRUD over one model class.

    Subclasses set `model` and `resource` (the human name used in error
    messages, e.g. "school").
    """

    model: Type[ModelT]
    resource: str = "resource"

    def __init__(self, database: Database):
        self.database = database

    def active_filter(self):
        return self.model.deleted_at.is_(None)

    async def list_all(self) -> List[ModelT]:
        """Return every active row, oldest id first."""
        query = select(self.model).where(self.active_filter()).order_by(self.model.id)
        try:
            async with self.database.session() as session:
                result = await session.execute(query)
                return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise _store_error("list", self.resource, e) from e

    async def get_by_id(self, entity_id: int) -> ModelT:
        """
        Return the active row with this primary key.

        Raises:
            NotFoundError: no active row has this id
            DatabaseError: query failed
        """
        if entity_id > MAX_STORED_ID:
            raise NotFoundError(resource=self.resource, resource_id=entity_id)

        query = select(self.model).where(self.model.id == entity_id, self.active_filter())
        try:
            async with self.database.session() as session:
                result = await session.execute(query)
                entity = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise _store_error("get", self.resource, e) from e

        if entity is None:
            raise NotFoundError(resource=self.resource, resource_id=entity_id)
        return entity

    async def create(self, entity: ModelT) -> ModelT:
        """
        Insert a new row.

        The same instance is returned, now carrying the generated id and
        timestamps. Any id already set on the instance is discarded so the
        store always generates it.
        """
        entity.id = None
        try:
            async with self.database.session() as session:
                session.add(entity)
                await session.commit()
                await session.refresh(entity)
        except SQLAlchemyError as e:
            raise _store_error("create", self.resource, e) from e

        logger.info("Created %s %s", self.resource, entity.id)
        return entity

    async def update(self, entity: ModelT) -> ModelT:
        """
        Overwrite every writable field of the active row with entity.id.

        There is no optimistic-concurrency check: the last write wins. When
        no active row has the id, the entity is inserted under it instead;
        that insert fails if a soft-deleted row still holds the id.

        Raises:
            DatabaseError: query or write failed, or the id is out of range
        """
        if entity.id > MAX_STORED_ID:
            raise DatabaseError(
                message=f"{self.resource} id {entity.id} is out of range for the primary key column",
                context={"action": "update", "resource": self.resource, "resource_id": entity.id},
            )

        query = select(self.model).where(self.model.id == entity.id, self.active_filter())
        try:
            async with self.database.session() as session:
                result = await session.execute(query)
                stored = result.scalar_one_or_none()
                if stored is None:
                    session.add(entity)
                    stored = entity
                else:
                    for field in self.model.WRITABLE_FIELDS:
                        setattr(stored, field, getattr(entity, field))
                await session.commit()
                await session.refresh(stored)
        except SQLAlchemyError as e:
            raise _store_error("update", self.resource, e) from e

        logger.info("Updated %s %s", self.resource, stored.id)
        return stored

    async def delete(self, entity_id: int) -> None:
        """
        Soft-delete the row: set deleted_at, keep the row.

        Deleting an id that is missing or already deleted succeeds silently.
        """
        if entity_id > MAX_STORED_ID:
            return

        now = datetime.now(timezone.utc)
        statement = (
            update(self.model)
            .where(self.model.id == entity_id, self.active_filter())
            .values(deleted_at=now, updated_at=now)
        )
        try:
            async with self.database.session() as session:
                result = await session.execute(statement)
                await session.commit()
        except SQLAlchemyError as e:
            raise _store_error("delete", self.resource, e) from e

        if result.rowcount:
            logger.info("Deleted %s %s", self.resource, entity_id)
        else:
            logger.debug("Delete of %s %s matched no active row", self.resource, entity_id)
