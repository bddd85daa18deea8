"""
School Records API: Repository Tests
======================================

Exercises CRUDRepository directly against SQLite, without HTTP, to pin the
data access contract: in-place id assignment on create, the active-rows
predicate, and soft delete leaving the row in the table.
"""

import pytest
from sqlalchemy import select

from school_api.exceptions import DatabaseError, NotFoundError
from school_api.models import Address, School, SchoolClass, Student
from school_api.repositories import ClassRepository, SchoolRepository, StudentRepository
from school_api.repositories.base import MAX_STORED_ID


class TestCreate:

    @pytest.mark.asyncio
    async def test_create_mutates_input_in_place(self, database):
        repository = SchoolRepository(database)
        school = School(name="Riverdale", class_id=1)

        returned = await repository.create(school)

        assert returned is school
        assert school.id is not None
        assert school.created_at is not None
        assert school.updated_at is not None

    @pytest.mark.asyncio
    async def test_ids_are_generated_sequentially(self, database):
        repository = ClassRepository(database)

        first = await repository.create(SchoolClass(class_name="1-A"))
        second = await repository.create(SchoolClass(class_name="1-B"))

        assert second.id == first.id + 1


class TestSoftDelete:

    @pytest.mark.asyncio
    async def test_deleted_row_stays_in_table(self, database):
        repository = StudentRepository(database)
        student = await repository.create(
            Student(name="Ravi", marks=70, address=Address(street="MG Road", city="Bengaluru", state="KA"))
        )

        await repository.delete(student.id)

        with pytest.raises(NotFoundError):
            await repository.get_by_id(student.id)
        async with database.session() as session:
            stored = (await session.execute(select(Student).where(Student.id == student.id))).scalar_one()
        assert stored.deleted_at is not None
        assert stored.name == "Ravi"
        assert stored.address == Address(street="MG Road", city="Bengaluru", state="KA")

    @pytest.mark.asyncio
    async def test_update_does_not_resurrect_deleted_row(self, database):
        repository = SchoolRepository(database)
        school = await repository.create(School(name="Old"))
        await repository.delete(school.id)

        with pytest.raises(DatabaseError):
            await repository.update(School(id=school.id, name="New"))

        assert await repository.list_all() == []

    @pytest.mark.asyncio
    async def test_delete_twice_is_harmless(self, database):
        repository = SchoolRepository(database)
        school = await repository.create(School(name="Once"))

        await repository.delete(school.id)
        await repository.delete(school.id)

        with pytest.raises(NotFoundError):
            await repository.get_by_id(school.id)


class TestUpdate:

    @pytest.mark.asyncio
    async def test_update_overwrites_every_writable_field(self, database):
        repository = StudentRepository(database)
        original = await repository.create(Student(student_id=1, name="A", marks=10, address=Address(city="Goa")))

        updated = await repository.update(
            Student(id=original.id, student_id=2, name="B", marks=20, address=Address(street="X", city="Y", state="Z"))
        )

        assert updated.id == original.id
        assert (updated.student_id, updated.name, updated.marks) == (2, "B", 20)
        assert updated.address == Address(street="X", city="Y", state="Z")
        assert updated.created_at == original.created_at

    @pytest.mark.asyncio
    async def test_update_unknown_id_inserts_under_that_id(self, database):
        repository = ClassRepository(database)

        created = await repository.update(SchoolClass(id=31, class_name="Late", class_id=4))

        assert created.id == 31
        assert created.created_at is not None
        fetched = await repository.get_by_id(31)
        assert (fetched.class_name, fetched.class_id) == ("Late", 4)


class TestKeyRange:

    @pytest.mark.asyncio
    async def test_get_beyond_stored_range_is_not_found(self, database):
        repository = SchoolRepository(database)

        with pytest.raises(NotFoundError) as exc_info:
            await repository.get_by_id(MAX_STORED_ID + 1)

        assert exc_info.value.resource_id == MAX_STORED_ID + 1

    @pytest.mark.asyncio
    async def test_delete_beyond_stored_range_is_a_no_op(self, database):
        repository = StudentRepository(database)

        assert await repository.delete(2**64 - 1) is None

    @pytest.mark.asyncio
    async def test_update_beyond_stored_range_is_a_store_error(self, database):
        repository = SchoolRepository(database)

        with pytest.raises(DatabaseError, match="out of range"):
            await repository.update(School(id=3_000_000_000, name="Far"))

        assert await repository.list_all() == []
