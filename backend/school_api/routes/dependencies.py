"""
School Records API: Route Dependencies
========================================

What:  FastAPI dependencies that hand each route its service and its parsed
       path identifier.
Why:   Services are built once per application in create_app() and kept on
       app.state; routes reach them through Depends() instead of importing
       module-level singletons.

Path identifiers:
    An id is a base-10 unsigned 64-bit integer written with ASCII digits
    only. Signs, underscores, whitespace, exponents and decimal points are
    all rejected with 400 before any service call. Ids that are well formed
    but larger than any stored key are passed through; the repository
    answers them without a query.
"""

from fastapi import Path, Request

from school_api.exceptions import ValidationError
from school_api.services.entity_service import ClassService, SchoolService, StudentService

UINT64_MAX = 2**64 - 1


def EntityId(description: str = "Record identifier"):
    """Path parameter declaration: digits only, checked before conversion."""
    return Path(pattern=r"^[0-9]+$", description=description, examples=["1"])


def to_entity_id(raw: str, name: str) -> int:
    value = int(raw)
    if value > UINT64_MAX:
        raise ValidationError(
            message=f"Invalid path identifier '{name}': expected an unsigned integer",
            field=name,
        )
    return value


def school_path_id(school_id: str = EntityId("School identifier")) -> int:
    return to_entity_id(school_id, "school_id")


def class_path_id(class_pk: str = EntityId("Class identifier")) -> int:
    return to_entity_id(class_pk, "class_pk")


def student_path_id(student_pk: str = EntityId("Student identifier")) -> int:
    return to_entity_id(student_pk, "student_pk")


def get_school_service(request: Request) -> SchoolService:
    return request.app.state.school_service


def get_class_service(request: Request) -> ClassService:
    return request.app.state.class_service


def get_student_service(request: Request) -> StudentService:
    return request.app.state.student_service
