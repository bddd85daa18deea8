"""
School Records API: Student Route Handlers
===========================================

What:  GET/POST /students, GET/PUT/DELETE /students/{student_pk}.
       The path parameter is `student_pk` because `student_id` is the roll number field.
How:   Each handler decodes the request (path id, JSON body), makes exactly
       one service call and serializes the result. Error responses come from
       the global exception handlers in main.py:
         - bad id or body          → 400
         - no active row (get)     → 404
         - store failure           → 500
"""

from typing import List

from fastapi import APIRouter, Depends, status

from school_api.routes.dependencies import get_student_service, student_path_id
from school_api.schemas.common import ErrorResponse, MessageResponse
from school_api.schemas.student import StudentIn, StudentResponse
from school_api.services.entity_service import StudentService

router = APIRouter(prefix="/students", tags=["Students"])

_errors = {
    400: {"description": "Malformed id or body", "model": ErrorResponse},
    500: {"description": "Store failure", "model": ErrorResponse},
}


@router.get(
    "",
    response_model=List[StudentResponse],
    responses={500: _errors[500]},
    summary="List all students",
)
@router.get("/", response_model=List[StudentResponse], include_in_schema=False)
async def list_students(
    service: StudentService = Depends(get_student_service),
) -> List[StudentResponse]:
    students = await service.list_all()
    return [StudentResponse.model_validate(student) for student in students]


@router.get(
    "/{student_pk}",
    response_model=StudentResponse,
    responses={
        **_errors,
        404: {"description": "Student not found", "model": ErrorResponse},
    },
    summary="Get a student by id",
)
async def get_student(
    student_pk: int = Depends(student_path_id),
    service: StudentService = Depends(get_student_service),
) -> StudentResponse:
    student = await service.get_by_id(student_pk)
    return StudentResponse.model_validate(student)


@router.post(
    "",
    response_model=StudentResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_errors,
    summary="Create a student",
)
@router.post(
    "/",
    response_model=StudentResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_student(
    payload: StudentIn,
    service: StudentService = Depends(get_student_service),
) -> StudentResponse:
    student = await service.create(payload.to_model())
    return StudentResponse.model_validate(student)


@router.put(
    "/{student_pk}",
    response_model=StudentResponse,
    responses=_errors,
    summary="Replace a student's fields",
    description=(
        "Overwrites every field of the student. The id in the path wins over any id in the body. "
        "An id with no row at all is inserted; a deleted student stays deleted and the write fails."
    ),
)
async def update_student(
    payload: StudentIn,
    student_pk: int = Depends(student_path_id),
    service: StudentService = Depends(get_student_service),
) -> StudentResponse:
    student = await service.update(payload.to_model(entity_id=student_pk))
    return StudentResponse.model_validate(student)


@router.delete(
    "/{student_pk}",
    response_model=MessageResponse,
    responses=_errors,
    summary="Delete a student",
    description="Soft delete: the row stays in the table but is hidden from every read.",
)
async def delete_student(
    student_pk: int = Depends(student_path_id),
    service: StudentService = Depends(get_student_service),
) -> MessageResponse:
    await service.delete(student_pk)
    return MessageResponse(message="Student deleted successfully")
