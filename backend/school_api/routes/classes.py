"""
School Records API: Class Route Handlers
===========================================

What:  GET/POST /classes, GET/PUT/DELETE /classes/{class_pk}.
       The path parameter is `class_pk` because `class_id` names a body field.
How:   Each handler decodes the request (path id, JSON body), makes exactly
       one service call and serializes the result. Error responses come from
       the global exception handlers in main.py:
         - bad id or body          → 400
         - no active row (get)     → 404
         - store failure           → 500
"""

from typing import List

from fastapi import APIRouter, Depends, status

from school_api.routes.dependencies import class_path_id, get_class_service
from school_api.schemas.common import ErrorResponse, MessageResponse
from school_api.schemas.school_class import ClassIn, ClassResponse
from school_api.services.entity_service import ClassService

router = APIRouter(prefix="/classes", tags=["Classes"])

_errors = {
    400: {"description": "Malformed id or body", "model": ErrorResponse},
    500: {"description": "Store failure", "model": ErrorResponse},
}


@router.get(
    "",
    response_model=List[ClassResponse],
    responses={500: _errors[500]},
    summary="List all classes",
)
@router.get("/", response_model=List[ClassResponse], include_in_schema=False)
async def list_classes(
    service: ClassService = Depends(get_class_service),
) -> List[ClassResponse]:
    classes = await service.list_all()
    return [ClassResponse.model_validate(school_class) for school_class in classes]


@router.get(
    "/{class_pk}",
    response_model=ClassResponse,
    responses={
        **_errors,
        404: {"description": "Class not found", "model": ErrorResponse},
    },
    summary="Get a class by id",
)
async def get_class(
    class_pk: int = Depends(class_path_id),
    service: ClassService = Depends(get_class_service),
) -> ClassResponse:
    school_class = await service.get_by_id(class_pk)
    return ClassResponse.model_validate(school_class)


@router.post(
    "",
    response_model=ClassResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_errors,
    summary="Create a class",
)
@router.post(
    "/",
    response_model=ClassResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_class(
    payload: ClassIn,
    service: ClassService = Depends(get_class_service),
) -> ClassResponse:
    school_class = await service.create(payload.to_model())
    return ClassResponse.model_validate(school_class)


@router.put(
    "/{class_pk}",
    response_model=ClassResponse,
    responses=_errors,
    summary="Replace a class's fields",
    description=(
        "Overwrites every field of the class. The id in the path wins over any id in the body. "
        "An id with no row at all is inserted; a deleted class stays deleted and the write fails."
    ),
)
async def update_class(
    payload: ClassIn,
    class_pk: int = Depends(class_path_id),
    service: ClassService = Depends(get_class_service),
) -> ClassResponse:
    school_class = await service.update(payload.to_model(entity_id=class_pk))
    return ClassResponse.model_validate(school_class)


@router.delete(
    "/{class_pk}",
    response_model=MessageResponse,
    responses=_errors,
    summary="Delete a class",
    description="Soft delete: the row stays in the table but is hidden from every read.",
)
async def delete_class(
    class_pk: int = Depends(class_path_id),
    service: ClassService = Depends(get_class_service),
) -> MessageResponse:
    await service.delete(class_pk)
    return MessageResponse(message="Class deleted successfully")
