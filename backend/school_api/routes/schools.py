"""
School Records API: School Route Handlers
===========================================

What:  GET/POST /schools, GET/PUT/DELETE /schools/{school_id}.
How:   Each handler decodes the request (path id, JSON body), makes exactly
       one service call and serializes the result. Error responses come from
       the global exception handlers in main.py:
         - bad id or body          → 400
         - no active row (get)     → 404
         - store failure           → 500
"""

from typing import List

from fastapi import APIRouter, Depends, status

from school_api.routes.dependencies import get_school_service, school_path_id
from school_api.schemas.common import ErrorResponse, MessageResponse
from school_api.schemas.school import SchoolIn, SchoolResponse
from school_api.services.entity_service import SchoolService

router = APIRouter(prefix="/schools", tags=["Schools"])

_errors = {
    400: {"description": "Malformed id or body", "model": ErrorResponse},
    500: {"description": "Store failure", "model": ErrorResponse},
}


@router.get(
    "",
    response_model=List[SchoolResponse],
    responses={500: _errors[500]},
    summary="List all schools",
)
@router.get("/", response_model=List[SchoolResponse], include_in_schema=False)
async def list_schools(
    service: SchoolService = Depends(get_school_service),
) -> List[SchoolResponse]:
    schools = await service.list_all()
    return [SchoolResponse.model_validate(school) for school in schools]


@router.get(
    "/{school_id}",
    response_model=SchoolResponse,
    responses={
        **_errors,
        404: {"description": "School not found", "model": ErrorResponse},
    },
    summary="Get a school by id",
)
async def get_school(
    school_id: int = Depends(school_path_id),
    service: SchoolService = Depends(get_school_service),
) -> SchoolResponse:
    school = await service.get_by_id(school_id)
    return SchoolResponse.model_validate(school)


@router.post(
    "",
    response_model=SchoolResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_errors,
    summary="Create a school",
)
@router.post(
    "/",
    response_model=SchoolResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_school(
    payload: SchoolIn,
    service: SchoolService = Depends(get_school_service),
) -> SchoolResponse:
    school = await service.create(payload.to_model())
    return SchoolResponse.model_validate(school)


@router.put(
    "/{school_id}",
    response_model=SchoolResponse,
    responses=_errors,
    summary="Replace a school's fields",
    description=(
        "Overwrites every field of the school. The id in the path wins over any id in the body. "
        "An id with no row at all is inserted; a deleted school stays deleted and the write fails."
    ),
)
async def update_school(
    payload: SchoolIn,
    school_id: int = Depends(school_path_id),
    service: SchoolService = Depends(get_school_service),
) -> SchoolResponse:
    school = await service.update(payload.to_model(entity_id=school_id))
    return SchoolResponse.model_validate(school)


@router.delete(
    "/{school_id}",
    response_model=MessageResponse,
    responses=_errors,
    summary="Delete a school",
    description="Soft delete: the row stays in the table but is hidden from every read.",
)
async def delete_school(
    school_id: int = Depends(school_path_id),
    service: SchoolService = Depends(get_school_service),
) -> MessageResponse:
    await service.delete(school_id)
    return MessageResponse(message="School deleted successfully")
