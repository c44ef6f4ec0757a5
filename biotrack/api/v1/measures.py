"""
Body measure endpoints.

Measures are created under a user and read back through that user;
updates and deletions address the measure by its own ID.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from biotrack.db.database import get_db
from biotrack.schemas import MeasureRequest, MeasureResponse, MessageResponse
from biotrack.services.measure_service import MeasureService

router = APIRouter()


@router.post(
    "/{user_id}", response_model=MessageResponse, status_code=status.HTTP_200_OK
)
async def create_measure(
    request: MeasureRequest,
    user_id: int = Path(..., gt=0),
    db: Session = Depends(get_db),
):
    """
    Record a new measure for a user.

    measurementDate, weightKg and heightCm are required; every numeric
    field that is sent must be positive.
    """
    MeasureService(db).create_measure(request, user_id)
    return MessageResponse(message="Measure created successfully!")


@router.get(
    "/{user_id}/measures",
    response_model=List[MeasureResponse],
    status_code=status.HTTP_200_OK,
)
async def list_measures(user_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    """List every measure of a user."""
    measures = MeasureService(db).list_measures(user_id)
    return [MeasureResponse.model_validate(m) for m in measures]


@router.get(
    "/{user_id}/measures/{measure_id}",
    response_model=MeasureResponse,
    status_code=status.HTTP_200_OK,
)
async def get_measure(
    user_id: int = Path(..., gt=0),
    measure_id: int = Path(..., gt=0),
    db: Session = Depends(get_db),
):
    """Get one measure. Returns 404 unless it belongs to the user."""
    measure = MeasureService(db).get_measure(user_id, measure_id)
    return MeasureResponse.model_validate(measure)


@router.put(
    "/{measure_id}", response_model=MessageResponse, status_code=status.HTTP_200_OK
)
async def update_measure(
    request: MeasureRequest,
    measure_id: int = Path(..., gt=0),
    db: Session = Depends(get_db),
):
    """Replace every field of a measure. Omitted optional fields are cleared."""
    MeasureService(db).update_measure(measure_id, request)
    return MessageResponse(message="Measure updated successfully!")


@router.delete(
    "/{measure_id}", response_model=MessageResponse, status_code=status.HTTP_200_OK
)
async def delete_measure(measure_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    """Delete a measure. An unknown ID currently answers 500."""
    MeasureService(db).delete_measure(measure_id)
    return MessageResponse(message="Measure removed successfully!")
