"""
User endpoints.

Registration, profile updates (full and partial), deletion, and user-level
views of measure history and BMI.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from biotrack.db.database import get_db
from biotrack.models.measure import Measure
from biotrack.models.user import User
from biotrack.schemas import (
    BmiSummaryResponse,
    MeasureResponse,
    MessageResponse,
    UserBmiResponse,
    UserMeasuresResponse,
    UserPatchRequest,
    UserRequest,
    UserResponse,
)
from biotrack.services.user_service import BmiMatch, UserService

router = APIRouter()


def to_user_measures_response(user: User, measures: List[Measure]) -> UserMeasuresResponse:
    return UserMeasuresResponse(
        **UserResponse.model_validate(user).model_dump(),
        measures=[MeasureResponse.model_validate(m) for m in measures],
    )


def to_user_bmi_response(match: BmiMatch) -> UserBmiResponse:
    return UserBmiResponse(
        **UserResponse.model_validate(match.user).model_dump(),
        bmi=round(match.bmi, 1),
        bmi_range=match.bmi_range.value,
        latest_measure=MeasureResponse.model_validate(match.measure),
    )


@router.post("", response_model=MessageResponse, status_code=status.HTTP_200_OK)
async def create_user(request: UserRequest, db: Session = Depends(get_db)):
    """
    Register a new user.

    The password is hashed before it is stored.
    """
    UserService(db).create_user(request)
    return MessageResponse(message="User created successfully!")


@router.get("", response_model=List[UserResponse], status_code=status.HTTP_200_OK)
async def list_users(db: Session = Depends(get_db)):
    """List every user. Returns 404 when there are none."""
    users = UserService(db).list_users()
    return [UserResponse.model_validate(u) for u in users]


@router.get(
    "/without-measures",
    response_model=List[UserResponse],
    status_code=status.HTTP_200_OK,
)
async def list_users_without_measures(db: Session = Depends(get_db)):
    """List users that have not recorded any measure yet."""
    users = UserService(db).list_users_without_measures()
    return [UserResponse.model_validate(u) for u in users]


@router.get(
    "/bmi-filter",
    response_model=List[UserBmiResponse],
    status_code=status.HTTP_200_OK,
)
async def filter_users_by_bmi(
    bmi_range: str = Query(
        ...,
        alias="range",
        description="BMI band: Underweight, Normal weight, Overweight or Obese",
    ),
    db: Session = Depends(get_db),
):
    """
    List users whose latest measure falls in the given BMI band.

    Users without measures are never included.
    """
    matches = UserService(db).filter_users_by_bmi_range(bmi_range)
    return [to_user_bmi_response(m) for m in matches]


@router.get("/{user_id}", response_model=UserResponse, status_code=status.HTTP_200_OK)
async def get_user(user_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    user = UserService(db).get_user(user_id)
    return UserResponse.model_validate(user)


@router.get(
    "/{user_id}/all-measures",
    response_model=UserMeasuresResponse,
    status_code=status.HTTP_200_OK,
)
async def get_user_with_all_measures(
    user_id: int = Path(..., gt=0), db: Session = Depends(get_db)
):
    """Get a user with all of their measures, newest first."""
    user, measures = UserService(db).get_user_with_all_measures(user_id)
    return to_user_measures_response(user, measures)


@router.get(
    "/{user_id}/latest-measure",
    response_model=UserMeasuresResponse,
    status_code=status.HTTP_200_OK,
)
async def get_user_with_latest_measure(
    user_id: int = Path(..., gt=0), db: Session = Depends(get_db)
):
    """Get a user with their most recent measure (empty list if none)."""
    user, measures = UserService(db).get_user_with_latest_measure(user_id)
    return to_user_measures_response(user, measures)


@router.get(
    "/{user_id}/bmi",
    response_model=BmiSummaryResponse,
    status_code=status.HTTP_200_OK,
)
async def get_user_bmi(user_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    """BMI and WHO band computed from the user's latest measure."""
    match = UserService(db).get_user_bmi(user_id)
    return BmiSummaryResponse(
        user_id=match.user.id,
        measure_id=match.measure.id,
        measurement_date=match.measure.measurement_date,
        weight_kg=match.measure.weight_kg,
        height_cm=match.measure.height_cm,
        bmi=round(match.bmi, 1),
        bmi_range=match.bmi_range.value,
    )


@router.put("/{user_id}", response_model=MessageResponse, status_code=status.HTTP_200_OK)
async def update_user(
    request: UserRequest,
    user_id: int = Path(..., gt=0),
    db: Session = Depends(get_db),
):
    """Replace every field of a user, password included."""
    UserService(db).update_user(user_id, request)
    return MessageResponse(message="User updated successfully!")


@router.patch(
    "/{user_id}", response_model=MessageResponse, status_code=status.HTTP_200_OK
)
async def patch_user(
    request: UserPatchRequest,
    user_id: int = Path(..., gt=0),
    db: Session = Depends(get_db),
):
    """Update only the fields sent in the request."""
    UserService(db).patch_user(user_id, request)
    return MessageResponse(message="User partially updated successfully!")


@router.delete(
    "/{user_id}", response_model=MessageResponse, status_code=status.HTTP_200_OK
)
async def delete_user(user_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    """Delete a user together with their measures."""
    UserService(db).delete_user(user_id)
    return MessageResponse(message="User removed successfully!")
