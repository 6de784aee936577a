"""
Hydration endpoints.

Entry logging, entry listing, statistics and daily goal. Every route
requires a valid bearer token.
"""

import uuid

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_current_user_id, get_hydration_service
from app.schemas.error import ErrorResponse
from app.schemas.hydration import (CreateEntryRequest, HydrationEntryResponse, HydrationStats, UpdateGoalRequest,
                                   UpdateGoalResponse, )
from app.services.hydration_service import HydrationService

router = APIRouter(responses={401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})


@router.post("/entries", summary="Add hydration entry.", response_model=HydrationEntryResponse,
             status_code=status.HTTP_201_CREATED, responses={400: {"model": ErrorResponse}}, )
def create_entry(data: CreateEntryRequest, user_id: uuid.UUID = Depends(get_current_user_id),
                 service: HydrationService = Depends(get_hydration_service), ):
    return service.log_entry(user_id, data)


@router.get("/entries", summary="Get all hydration entries.", response_model=list[HydrationEntryResponse], )
def list_entries(user_id: uuid.UUID = Depends(get_current_user_id),
                 service: HydrationService = Depends(get_hydration_service), ):
    """Entries of the caller, newest first."""
    return service.list_entries(user_id)


@router.get("/stats", summary="Get hydration stats.", response_model=HydrationStats, )
def get_stats(user_id: uuid.UUID = Depends(get_current_user_id),
              service: HydrationService = Depends(get_hydration_service), ):
    """Today / last 7 days / last month totals and progress towards the daily goal (UTC)."""
    return service.get_stats(user_id)


@router.put("/goal", summary="Update daily goal.", response_model=UpdateGoalResponse,
            responses={400: {"model": ErrorResponse}}, )
def update_goal(data: UpdateGoalRequest, user_id: uuid.UUID = Depends(get_current_user_id),
                service: HydrationService = Depends(get_hydration_service), ):
    return service.update_goal(user_id, data.goal)
