"""
Entrant API Routes

Views scoped to the authenticated entrant.
"""

from fastapi import APIRouter, Depends

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.admissions import (
    GetUpcomingEventsUseCase,
    UpcomingEventsResponse,
)
from src.depends import get_current_uid, get_unit_of_work

router = APIRouter(prefix="/me", tags=["Me"])


@router.get("/upcoming-events", response_model=UpcomingEventsResponse)
async def get_upcoming_events(
    uid: str = Depends(get_current_uid),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Admitted events that have not started yet, soonest first"""
    result = await GetUpcomingEventsUseCase(uow).execute(uid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
