# schedule_api/api/schedule.py

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException

from schedule_api.models.schedule import GroupsResponse, ScheduleResponse
from schedule_api.storage.schedules import get_all_groups, load_schedule, parse_week_type

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["schedule"])


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@router.get("/schedule/{week_type}", response_model=ScheduleResponse)
def get_schedule(week_type: str) -> ScheduleResponse:
    """
    Return the schedule document for a week parity (numerator | denominator).
    """
    parity = parse_week_type(week_type)
    if parity is None:
        raise HTTPException(status_code=400, detail="Invalid week type")

    schedule = load_schedule(parity)

    if schedule is None:
        raise HTTPException(status_code=404, detail="Schedule not found")

    return ScheduleResponse(data=schedule, timestamp=utc_now())


@router.get("/groups", response_model=GroupsResponse)
def list_groups() -> GroupsResponse:
    """
    Return every group present in either week's schedule, sorted.
    """
    groups = get_all_groups()

    return GroupsResponse(
        groups=groups,
        count=len(groups),
        timestamp=utc_now(),
    )
