# schedule_api/models/schedule.py

from datetime import datetime
from typing import Any, Dict, List

from pydantic import BaseModel


class ScheduleResponse(BaseModel):
    success: bool = True
    data: Any
    timestamp: datetime


class GroupsResponse(BaseModel):
    success: bool = True
    groups: List[str]
    count: int
    timestamp: datetime


class HealthResponse(BaseModel):
    status: str
    service: str
    cors: str
    env: str
    timestamp: datetime
    headers: Dict[str, str]


class IndexResponse(BaseModel):
    message: str
    endpoints: List[str]
