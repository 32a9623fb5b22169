# schedule_api/storage/schedules.py

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from schedule_api.core.config import settings

logger = logging.getLogger(__name__)

ScheduleDocument = Dict[str, Any]


class WeekType(str, Enum):
    NUMERATOR = "numerator"
    DENOMINATOR = "denominator"


def parse_week_type(value: Union[str, WeekType]) -> Optional[WeekType]:
    """
    Map a raw parity string onto WeekType; None for anything unrecognised.
    """
    if isinstance(value, WeekType):
        return value
    try:
        return WeekType(value)
    except ValueError:
        return None


def _reject_constant(name: str):
    # NaN and Infinity are not JSON
    raise ValueError(f"invalid JSON constant {name!r}")


def schedule_path(week_type: WeekType, schedule_dir: Optional[Path] = None) -> Path:
    base = Path(schedule_dir) if schedule_dir is not None else settings.schedule_dir
    return base / f"schedule_{week_type.value}.json"


def load_schedule(
    week_type: Union[str, WeekType],
    schedule_dir: Optional[Path] = None,
) -> Optional[ScheduleDocument]:
    """
    Read and parse the schedule document for one week parity.

    Returns None (and logs why) when the parity is unknown, the file is
    missing or unreadable, or its contents are not valid JSON. The file is
    re-read on every call.
    """
    parity = parse_week_type(week_type)
    if parity is None:
        logger.warning("Error loading schedule: invalid week type %r", week_type)
        return None

    path = schedule_path(parity, schedule_dir)

    try:
        raw = path.read_text(encoding="utf-8")
        return json.loads(raw, parse_constant=_reject_constant)
    except (OSError, UnicodeDecodeError, ValueError, RecursionError) as e:
        logger.error("Error loading schedule %s from %s: %s", parity.value, path, e)
        return None


def get_all_groups(schedule_dir: Optional[Path] = None) -> List[str]:
    """
    Union of group names from both week parities, sorted and deduplicated.

    A missing or broken document only drops its own groups; if both are
    absent the result is an empty list.
    """
    groups = set()

    for week_type in WeekType:
        schedule = load_schedule(week_type, schedule_dir)
        # Only a JSON object contributes group names
        if isinstance(schedule, dict):
            groups.update(schedule.keys())

    return sorted(groups)
