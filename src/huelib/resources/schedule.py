"""Schedules: actions the bridge runs at a given time."""

from enum import Enum
from typing import Optional

from .common import Action, BridgeDateTime, HueRequest, HueResource


class ScheduleStatus(str, Enum):
    ENABLED = "enabled"
    DISABLED = "disabled"


class Schedule(HueResource):
    """A schedule.

    ``localtime`` uses the bridge's time pattern syntax (``W124/T06:00:00``,
    ``PT00:10:00``, an ISO timestamp ...) and is kept as a plain string.
    ``starttime`` is only provided for timers.
    """

    name: str
    description: str = ""
    command: Action
    localtime: str
    status: ScheduleStatus
    starttime: BridgeDateTime = None
    created: BridgeDateTime = None
    autodelete: Optional[bool] = None
    recycle: Optional[bool] = None


class ScheduleCreator(HueRequest):
    """Body of ``POST /schedules``."""

    name: Optional[str] = None
    description: Optional[str] = None
    command: Action
    localtime: str
    status: Optional[ScheduleStatus] = None
    autodelete: Optional[bool] = None
    recycle: Optional[bool] = None


class ScheduleModifier(HueRequest):
    """Body of ``PUT /schedules/<id>``."""

    name: Optional[str] = None
    description: Optional[str] = None
    command: Optional[Action] = None
    localtime: Optional[str] = None
    status: Optional[ScheduleStatus] = None
    autodelete: Optional[bool] = None
