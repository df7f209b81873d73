"""Base models and value types shared by all bridge resources."""

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Dict, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer


def _none_string(value: Any) -> Any:
    """The bridge writes missing timestamps as the literal string ``"none"``."""
    if isinstance(value, str) and value.lower() == "none":
        return None
    return value


def _to_bridge_string(value: Optional[datetime]) -> str:
    return "none" if value is None else value.isoformat()


BridgeDateTime = Annotated[
    Optional[datetime],
    BeforeValidator(_none_string),
    PlainSerializer(_to_bridge_string, return_type=str),
]


class HueModel(BaseModel):
    """A payload received from the bridge.

    Field names follow the vendor API verbatim. Fields the models do not
    describe are kept as extras so a decoded payload encodes back unchanged.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class HueResource(HueModel):
    """A bridge-managed entity addressed by a bridge-assigned id."""

    id: Optional[str] = Field(default=None, exclude=True)


class HueRequest(BaseModel):
    """A request body built by the caller; ``None`` fields are not sent."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class Alert(str, Enum):
    """Alert effect of a light."""

    NONE = "none"
    SELECT = "select"
    LSELECT = "lselect"


class Effect(str, Enum):
    """Dynamic effect of a light."""

    NONE = "none"
    COLORLOOP = "colorloop"


class ColorMode(str, Enum):
    """Color mode of a light."""

    HS = "hs"
    XY = "xy"
    CT = "ct"


class Action(BaseModel):
    """A request the bridge runs on behalf of a schedule or rule."""

    model_config = ConfigDict(extra="allow")

    address: str
    method: str
    body: Dict[str, Any] = Field(default_factory=dict)
