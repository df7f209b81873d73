"""Group resources (rooms, zones, light groups, entertainment areas)."""

from typing import List, Optional

from pydantic import Field

from .common import Alert, ColorMode, Effect, HueModel, HueRequest, HueResource
from .light import LightStateModifier


class GroupState(HueModel):
    all_on: bool
    any_on: bool


class GroupAction(HueModel):
    """Last action sent to all lights of a group."""

    on: Optional[bool] = None
    bri: Optional[int] = None
    hue: Optional[int] = None
    sat: Optional[int] = None
    xy: Optional[List[float]] = None
    ct: Optional[int] = None
    alert: Optional[Alert] = None
    effect: Optional[Effect] = None
    colormode: Optional[ColorMode] = None


class Group(HueResource):
    """A group of lights.

    ``class_`` is the room class (``"Living room"``, ``"Kitchen"`` ...) and is
    sent as ``class`` on the wire.
    """

    name: str
    type: str
    lights: List[str] = Field(default_factory=list)
    sensors: Optional[List[str]] = None
    class_: Optional[str] = Field(default=None, alias="class")
    state: Optional[GroupState] = None
    action: Optional[GroupAction] = None
    recycle: Optional[bool] = None


class GroupCreator(HueRequest):
    """Body of ``POST /groups``."""

    name: Optional[str] = None
    lights: List[str]
    type: Optional[str] = None
    class_: Optional[str] = Field(default=None, alias="class")


class GroupAttributeModifier(HueRequest):
    """Body of ``PUT /groups/<id>``."""

    name: Optional[str] = None
    lights: Optional[List[str]] = None
    class_: Optional[str] = Field(default=None, alias="class")


class GroupActionModifier(LightStateModifier):
    """Body of ``PUT /groups/<id>/action``; may recall a scene."""

    scene: Optional[str] = None
