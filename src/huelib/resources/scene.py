"""Scene resources."""

from typing import Any, Dict, List, Optional

from .common import BridgeDateTime, HueModel, HueRequest, HueResource
from .light import StaticLightState


class SceneAppData(HueModel):
    version: Optional[int] = None
    data: Optional[str] = None


class Scene(HueResource):
    """A scene stored on the bridge.

    ``lightstates`` is only returned when a single scene is requested.
    """

    name: str
    lights: List[str]
    type: Optional[str] = None
    group: Optional[str] = None
    owner: Optional[str] = None
    recycle: Optional[bool] = None
    locked: Optional[bool] = None
    appdata: Optional[SceneAppData] = None
    picture: Optional[str] = None
    image: Optional[str] = None
    lastupdated: BridgeDateTime = None
    version: Optional[int] = None
    lightstates: Optional[Dict[str, Dict[str, Any]]] = None


class SceneCreator(HueRequest):
    """Body of ``POST /scenes``.

    A ``GroupScene`` sets ``group`` and leaves ``lights`` empty; a
    ``LightScene`` lists its ``lights``.
    """

    name: str
    type: Optional[str] = None
    group: Optional[str] = None
    lights: Optional[List[str]] = None
    recycle: Optional[bool] = None
    appdata: Optional[Dict[str, Any]] = None
    picture: Optional[str] = None
    transitiontime: Optional[int] = None
    lightstates: Optional[Dict[str, StaticLightState]] = None


class SceneModifier(HueRequest):
    """Body of ``PUT /scenes/<id>``."""

    name: Optional[str] = None
    lights: Optional[List[str]] = None
    storelightstate: Optional[bool] = None
    transitiontime: Optional[int] = None
    lightstates: Optional[Dict[str, StaticLightState]] = None
