"""Light resources and the request bodies that modify them."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from .common import Alert, BridgeDateTime, ColorMode, Effect, HueModel, HueRequest, HueResource


class Color(BaseModel):
    """A color as CIE xy coordinates plus an optional brightness."""

    xy: List[float] = Field(min_length=2, max_length=2)
    bri: Optional[int] = None

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> "Color":
        """Convert an sRGB color into xy coordinates and brightness."""
        for component in (red, green, blue):
            if not 0 <= component <= 255:
                raise ValueError(f"RGB component out of range: {component}")

        def linear(c: float) -> float:
            c = c / 255.0
            return ((c + 0.055) / 1.055) ** 2.4 if c > 0.04045 else c / 12.92

        r, g, b = linear(red), linear(green), linear(blue)
        x = r * 0.649926 + g * 0.103455 + b * 0.197109
        y = r * 0.234327 + g * 0.743075 + b * 0.022598
        z = g * 0.053077 + b * 1.035763
        total = x + y + z
        if total == 0:
            return cls(xy=[0.0, 0.0], bri=0)
        bri = round(min(y, 1.0) * 254)
        return cls(xy=[round(x / total, 4), round(y / total, 4)], bri=bri)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Convert a ``#rrggbb`` string."""
        value = value.lstrip("#")
        if len(value) != 6:
            raise ValueError(f"Expected a 6 digit hex color, got {value!r}")
        return cls.from_rgb(int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


class LightState(HueModel):
    """Current state of a light."""

    on: Optional[bool] = None
    bri: Optional[int] = None
    hue: Optional[int] = None
    sat: Optional[int] = None
    xy: Optional[List[float]] = None
    ct: Optional[int] = None
    alert: Optional[Alert] = None
    effect: Optional[Effect] = None
    colormode: Optional[ColorMode] = None
    mode: Optional[str] = None
    reachable: bool


class SoftwareUpdate(HueModel):
    state: str
    lastinstall: BridgeDateTime = None


class StartupConfig(HueModel):
    mode: str
    configured: bool


class LightConfig(HueModel):
    archetype: Optional[str] = None
    function: Optional[str] = None
    direction: Optional[str] = None
    startup: Optional[StartupConfig] = None


class ColorTemperatureRange(HueModel):
    min: int
    max: int


class ControlCapabilities(HueModel):
    mindimlevel: Optional[int] = None
    maxlumen: Optional[int] = None
    colorgamut: Optional[List[List[float]]] = None
    colorgamuttype: Optional[str] = None
    ct: Optional[ColorTemperatureRange] = None


class StreamingCapabilities(HueModel):
    renderer: bool
    proxy: bool


class LightCapabilities(HueModel):
    certified: Optional[bool] = None
    control: Optional[ControlCapabilities] = None
    streaming: Optional[StreamingCapabilities] = None


class Light(HueResource):
    """A light connected to the bridge."""

    name: str
    type: str
    state: LightState
    modelid: Optional[str] = None
    uniqueid: Optional[str] = None
    manufacturername: Optional[str] = None
    productname: Optional[str] = None
    productid: Optional[str] = None
    swversion: Optional[str] = None
    swupdate: Optional[SoftwareUpdate] = None
    config: Optional[LightConfig] = None
    capabilities: Optional[LightCapabilities] = None


class LightAttributeModifier(HueRequest):
    """Body of ``PUT /lights/<id>``."""

    name: Optional[str] = None


class StaticLightState(HueRequest):
    """A light state stored in a scene.

    Unlike :class:`LightStateModifier` it cannot increment values or trigger
    an alert.
    """

    on: Optional[bool] = None
    bri: Optional[int] = None
    hue: Optional[int] = None
    sat: Optional[int] = None
    xy: Optional[List[float]] = None
    ct: Optional[int] = None
    effect: Optional[Effect] = None
    transitiontime: Optional[int] = None

    def with_color(self, color: Color) -> "StaticLightState":
        update: Dict[str, object] = {"xy": color.xy}
        if color.bri is not None:
            update["bri"] = color.bri
        return self.model_copy(update=update)


class LightStateModifier(HueRequest):
    """Body of ``PUT /lights/<id>/state``.

    ``transitiontime`` is a multiple of 100ms. The ``*_inc`` fields adjust
    the current value instead of overriding it.
    """

    on: Optional[bool] = None
    bri: Optional[int] = None
    hue: Optional[int] = None
    sat: Optional[int] = None
    xy: Optional[List[float]] = None
    ct: Optional[int] = None
    alert: Optional[Alert] = None
    effect: Optional[Effect] = None
    transitiontime: Optional[int] = None
    bri_inc: Optional[int] = None
    sat_inc: Optional[int] = None
    hue_inc: Optional[int] = None
    ct_inc: Optional[int] = None
    xy_inc: Optional[List[float]] = None

    @field_validator("xy", "xy_inc")
    @classmethod
    def validate_pair(cls, v):
        """Coordinates always come as an x/y pair."""
        if v is not None and len(v) != 2:
            raise ValueError("xy values must have exactly two coordinates")
        return v

    def with_color(self, color: Color) -> "LightStateModifier":
        """Set ``xy`` and, when the color carries one, ``bri``."""
        update: Dict[str, object] = {"xy": color.xy}
        if color.bri is not None:
            update["bri"] = color.bri
        return self.model_copy(update=update)


class Scanner(HueRequest):
    """Body of ``POST /lights`` or ``POST /sensors`` starting a search."""

    deviceid: Optional[List[str]] = None

    @field_validator("deviceid")
    @classmethod
    def validate_device_ids(cls, v):
        """The bridge accepts at most 10 serial numbers per search."""
        if v is not None and len(v) > 10:
            raise ValueError("At most 10 device ids can be searched for")
        return v


class Scan(BaseModel):
    """Result of ``GET /lights/new`` or ``GET /sensors/new``.

    ``lastscan`` is ``"active"`` while a search runs, ``"none"`` if no search
    ran yet, otherwise the time the last search finished.
    """

    lastscan: str
    devices: Dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def collect_devices(cls, data):
        """Fold the id-keyed entries next to ``lastscan`` into ``devices``."""
        if not isinstance(data, dict) or "devices" in data:
            return data
        devices = {}
        for key, value in data.items():
            if key == "lastscan":
                continue
            if not isinstance(value, dict) or "name" not in value:
                raise ValueError(f"Unexpected scan entry {key!r}: {value!r}")
            devices[key] = value["name"]
        return {"lastscan": data.get("lastscan"), "devices": devices}

    @property
    def active(self) -> bool:
        return self.lastscan == "active"
