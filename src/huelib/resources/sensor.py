"""Sensors: ZigBee devices, daylight and CLIP (software) sensors."""

from typing import Optional

from pydantic import ConfigDict

from .common import BridgeDateTime, HueModel, HueRequest, HueResource


class SensorState(HueModel):
    """Sensor state; the remaining fields depend on the sensor type."""

    lastupdated: BridgeDateTime = None


class SensorConfig(HueModel):
    """Sensor configuration; the remaining fields depend on the sensor type."""

    on: Optional[bool] = None
    reachable: Optional[bool] = None
    battery: Optional[int] = None


class Sensor(HueResource):
    name: str
    type: str
    state: SensorState
    config: SensorConfig
    modelid: Optional[str] = None
    manufacturername: Optional[str] = None
    productname: Optional[str] = None
    uniqueid: Optional[str] = None
    swversion: Optional[str] = None
    recycle: Optional[bool] = None


class SensorCreator(HueRequest):
    """Body of ``POST /sensors``, which creates a CLIP sensor."""

    model_config = ConfigDict(extra="allow")

    name: str
    type: str
    modelid: str
    swversion: str
    uniqueid: str
    manufacturername: str
    state: Optional[dict] = None
    config: Optional[dict] = None
    recycle: Optional[bool] = None


class SensorAttributeModifier(HueRequest):
    """Body of ``PUT /sensors/<id>``."""

    name: Optional[str] = None


class SensorStateModifier(HueRequest):
    """Body of ``PUT /sensors/<id>/state``.

    Writable state fields depend on the sensor type (``presence``, ``flag``,
    ``status`` ...), so any field is accepted.
    """

    model_config = ConfigDict(extra="allow")


class SensorConfigModifier(HueRequest):
    """Body of ``PUT /sensors/<id>/config``."""

    model_config = ConfigDict(extra="allow")

    on: Optional[bool] = None
