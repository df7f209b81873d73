"""Bridge configuration (``/config``) and capabilities (``/capabilities``)."""

from typing import Dict, List, Optional

from pydantic import Field

from .common import BridgeDateTime, HueModel, HueRequest


class WhitelistEntry(HueModel):
    """An application key registered on the bridge."""

    name: str
    last_use_date: BridgeDateTime = Field(default=None, alias="last use date")
    create_date: BridgeDateTime = Field(default=None, alias="create date")


class BridgeSoftwareUpdate(HueModel):
    checkforupdate: Optional[bool] = None
    state: Optional[str] = None
    autoinstall: Optional[dict] = None
    lastchange: BridgeDateTime = None
    lastinstall: BridgeDateTime = None


class BridgeConfig(HueModel):
    """Bridge configuration.

    Unauthenticated requests only return the identification fields
    (``name``, ``bridgeid``, ``mac``, ``apiversion``, ``swversion`` ...).
    """

    name: str
    bridgeid: str
    mac: Optional[str] = None
    modelid: Optional[str] = None
    apiversion: Optional[str] = None
    swversion: Optional[str] = None
    datastoreversion: Optional[str] = None
    factorynew: Optional[bool] = None
    replacesbridgeid: Optional[str] = None
    starterkitid: Optional[str] = None
    zigbeechannel: Optional[int] = None
    dhcp: Optional[bool] = None
    ipaddress: Optional[str] = None
    netmask: Optional[str] = None
    gateway: Optional[str] = None
    proxyaddress: Optional[str] = None
    proxyport: Optional[int] = None
    UTC: BridgeDateTime = None
    localtime: BridgeDateTime = None
    timezone: Optional[str] = None
    linkbutton: Optional[bool] = None
    portalservices: Optional[bool] = None
    portalconnection: Optional[str] = None
    swupdate2: Optional[BridgeSoftwareUpdate] = None
    whitelist: Optional[Dict[str, WhitelistEntry]] = None


class ConfigModifier(HueRequest):
    """Body of ``PUT /config``."""

    name: Optional[str] = None
    zigbeechannel: Optional[int] = None
    ipaddress: Optional[str] = None
    dhcp: Optional[bool] = None
    netmask: Optional[str] = None
    gateway: Optional[str] = None
    proxyaddress: Optional[str] = None
    proxyport: Optional[int] = None
    linkbutton: Optional[bool] = None
    touchlink: Optional[bool] = None
    timezone: Optional[str] = None
    UTC: Optional[str] = None


class CapabilityCount(HueModel):
    """Free and total slots for one resource kind."""

    available: int
    total: Optional[int] = None


class SceneCapability(CapabilityCount):
    lightstates: Optional[CapabilityCount] = None


class RuleCapability(CapabilityCount):
    conditions: Optional[CapabilityCount] = None
    actions: Optional[CapabilityCount] = None


class TimezoneCapability(HueModel):
    values: List[str] = Field(default_factory=list)


class Capabilities(HueModel):
    """How many more resources of each kind the bridge can store."""

    lights: CapabilityCount
    sensors: Optional[CapabilityCount] = None
    groups: Optional[CapabilityCount] = None
    scenes: Optional[SceneCapability] = None
    schedules: Optional[CapabilityCount] = None
    rules: Optional[RuleCapability] = None
    resourcelinks: Optional[CapabilityCount] = None
    streaming: Optional[CapabilityCount] = None
    timezones: Optional[TimezoneCapability] = None
