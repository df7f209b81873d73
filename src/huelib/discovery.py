"""Bridge discovery, application key registration and the UPnP description."""

import logging
import uuid
import xml.etree.ElementTree as ET
from typing import List, Optional

import httpx
from pydantic import AnyHttpUrl, BaseModel, ValidationError

from . import codec
from .codec import ErrorItem
from .exceptions import DecodeError, HueConnectionError, HueStatusError, HueTimeoutError

logger = logging.getLogger(__name__)

NUPNP_URL = "https://discovery.meethue.com/"
UPNP_NAMESPACE = "urn:schemas-upnp-org:device-1-0"


class DiscoveredBridge(BaseModel):
    """A bridge announced by the vendor's discovery service."""

    id: str
    internalipaddress: str
    port: Optional[int] = None


class Registration(BaseModel):
    """Credentials returned when an application registers on a bridge."""

    username: str
    clientkey: Optional[str] = None


class DescriptionSpecVersion(BaseModel):
    major: int
    minor: int


class DescriptionIcon(BaseModel):
    mimetype: str
    height: int
    width: int
    depth: int
    url: str


class DescriptionDevice(BaseModel):
    device_type: str
    friendly_name: str
    manufacturer: str
    manufacturer_url: Optional[AnyHttpUrl] = None
    model_description: Optional[str] = None
    model_name: str
    model_number: Optional[str] = None
    model_url: Optional[AnyHttpUrl] = None
    serial_number: str
    udn: uuid.UUID
    presentation_url: Optional[str] = None
    icons: List[DescriptionIcon] = []


class Description(BaseModel):
    """The bridge's ``/description.xml`` UPnP document."""

    spec_version: DescriptionSpecVersion
    url_base: Optional[AnyHttpUrl] = None
    device: DescriptionDevice


async def _fetch(method: str, url: str, timeout: float, json_body=None) -> httpx.Response:
    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            if json_body is None:
                return await client.request(method, url)
            return await client.request(method, url, json=json_body)
    except httpx.TimeoutException as e:
        raise HueTimeoutError(f"Request to {url} timed out: {e}") from e
    except httpx.RequestError as e:
        raise HueConnectionError(f"Request to {url} failed: {e}") from e


async def discover_nupnp(timeout: float = 10.0) -> List[DiscoveredBridge]:
    """Discover bridges using Philips' N-UPnP service."""
    response = await _fetch("GET", NUPNP_URL, timeout)
    if response.status_code >= 400:
        raise HueStatusError(response.status_code, NUPNP_URL)
    data = codec.decode_json(response.content)
    if not isinstance(data, list):
        raise DecodeError(f"Expected a JSON array from {NUPNP_URL}, got {type(data).__name__}")
    try:
        bridges = [DiscoveredBridge.model_validate(entry) for entry in data]
    except ValidationError as e:
        raise DecodeError(f"Invalid discovery response: {e}") from e
    logger.info(f"Found {len(bridges)} bridge(s) via N-UPnP service")
    return bridges


def _bridge_root(bridge_ip: str) -> str:
    return f"http://[{bridge_ip}]" if ":" in bridge_ip else f"http://{bridge_ip}"


async def register_user(
    bridge_ip: str,
    devicetype: str = "huelib#python",
    generate_clientkey: bool = False,
    timeout: float = 10.0,
) -> Registration:
    """Create a new application key on the bridge.

    The link button on the bridge must have been pressed shortly before;
    otherwise the bridge answers with error 101, raised as ``BridgeError``.
    """
    body = {"devicetype": devicetype}
    if generate_clientkey:
        body["generateclientkey"] = True
    response = await _fetch("POST", f"{_bridge_root(bridge_ip)}/api", timeout, json_body=body)
    if response.status_code >= 400:
        raise HueStatusError(response.status_code, f"POST /api on {bridge_ip}")
    data = codec.decode_json(response.content)

    for item in codec.decode_response_items(data):
        if isinstance(item, ErrorItem):
            if item.error_type is codec.ErrorType.LINK_BUTTON_NOT_PRESSED:
                logger.warning("Link button not pressed. Press the link button on the bridge.")
            raise item.to_exception()
        if isinstance(item.payload, dict) and "username" in item.payload:
            logger.info(f"Registered {devicetype!r} on bridge {bridge_ip}")
            return Registration.model_validate(item.payload)
    raise DecodeError(f"Registration response has no username: {data!r}")


def _text(element: ET.Element, tag: str, required: bool = True) -> Optional[str]:
    child = element.find(f"{{{UPNP_NAMESPACE}}}{tag}")
    if child is None or child.text is None:
        if required:
            raise DecodeError(f"Missing <{tag}> in bridge description")
        return None
    return child.text.strip()


def parse_description(raw: bytes) -> Description:
    """Parse a UPnP device description document."""
    try:
        root = ET.fromstring(raw)
    except ET.ParseError as e:
        raise DecodeError(f"Invalid description XML: {e}") from e

    spec = root.find(f"{{{UPNP_NAMESPACE}}}specVersion")
    device = root.find(f"{{{UPNP_NAMESPACE}}}device")
    if spec is None or device is None:
        raise DecodeError("Bridge description lacks <specVersion> or <device>")

    icons = []
    icon_list = device.find(f"{{{UPNP_NAMESPACE}}}iconList")
    if icon_list is not None:
        for icon in icon_list.findall(f"{{{UPNP_NAMESPACE}}}icon"):
            icons.append(
                {
                    "mimetype": _text(icon, "mimetype"),
                    "height": _text(icon, "height"),
                    "width": _text(icon, "width"),
                    "depth": _text(icon, "depth"),
                    "url": _text(icon, "url"),
                }
            )

    udn = _text(device, "UDN")
    if udn.lower().startswith("uuid:"):
        udn = udn[5:]

    try:
        return Description.model_validate(
            {
                "spec_version": {
                    "major": _text(spec, "major"),
                    "minor": _text(spec, "minor"),
                },
                "url_base": _text(root, "URLBase", required=False),
                "device": {
                    "device_type": _text(device, "deviceType"),
                    "friendly_name": _text(device, "friendlyName"),
                    "manufacturer": _text(device, "manufacturer"),
                    "manufacturer_url": _text(device, "manufacturerURL", required=False),
                    "model_description": _text(device, "modelDescription", required=False),
                    "model_name": _text(device, "modelName"),
                    "model_number": _text(device, "modelNumber", required=False),
                    "model_url": _text(device, "modelURL", required=False),
                    "serial_number": _text(device, "serialNumber"),
                    "udn": udn,
                    "presentation_url": _text(device, "presentationURL", required=False),
                    "icons": icons,
                },
            }
        )
    except ValidationError as e:
        raise DecodeError(f"Invalid bridge description: {e}") from e


async def get_description(bridge_ip: str, timeout: float = 10.0) -> Description:
    """Fetch and parse the unauthenticated ``/description.xml`` of a bridge."""
    url = f"{_bridge_root(bridge_ip)}/description.xml"
    response = await _fetch("GET", url, timeout)
    if response.status_code >= 400:
        raise HueStatusError(response.status_code, url)
    return parse_description(response.content)
