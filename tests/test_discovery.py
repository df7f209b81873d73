"""Unit tests for discovery, registration and the UPnP description."""

import json
import uuid

import pytest
from unittest.mock import AsyncMock, MagicMock, patch
import httpx

from huelib.discovery import discover_nupnp, get_description, parse_description, register_user
from huelib.exceptions import BridgeError, DecodeError, HueConnectionError, HueStatusError

DESCRIPTION_XML = b"""<?xml version="1.0" encoding="UTF-8" ?>
<root xmlns="urn:schemas-upnp-org:device-1-0">
<specVersion>
<major>1</major>
<minor>0</minor>
</specVersion>
<URLBase>http://192.168.1.64:80/</URLBase>
<device>
<deviceType>urn:schemas-upnp-org:device:Basic:1</deviceType>
<friendlyName>Philips hue (192.168.1.64)</friendlyName>
<manufacturer>Signify</manufacturer>
<manufacturerURL>http://www.philips-hue.com</manufacturerURL>
<modelDescription>Philips hue Personal Wireless Lighting</modelDescription>
<modelName>Philips hue bridge 2015</modelName>
<modelNumber>BSB002</modelNumber>
<modelURL>http://www.philips-hue.com</modelURL>
<serialNumber>001788010203</serialNumber>
<UDN>uuid:2f402f80-da50-11e1-9b23-001788010203</UDN>
<presentationURL>index.html</presentationURL>
<iconList>
<icon>
<mimetype>image/png</mimetype>
<height>48</height>
<width>48</width>
<depth>24</depth>
<url>hue_logo_0.png</url>
</icon>
</iconList>
</device>
</root>
"""


def _response(status_code=200, content=b"[]"):
    response = MagicMock()
    response.status_code = status_code
    response.content = content
    return response


@pytest.fixture
def mock_http():
    """Patch httpx.AsyncClient in the discovery module."""
    with patch("huelib.discovery.httpx.AsyncClient") as mock_client_class:
        mock_client = AsyncMock()
        mock_client_class.return_value.__aenter__.return_value = mock_client
        mock_client_class.return_value.__aexit__.return_value = None
        yield mock_client


class TestDescription:
    """Test UPnP description parsing."""

    def test_parse_description(self):
        description = parse_description(DESCRIPTION_XML)

        assert description.spec_version.major == 1
        assert str(description.url_base) == "http://192.168.1.64/"
        assert description.device.model_number == "BSB002"
        assert description.device.udn == uuid.UUID("2f402f80-da50-11e1-9b23-001788010203")
        assert description.device.icons[0].width == 48

    def test_invalid_xml(self):
        with pytest.raises(DecodeError):
            parse_description(b"<root><device>")

    def test_missing_element(self):
        xml = DESCRIPTION_XML.replace(b"<serialNumber>001788010203</serialNumber>", b"")
        with pytest.raises(DecodeError):
            parse_description(xml)

    def test_invalid_udn(self):
        xml = DESCRIPTION_XML.replace(b"2f402f80-da50-11e1-9b23-001788010203", b"not-a-uuid")
        with pytest.raises(DecodeError):
            parse_description(xml)

    async def test_get_description(self, mock_http):
        mock_http.request.return_value = _response(200, DESCRIPTION_XML)

        description = await get_description("192.168.1.64")

        assert description.device.serial_number == "001788010203"
        mock_http.request.assert_called_once_with("GET", "http://192.168.1.64/description.xml")


class TestDiscovery:
    """Test N-UPnP discovery."""

    async def test_discover_nupnp(self, mock_http):
        mock_http.request.return_value = _response(
            200, json.dumps([{"id": "001788fffe010203", "internalipaddress": "192.168.1.64", "port": 443}]).encode()
        )

        bridges = await discover_nupnp()

        assert len(bridges) == 1
        assert bridges[0].internalipaddress == "192.168.1.64"

    async def test_discover_nupnp_rate_limited(self, mock_http):
        mock_http.request.return_value = _response(429, b"Too Many Requests")

        with pytest.raises(HueStatusError):
            await discover_nupnp()

    async def test_discover_nupnp_connection_error(self, mock_http):
        mock_http.request.side_effect = httpx.ConnectError("no network")

        with pytest.raises(HueConnectionError):
            await discover_nupnp()


class TestRegistration:
    """Test application key registration."""

    async def test_register_user(self, mock_http):
        mock_http.request.return_value = _response(
            200, json.dumps([{"success": {"username": "83b7780291a6ceffbe0bd049104df", "clientkey": "33DDAD"}}]).encode()
        )

        registration = await register_user("192.168.1.64", "huelib#tests", generate_clientkey=True)

        assert registration.username == "83b7780291a6ceffbe0bd049104df"
        assert registration.clientkey == "33DDAD"
        mock_http.request.assert_called_once_with(
            "POST",
            "http://192.168.1.64/api",
            json={"devicetype": "huelib#tests", "generateclientkey": True},
        )

    async def test_link_button_not_pressed(self, mock_http):
        mock_http.request.return_value = _response(
            200, json.dumps([{"error": {"type": 101, "address": "", "description": "link button not pressed"}}]).encode()
        )

        with pytest.raises(BridgeError) as exc_info:
            await register_user("192.168.1.64")
        assert exc_info.value.code == 101
        assert exc_info.value.description == "link button not pressed"

    async def test_unexpected_success(self, mock_http):
        mock_http.request.return_value = _response(200, json.dumps([{"success": {"foo": "bar"}}]).encode())

        with pytest.raises(DecodeError):
            await register_user("192.168.1.64")
