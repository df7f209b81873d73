"""Pytest configuration and fixtures for huelib tests."""

import json

import pytest
from unittest.mock import AsyncMock, MagicMock

from huelib.config import HueConfig
from huelib.hue_client import AsyncHueClient


@pytest.fixture
def hue_config():
    """Configuration for a test bridge."""
    return HueConfig(
        bridge_ip="192.168.1.64",
        username="test_username_0123456789",
    )


@pytest.fixture
def mock_hue_response_success():
    """Mock successful Hue API response."""
    return [{"success": {"/lights/1/state/on": True}}]


@pytest.fixture
def mock_hue_response_error():
    """Mock error Hue API response."""
    return [{
        "error": {
            "type": 3,
            "address": "/lights/99",
            "description": "resource, /lights/99, not available"
        }
    }]


@pytest.fixture
def mock_light_response():
    """Mock response for a single light."""
    return {
        "state": {
            "on": True,
            "bri": 200,
            "hue": 13088,
            "sat": 212,
            "effect": "none",
            "xy": [0.5128, 0.4147],
            "ct": 467,
            "alert": "none",
            "colormode": "xy",
            "mode": "homeautomation",
            "reachable": True
        },
        "swupdate": {"state": "noupdates", "lastinstall": "2018-01-02T19:24:20"},
        "type": "Extended color light",
        "name": "Living Room Light",
        "modelid": "LCT007",
        "manufacturername": "Philips",
        "productname": "Hue color lamp",
        "capabilities": {
            "certified": True,
            "control": {
                "mindimlevel": 5000,
                "maxlumen": 600,
                "colorgamuttype": "B",
                "colorgamut": [[0.675, 0.322], [0.409, 0.518], [0.167, 0.04]],
                "ct": {"min": 153, "max": 500}
            },
            "streaming": {"renderer": True, "proxy": False}
        },
        "config": {
            "archetype": "sultanbulb",
            "function": "mixed",
            "direction": "omnidirectional"
        },
        "uniqueid": "00:17:88:01:10:3e:3d:f2-0b",
        "swversion": "5.105.0.21169"
    }


@pytest.fixture
def mock_lights_response():
    """Mock response for listing all lights."""
    return {
        "1": {
            "name": "Living Room Light",
            "state": {"on": True, "bri": 200, "ct": 366, "reachable": True},
            "type": "Extended color light"
        },
        "2": {
            "name": "Kitchen Light",
            "state": {"on": False, "bri": 100, "ct": 300, "reachable": True},
            "type": "Dimmable light"
        }
    }


@pytest.fixture
def mock_bridge_config():
    """Mock bridge configuration response."""
    return {
        "name": "Test Bridge",
        "swversion": "1.50.1963220030",
        "apiversion": "1.50.0",
        "mac": "00:17:88:01:02:03",
        "bridgeid": "001788FFFE010203",
        "modelid": "BSB002",
        "zigbeechannel": 15,
        "dhcp": True,
        "proxyaddress": "none",
        "proxyport": 0,
        "UTC": "2024-03-01T12:00:00",
        "localtime": "2024-03-01T13:00:00",
        "timezone": "Europe/Berlin",
        "whitelist": {
            "test_username_0123456789": {
                "last use date": "2024-03-01T12:00:00",
                "create date": "2023-01-01T08:00:00",
                "name": "huelib#tests"
            }
        }
    }


@pytest.fixture
def mock_httpx_response():
    """Mock httpx.Response object."""
    response = MagicMock()
    response.status_code = 200
    response.content = json.dumps([{"success": {"/lights/1/state/on": True}}]).encode()
    return response


@pytest.fixture
def mock_transport(hue_config):
    """AsyncHueClient whose ``send`` is mocked; set ``respond`` to queue answers."""
    client = AsyncHueClient(hue_config)
    client.send = AsyncMock()

    def respond(payload, status=200):
        raw = payload if isinstance(payload, bytes) else json.dumps(payload).encode()
        client.send.return_value = (status, raw)

    client.respond = respond
    return client
