"""Unit tests for light models and color conversion."""

import pytest
from pydantic import ValidationError

from huelib import codec
from huelib.exceptions import DecodeError
from huelib.resources import Color, LightStateModifier, Scan, Scanner, StaticLightState


class TestColor:
    """Test sRGB to CIE xy conversion."""

    def test_red(self):
        color = Color.from_rgb(255, 0, 0)
        assert color.xy == pytest.approx([0.735, 0.265], abs=1e-3)
        assert color.bri == 60

    def test_white_is_full_brightness(self):
        color = Color.from_rgb(255, 255, 255)
        assert color.bri == 254
        assert color.xy == pytest.approx([0.3127, 0.329], abs=1e-3)

    def test_black(self):
        assert Color.from_rgb(0, 0, 0) == Color(xy=[0.0, 0.0], bri=0)

    def test_from_hex(self):
        assert Color.from_hex("#ff0000") == Color.from_rgb(255, 0, 0)

    @pytest.mark.parametrize("rgb", [(-1, 0, 0), (0, 256, 0)])
    def test_out_of_range(self, rgb):
        with pytest.raises(ValueError):
            Color.from_rgb(*rgb)

    def test_invalid_hex(self):
        with pytest.raises(ValueError):
            Color.from_hex("#fff")


class TestLightStateModifier:
    """Test the light state request body."""

    def test_with_color(self):
        modifier = LightStateModifier(on=True, transitiontime=4).with_color(
            Color(xy=[0.3, 0.4], bri=100)
        )
        assert codec.encode(modifier) == {"on": True, "transitiontime": 4, "xy": [0.3, 0.4], "bri": 100}

    def test_with_color_keeps_brightness(self):
        modifier = LightStateModifier(bri=50).with_color(Color(xy=[0.3, 0.4]))
        assert modifier.bri == 50

    def test_increments(self):
        body = codec.encode(LightStateModifier(bri_inc=-254, ct_inc=10, xy_inc=[0.01, -0.01]))
        assert body == {"bri_inc": -254, "ct_inc": 10, "xy_inc": [0.01, -0.01]}

    def test_xy_needs_two_coordinates(self):
        with pytest.raises(ValidationError):
            LightStateModifier(xy=[0.3])

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            LightStateModifier(brightness=100)

    def test_static_state_with_color(self):
        state = StaticLightState(on=True).with_color(Color(xy=[0.5, 0.4], bri=10))
        assert codec.encode(state) == {"on": True, "xy": [0.5, 0.4], "bri": 10}


class TestScan:
    """Test new device scan results."""

    def test_scan_result(self):
        scan = codec.decode(Scan, {"7": {"name": "Hue Lamp 7"}, "8": {"name": "Hue Lamp 8"},
                                   "lastscan": "2012-10-29T12:00:00"})
        assert scan.devices == {"7": "Hue Lamp 7", "8": "Hue Lamp 8"}
        assert scan.lastscan == "2012-10-29T12:00:00"

    def test_scan_without_search(self):
        scan = codec.decode(Scan, {"lastscan": "none"})
        assert scan.devices == {}
        assert scan.active is False

    def test_malformed_scan(self):
        with pytest.raises(DecodeError):
            codec.decode(Scan, {"lastscan": "none", "7": "Hue Lamp 7"})

    def test_scanner_limit(self):
        with pytest.raises(ValidationError):
            Scanner(deviceid=[str(i) for i in range(11)])
