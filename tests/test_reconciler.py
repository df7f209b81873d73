"""Unit tests for response reconciliation."""

import pytest
from pydantic import ValidationError

from huelib.codec import ErrorItem, RequestEnvelope, SuccessItem, decode_response_items
from huelib.exceptions import BridgeError
from huelib.reconciler import ReconciledResult, reconcile, split_address


@pytest.fixture
def put_light_state():
    return RequestEnvelope(method="PUT", path="lights/1/state", body={"on": True, "bri": 300})


class TestSplitAddress:
    """Test resource id extraction from response addresses."""

    def test_resource_field(self):
        assert split_address("/lights/3/state/on") == ("3", "state/on")

    def test_scene_lightstate(self):
        assert split_address("/scenes/ab34EFG/lightstates/1/on") == ("ab34EFG", "lightstates/1/on")

    def test_resource_without_field(self):
        assert split_address("/lights/1") == ("1", "")

    def test_singleton(self):
        assert split_address("/config/name") == (None, "config/name")

    def test_collection_endpoint(self):
        assert split_address("/lights/new") == (None, "lights/new")

    def test_empty(self):
        assert split_address("") == (None, "")
        assert split_address("/") == (None, "")


class TestReconcile:
    """Test per-resource correlation of response items."""

    def test_empty_array(self, put_light_state):
        """An empty array is an empty result, not an error."""
        result = reconcile([], put_light_state)

        assert result.per_resource == {}
        assert result.request_level_errors == []
        assert result.ok is True

    def test_single_success(self):
        envelope = RequestEnvelope(method="PUT", path="lights/3/state", body={"on": True})
        items = decode_response_items([{"success": {"/lights/3/state/on": True}}])

        result = reconcile(items, envelope)

        assert result.per_resource["3"].applied_fields == {"state/on": True}
        assert result.per_resource["3"].errors == []

    def test_request_level_error(self):
        """Errors without a resolvable resource id are kept at request level."""
        envelope = RequestEnvelope(method="PUT", path="config", body={"foo": 1})
        items = decode_response_items(
            [{"error": {"type": 201, "address": "", "description": "parameter not available"}}]
        )

        result = reconcile(items, envelope)

        assert result.per_resource == {}
        assert len(result.request_level_errors) == 1
        error = result.request_level_errors[0]
        assert error.type == 201
        assert error.description == "parameter not available"

    def test_mixed_success_and_error_same_resource(self, put_light_state):
        """A partially applied update keeps both the success and the error."""
        items = decode_response_items([
            {"success": {"/lights/1/state/on": True}},
            {"error": {
                "type": 7,
                "address": "/lights/1/state/bri",
                "description": "invalid value, 300, for parameter, bri",
            }},
        ])

        result = reconcile(items, put_light_state)

        light = result.per_resource["1"]
        assert light.applied_fields == {"state/on": True}
        assert len(light.errors) == 1
        assert light.errors[0].type == 7
        assert light.errors[0].address == "/lights/1/state/bri"
        assert result.ok is False

    def test_errors_only(self, put_light_state):
        items = decode_response_items([
            {"error": {"type": 201, "address": "/lights/1/state/bri",
                       "description": "parameter, bri, is not modifiable. Device is set to off."}},
        ])

        result = reconcile(items, put_light_state)

        assert result.per_resource["1"].applied_fields == {}
        assert [e.type for e in result.errors] == [201]

    def test_correlation_ignores_position(self):
        """Items are matched by address even when interleaved across resources."""
        envelope = RequestEnvelope(method="PUT", path="groups/0/action", body={"on": True})
        items = decode_response_items([
            {"success": {"/groups/0/action/on": True}},
            {"error": {"type": 3, "address": "/groups/7/action", "description": "resource not available"}},
            {"success": {"/groups/0/action/bri": 100}},
        ])

        result = reconcile(items, envelope)

        assert result.per_resource["0"].applied_fields == {"action/on": True, "action/bri": 100}
        assert result.per_resource["7"].errors[0].type == 3

    def test_order_preserved_within_resource(self, put_light_state):
        items = [
            SuccessItem(payload={"/lights/1/state/xy": [0.3, 0.4]}),
            SuccessItem(payload={"/lights/1/state/on": True}),
        ]

        result = reconcile(items, put_light_state)

        assert list(result.per_resource["1"].applied_fields) == ["state/xy", "state/on"]

    def test_creation(self):
        envelope = RequestEnvelope(method="POST", path="groups", body={"lights": ["1"]})
        result = reconcile([SuccessItem(payload={"id": "5"})], envelope)

        assert result.created_ids == ["5"]
        assert result.created_id == "5"
        assert "5" in result.per_resource

    def test_deletion(self):
        envelope = RequestEnvelope(method="DELETE", path="lights/1")
        result = reconcile([SuccessItem(payload="/lights/1 deleted")], envelope)

        assert result.per_resource["1"].applied_fields == {"": "deleted"}

    def test_request_level_success(self):
        envelope = RequestEnvelope(method="PUT", path="config", body={"name": "Hue"})
        result = reconcile([SuccessItem(payload={"/config/name": "Hue"})], envelope)

        assert result.per_resource == {}
        assert result.request_level_applied == {"config/name": "Hue"}

    def test_idempotent(self, put_light_state):
        """Reconciling the same input twice gives equal results."""
        raw = [
            {"success": {"/lights/1/state/on": True}},
            {"error": {"type": 7, "address": "/lights/1/state/bri", "description": "invalid value"}},
            {"error": {"type": 1, "address": "/", "description": "unauthorized user"}},
        ]

        first = reconcile(decode_response_items(raw), put_light_state)
        second = reconcile(decode_response_items(raw), put_light_state)

        assert first == second
        assert isinstance(first, ReconciledResult)

    def test_does_not_mutate_input(self, put_light_state):
        items = [SuccessItem(payload={"/lights/1/state/on": True})]
        reconcile(items, put_light_state)
        assert items == [SuccessItem(payload={"/lights/1/state/on": True})]

    def test_raise_for_errors(self, put_light_state):
        items = [ErrorItem(type=7, address="/lights/1/state/bri", description="invalid value")]
        result = reconcile(items, put_light_state)

        with pytest.raises(BridgeError) as exc_info:
            result.raise_for_errors()
        assert exc_info.value.code == 7
        assert exc_info.value.address == "/lights/1/state/bri"

    def test_raise_for_errors_without_errors(self, put_light_state):
        result = reconcile([SuccessItem(payload={"/lights/1/state/on": True})], put_light_state)
        result.raise_for_errors()

    def test_rejected_group_creation(self):
        """Parameter errors of a create are not filed under a resource."""
        envelope = RequestEnvelope(method="POST", path="groups", body={"lights": ["99"]})
        items = decode_response_items([
            {"error": {"type": 7, "address": "/groups/lights",
                       "description": "invalid value, 99, for parameter, lights"}},
        ])

        result = reconcile(items, envelope)

        assert result.per_resource == {}
        assert [e.address for e in result.request_level_errors] == ["/groups/lights"]
        assert result.created_ids == []

    def test_rejected_schedule_creation(self):
        envelope = RequestEnvelope(method="POST", path="schedules", body={"localtime": "tomorrow"})
        items = decode_response_items([
            {"error": {"type": 7, "address": "/schedules/localtime",
                       "description": "invalid value, tomorrow, for parameter, localtime"}},
            {"error": {"type": 6, "address": "/schedules/colour",
                       "description": "parameter, colour, not available"}},
        ])

        result = reconcile(items, envelope)

        assert result.per_resource == {}
        assert [e.type for e in result.request_level_errors] == [7, 6]

    def test_collection_success_stays_request_level(self):
        envelope = RequestEnvelope(method="POST", path="sensors", body={"name": "Flag"})
        result = reconcile([SuccessItem(payload={"/sensors/name": "Flag"})], envelope)

        assert result.per_resource == {}
        assert result.request_level_applied == {"sensors/name": "Flag"}

    def test_result_is_immutable(self, put_light_state):
        result = reconcile([SuccessItem(payload={"/lights/1/state/on": True})], put_light_state)

        with pytest.raises(ValidationError):
            result.per_resource["1"].applied_fields = {}
        with pytest.raises(ValidationError):
            result.created_ids = ["2"]
