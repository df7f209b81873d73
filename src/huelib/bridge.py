"""Resource client facade: one coroutine per bridge operation."""

import logging
from typing import Any, List, Optional, Type, TypeVar

from . import codec
from .codec import RequestEnvelope
from .config import HueConfig
from .exceptions import DecodeError, HueError, HueStatusError, HueValidationError
from .hue_client import AsyncHueClient
from .reconciler import ReconciledResult, reconcile
from .resources import (
    BridgeConfig,
    Capabilities,
    ConfigModifier,
    Group,
    GroupActionModifier,
    GroupAttributeModifier,
    GroupCreator,
    HueRequest,
    Light,
    LightAttributeModifier,
    LightStateModifier,
    Resourcelink,
    ResourcelinkCreator,
    ResourcelinkModifier,
    Rule,
    RuleCreator,
    RuleModifier,
    Scan,
    Scanner,
    Scene,
    SceneCreator,
    SceneModifier,
    Schedule,
    ScheduleCreator,
    ScheduleModifier,
    Sensor,
    SensorAttributeModifier,
    SensorConfigModifier,
    SensorCreator,
    SensorStateModifier,
    StaticLightState,
)

logger = logging.getLogger(__name__)

R = TypeVar("R")


def _require(value: Any, name: str) -> str:
    """Validate a path parameter is present and return it as a string."""
    if value is None:
        raise HueValidationError(f"{name} is required")
    value = str(value).strip()
    if not value or "/" in value:
        raise HueValidationError(f"Invalid {name}: {value!r}")
    return value


class Bridge:
    """Typed access to one Hue bridge.

    Every call is an independent request/response cycle; the only state held
    is the immutable connection configuration, so one instance can be shared
    by concurrent tasks. Use it as an async context manager to reuse pooled
    connections across calls.

    Reads return decoded resources and raise :class:`BridgeError` when the
    bridge answers with an error instead. Writes return a
    :class:`ReconciledResult` holding per-resource successes and errors.
    """

    def __init__(self, config: HueConfig, client: Optional[AsyncHueClient] = None):
        self.config = config
        self._client = client or AsyncHueClient(config)

    async def __aenter__(self):
        await self._client.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self._client.__aexit__(exc_type, exc_val, exc_tb)

    # Plumbing

    async def _execute(self, envelope: RequestEnvelope) -> Any:
        """Send an envelope and return the decoded JSON body."""
        status, raw = await self._client.send(envelope.method, envelope.path, envelope.body)
        if status >= 400:
            try:
                data = codec.decode_json(raw)
            except DecodeError:
                data = None
            if not codec.is_response_array(data) or not data:
                raise HueStatusError(status, f"{envelope.method} /{envelope.path}")
            return data
        return codec.decode_json(raw)

    async def _read(self, path: str) -> Any:
        data = await self._execute(RequestEnvelope(method="GET", path=path))
        codec.raise_for_bridge_error(data)
        return data

    async def _get(self, model_cls: Type[R], collection: str, resource_id: Any) -> R:
        resource_id = _require(resource_id, "resource id")
        data = await self._read(f"{collection}/{resource_id}")
        return codec.decode(model_cls, data, resource_id=resource_id)

    async def _get_all(self, model_cls: Type[R], collection: str) -> List[R]:
        data = await self._read(collection)
        return codec.decode_collection(model_cls, data)

    async def _write(
        self, method: str, path: str, body: Optional[HueRequest] = None
    ) -> ReconciledResult:
        envelope = RequestEnvelope(
            method=method,
            path=path,
            body=codec.encode(body) if body is not None else None,
        )
        data = await self._execute(envelope)
        items = codec.decode_response_items(data)
        return reconcile(items, envelope)

    async def _modify(
        self, collection: str, resource_id: Any, suffix: str, modifier: HueRequest
    ) -> ReconciledResult:
        resource_id = _require(resource_id, "resource id")
        path = f"{collection}/{resource_id}"
        if suffix:
            path = f"{path}/{suffix}"
        return await self._write("PUT", path, modifier)

    async def _delete(self, collection: str, resource_id: Any) -> ReconciledResult:
        resource_id = _require(resource_id, "resource id")
        return await self._write("DELETE", f"{collection}/{resource_id}")

    # Configuration

    async def get_config(self) -> BridgeConfig:
        """Get bridge configuration."""
        return codec.decode(BridgeConfig, await self._read("config"))

    async def set_config(self, modifier: ConfigModifier) -> ReconciledResult:
        """Modify the bridge configuration."""
        return await self._write("PUT", "config", modifier)

    async def get_capabilities(self) -> Capabilities:
        """Get the remaining capacity of the bridge per resource kind."""
        return codec.decode(Capabilities, await self._read("capabilities"))

    async def test_connection(self) -> bool:
        """Test connection to the bridge."""
        try:
            await self.get_config()
            logger.info(f"Successfully connected to Hue bridge at {self.config.bridge_ip}")
            return True
        except HueError as e:
            logger.error(f"Failed to connect to Hue bridge: {e}")
            return False

    # Lights

    async def get_light(self, light_id: Any) -> Light:
        return await self._get(Light, "lights", light_id)

    async def get_all_lights(self) -> List[Light]:
        """Get all lights from the bridge."""
        return await self._get_all(Light, "lights")

    async def set_light_attribute(
        self, light_id: Any, modifier: LightAttributeModifier
    ) -> ReconciledResult:
        return await self._modify("lights", light_id, "", modifier)

    async def set_light_state(
        self, light_id: Any, modifier: LightStateModifier
    ) -> ReconciledResult:
        """Change the state of a light."""
        return await self._modify("lights", light_id, "state", modifier)

    async def search_new_lights(self, scanner: Optional[Scanner] = None) -> ReconciledResult:
        """Start a search for new lights.

        The bridge keeps the network open for 40 seconds; results are read
        with :meth:`get_new_lights`.
        """
        return await self._write("POST", "lights", scanner or Scanner())

    async def get_new_lights(self) -> Scan:
        return codec.decode(Scan, await self._read("lights/new"))

    async def delete_light(self, light_id: Any) -> ReconciledResult:
        return await self._delete("lights", light_id)

    # Groups

    async def create_group(self, creator: GroupCreator) -> ReconciledResult:
        return await self._write("POST", "groups", creator)

    async def get_group(self, group_id: Any) -> Group:
        return await self._get(Group, "groups", group_id)

    async def get_all_groups(self) -> List[Group]:
        """Get all groups from the bridge."""
        return await self._get_all(Group, "groups")

    async def set_group_attribute(
        self, group_id: Any, modifier: GroupAttributeModifier
    ) -> ReconciledResult:
        return await self._modify("groups", group_id, "", modifier)

    async def set_group_state(
        self, group_id: Any, modifier: GroupActionModifier
    ) -> ReconciledResult:
        """Apply an action to every light of a group (group 0 is all lights)."""
        return await self._modify("groups", group_id, "action", modifier)

    async def delete_group(self, group_id: Any) -> ReconciledResult:
        return await self._delete("groups", group_id)

    # Scenes

    async def create_scene(self, creator: SceneCreator) -> ReconciledResult:
        return await self._write("POST", "scenes", creator)

    async def get_scene(self, scene_id: Any) -> Scene:
        return await self._get(Scene, "scenes", scene_id)

    async def get_all_scenes(self) -> List[Scene]:
        return await self._get_all(Scene, "scenes")

    async def set_scene(self, scene_id: Any, modifier: SceneModifier) -> ReconciledResult:
        return await self._modify("scenes", scene_id, "", modifier)

    async def set_scene_lightstate(
        self, scene_id: Any, light_id: Any, state: StaticLightState
    ) -> ReconciledResult:
        """Change the stored state of one light in a scene."""
        light_id = _require(light_id, "light id")
        return await self._modify("scenes", scene_id, f"lightstates/{light_id}", state)

    async def delete_scene(self, scene_id: Any) -> ReconciledResult:
        return await self._delete("scenes", scene_id)

    # Schedules

    async def create_schedule(self, creator: ScheduleCreator) -> ReconciledResult:
        return await self._write("POST", "schedules", creator)

    async def get_schedule(self, schedule_id: Any) -> Schedule:
        return await self._get(Schedule, "schedules", schedule_id)

    async def get_all_schedules(self) -> List[Schedule]:
        return await self._get_all(Schedule, "schedules")

    async def set_schedule(
        self, schedule_id: Any, modifier: ScheduleModifier
    ) -> ReconciledResult:
        return await self._modify("schedules", schedule_id, "", modifier)

    async def delete_schedule(self, schedule_id: Any) -> ReconciledResult:
        return await self._delete("schedules", schedule_id)

    # Rules

    async def create_rule(self, creator: RuleCreator) -> ReconciledResult:
        return await self._write("POST", "rules", creator)

    async def get_rule(self, rule_id: Any) -> Rule:
        return await self._get(Rule, "rules", rule_id)

    async def get_all_rules(self) -> List[Rule]:
        return await self._get_all(Rule, "rules")

    async def set_rule(self, rule_id: Any, modifier: RuleModifier) -> ReconciledResult:
        return await self._modify("rules", rule_id, "", modifier)

    async def delete_rule(self, rule_id: Any) -> ReconciledResult:
        return await self._delete("rules", rule_id)

    # Sensors

    async def create_sensor(self, creator: SensorCreator) -> ReconciledResult:
        """Create a CLIP sensor."""
        return await self._write("POST", "sensors", creator)

    async def get_sensor(self, sensor_id: Any) -> Sensor:
        return await self._get(Sensor, "sensors", sensor_id)

    async def get_all_sensors(self) -> List[Sensor]:
        """Get all sensors from the bridge."""
        return await self._get_all(Sensor, "sensors")

    async def set_sensor_attribute(
        self, sensor_id: Any, modifier: SensorAttributeModifier
    ) -> ReconciledResult:
        return await self._modify("sensors", sensor_id, "", modifier)

    async def set_sensor_state(
        self, sensor_id: Any, modifier: SensorStateModifier
    ) -> ReconciledResult:
        return await self._modify("sensors", sensor_id, "state", modifier)

    async def set_sensor_config(
        self, sensor_id: Any, modifier: SensorConfigModifier
    ) -> ReconciledResult:
        return await self._modify("sensors", sensor_id, "config", modifier)

    async def search_new_sensors(self, scanner: Optional[Scanner] = None) -> ReconciledResult:
        """Start a search for new sensors; see :meth:`search_new_lights`."""
        return await self._write("POST", "sensors", scanner or Scanner())

    async def get_new_sensors(self) -> Scan:
        return codec.decode(Scan, await self._read("sensors/new"))

    async def delete_sensor(self, sensor_id: Any) -> ReconciledResult:
        return await self._delete("sensors", sensor_id)

    # Resourcelinks

    async def create_resourcelink(self, creator: ResourcelinkCreator) -> ReconciledResult:
        return await self._write("POST", "resourcelinks", creator)

    async def get_resourcelink(self, resourcelink_id: Any) -> Resourcelink:
        return await self._get(Resourcelink, "resourcelinks", resourcelink_id)

    async def get_all_resourcelinks(self) -> List[Resourcelink]:
        return await self._get_all(Resourcelink, "resourcelinks")

    async def set_resourcelink(
        self, resourcelink_id: Any, modifier: ResourcelinkModifier
    ) -> ReconciledResult:
        return await self._modify("resourcelinks", resourcelink_id, "", modifier)

    async def delete_resourcelink(self, resourcelink_id: Any) -> ReconciledResult:
        return await self._delete("resourcelinks", resourcelink_id)
