"""Typed models of the resources exposed by the bridge."""

from .bridge_config import BridgeConfig, Capabilities, ConfigModifier
from .common import Action, Alert, ColorMode, Effect, HueModel, HueRequest, HueResource
from .group import (
    Group,
    GroupActionModifier,
    GroupAttributeModifier,
    GroupCreator,
)
from .light import (
    Color,
    Light,
    LightAttributeModifier,
    LightState,
    LightStateModifier,
    Scan,
    Scanner,
    StaticLightState,
)
from .resourcelink import (
    Link,
    LinkKind,
    Resourcelink,
    ResourcelinkCreator,
    ResourcelinkModifier,
)
from .rule import (
    Condition,
    ConditionOperator,
    Rule,
    RuleCreator,
    RuleModifier,
    RuleStatus,
)
from .scene import Scene, SceneCreator, SceneModifier
from .schedule import Schedule, ScheduleCreator, ScheduleModifier, ScheduleStatus
from .sensor import (
    Sensor,
    SensorAttributeModifier,
    SensorConfigModifier,
    SensorCreator,
    SensorStateModifier,
)

__all__ = [
    "Action",
    "Alert",
    "BridgeConfig",
    "Capabilities",
    "Color",
    "ColorMode",
    "Condition",
    "ConditionOperator",
    "ConfigModifier",
    "Effect",
    "Group",
    "GroupActionModifier",
    "GroupAttributeModifier",
    "GroupCreator",
    "HueModel",
    "HueRequest",
    "HueResource",
    "Light",
    "LightAttributeModifier",
    "LightState",
    "LightStateModifier",
    "Link",
    "LinkKind",
    "Resourcelink",
    "ResourcelinkCreator",
    "ResourcelinkModifier",
    "Rule",
    "RuleCreator",
    "RuleModifier",
    "RuleStatus",
    "Scan",
    "Scanner",
    "Scene",
    "SceneCreator",
    "SceneModifier",
    "Schedule",
    "ScheduleCreator",
    "ScheduleModifier",
    "ScheduleStatus",
    "Sensor",
    "SensorAttributeModifier",
    "SensorConfigModifier",
    "SensorCreator",
    "SensorStateModifier",
    "StaticLightState",
]
