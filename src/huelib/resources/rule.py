"""Rules: conditions on sensor state that trigger actions."""

from enum import Enum
from typing import List, Optional

from pydantic import field_validator

from .common import Action, BridgeDateTime, HueModel, HueRequest, HueResource


class ConditionOperator(str, Enum):
    EQ = "eq"
    GT = "gt"
    LT = "lt"
    DX = "dx"
    DDX = "ddx"
    STABLE = "stable"
    NOT_STABLE = "not stable"
    IN = "in"
    NOT_IN = "not in"


class RuleStatus(str, Enum):
    ENABLED = "enabled"
    DISABLED = "disabled"
    RESOURCE_DELETED = "resourcedeleted"


class Condition(HueModel):
    """One condition of a rule; ``value`` is always a string on the wire."""

    address: str
    operator: ConditionOperator
    value: Optional[str] = None


class Rule(HueResource):
    name: str
    conditions: List[Condition]
    actions: List[Action]
    owner: Optional[str] = None
    status: Optional[RuleStatus] = None
    created: BridgeDateTime = None
    lasttriggered: BridgeDateTime = None
    timestriggered: Optional[int] = None
    recycle: Optional[bool] = None


class RuleCreator(HueRequest):
    """Body of ``POST /rules``."""

    name: Optional[str] = None
    conditions: List[Condition]
    actions: List[Action]
    status: Optional[RuleStatus] = None
    recycle: Optional[bool] = None

    @field_validator("conditions", "actions")
    @classmethod
    def validate_not_empty(cls, v):
        """The bridge rejects rules without conditions or actions."""
        if not v:
            raise ValueError("A rule needs at least one entry")
        return v


class RuleModifier(HueRequest):
    """Body of ``PUT /rules/<id>``."""

    name: Optional[str] = None
    conditions: Optional[List[Condition]] = None
    actions: Optional[List[Action]] = None
    status: Optional[RuleStatus] = None
