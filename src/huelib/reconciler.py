"""Correlate bridge response items with the resources they affect.

A write to the bridge answers with an array that mixes ``success`` and
``error`` elements. The bridge makes no promise about the order of these
elements relative to the fields of the request, and may leave out fields it
did not change, so every element is matched by the address it carries and
never by its position.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .codec import ErrorItem, RequestEnvelope, ResponseItem, SuccessItem

logger = logging.getLogger(__name__)

# Collections whose second path segment is a resource id.
RESOURCE_COLLECTIONS = frozenset(
    {"lights", "groups", "scenes", "schedules", "rules", "sensors", "resourcelinks"}
)
# Pseudo ids that name an operation on the collection rather than a resource.
_COLLECTION_ENDPOINTS = frozenset({"new"})


class ResourceResult(BaseModel):
    """What one request did to one resource."""

    model_config = ConfigDict(frozen=True)

    applied_fields: Dict[str, Any] = Field(default_factory=dict)
    errors: List[ErrorItem] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class ReconciledResult(BaseModel):
    """Per-resource outcome of one write request.

    Partial success is normal: a resource may carry both applied fields and
    errors from the same request.
    """

    model_config = ConfigDict(frozen=True)

    per_resource: Dict[str, ResourceResult] = Field(default_factory=dict)
    request_level_errors: List[ErrorItem] = Field(default_factory=list)
    request_level_applied: Dict[str, Any] = Field(default_factory=dict)
    created_ids: List[str] = Field(default_factory=list)

    @property
    def errors(self) -> List[ErrorItem]:
        """Every error, request-level first, then per resource."""
        errors = list(self.request_level_errors)
        for result in self.per_resource.values():
            errors.extend(result.errors)
        return errors

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def created_id(self) -> Optional[str]:
        return self.created_ids[0] if self.created_ids else None

    def raise_for_errors(self) -> None:
        """Raise :class:`~huelib.exceptions.BridgeError` for the first error."""
        errors = self.errors
        if errors:
            raise errors[0].to_exception()


def split_address(address: str) -> Tuple[Optional[str], str]:
    """Split ``/lights/3/state/on`` into ``("3", "state/on")``.

    Returns ``(None, <path>)`` for addresses without a resource id such as
    ``/config/name`` or ``/lights/new``.
    """
    segments = [segment for segment in address.strip().split("/") if segment]
    if (
        len(segments) >= 2
        and segments[0] in RESOURCE_COLLECTIONS
        and segments[1] not in _COLLECTION_ENDPOINTS
    ):
        return segments[1], "/".join(segments[2:])
    return None, "/".join(segments)


def _is_creation(key: str, envelope: RequestEnvelope) -> bool:
    """``{"id": ..}`` answers a POST that created a resource."""
    return key == "id" and envelope.method.upper() == "POST"


def _targets_collection(envelope: RequestEnvelope) -> bool:
    """Whether the request addresses a whole collection, e.g. ``POST groups``."""
    segments = [segment for segment in envelope.path.split("/") if segment]
    return len(segments) == 1 and segments[0] in RESOURCE_COLLECTIONS


def _locate(address: str, envelope: RequestEnvelope) -> Tuple[Optional[str], str]:
    """Resolve a response address to ``(resource id, field)`` for this request.

    A request to a collection has no resource yet, so the bridge reports its
    parameters as ``/<collection>/<parameter>``; those stay at request level.
    """
    if _targets_collection(envelope):
        return None, "/".join(segment for segment in address.split("/") if segment)
    return split_address(address)


def reconcile(items: Sequence[ResponseItem], envelope: RequestEnvelope) -> ReconciledResult:
    """Build the per-resource result of one request from its response items.

    Pure function of its inputs: the same items and envelope always give an
    equal result.
    """
    applied: Dict[str, Dict[str, Any]] = {}
    errors: Dict[str, List[ErrorItem]] = {}
    request_level_errors: List[ErrorItem] = []
    request_level_applied: Dict[str, Any] = {}
    created_ids: List[str] = []

    def touch(resource_id: str) -> None:
        applied.setdefault(resource_id, {})
        errors.setdefault(resource_id, [])

    for item in items:
        if isinstance(item, SuccessItem):
            for key, value in item.entries():
                if _is_creation(key, envelope):
                    created_id = str(value)
                    created_ids.append(created_id)
                    touch(created_id)
                    continue
                resource_id, field = _locate(key, envelope)
                if resource_id is None:
                    request_level_applied[field] = value
                else:
                    touch(resource_id)
                    applied[resource_id][field] = value
        elif isinstance(item, ErrorItem):
            resource_id, _ = _locate(item.address, envelope)
            if resource_id is None:
                request_level_errors.append(item)
            else:
                touch(resource_id)
                errors[resource_id].append(item)
            logger.warning(
                f"{envelope.method} /{envelope.path.strip('/')}: bridge error "
                f"{item.type} at {item.address or '<request>'}: {item.description}"
            )
        else:
            raise TypeError(f"Unexpected response item: {item!r}")

    return ReconciledResult(
        per_resource={
            resource_id: ResourceResult(applied_fields=fields, errors=errors[resource_id])
            for resource_id, fields in applied.items()
        },
        request_level_errors=request_level_errors,
        request_level_applied=request_level_applied,
        created_ids=created_ids,
    )
