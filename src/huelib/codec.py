"""JSON codec for bridge payloads and the response items the bridge returns."""

import json
import logging
from enum import IntEnum
from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from .exceptions import BridgeError, DecodeError
from .resources.common import HueRequest, HueResource

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class ErrorType(IntEnum):
    """Error codes documented by the vendor.

    Bridges may report codes not listed here; those are kept as plain ints.
    """

    UNAUTHORIZED_USER = 1
    INVALID_JSON = 2
    RESOURCE_NOT_AVAILABLE = 3
    METHOD_NOT_AVAILABLE = 4
    MISSING_PARAMETERS = 5
    PARAMETER_NOT_AVAILABLE = 6
    INVALID_VALUE = 7
    PARAMETER_NOT_MODIFIABLE = 8
    TOO_MANY_ITEMS = 11
    PORTAL_CONNECTION_REQUIRED = 12
    LINK_BUTTON_NOT_PRESSED = 101
    DHCP_CANNOT_BE_DISABLED = 110
    INVALID_UPDATESTATE = 111
    DEVICE_IS_OFF = 201
    COMMISSIONABLE_LIGHT_LIST_FULL = 203
    GROUP_TABLE_FULL = 301
    DEVICE_GROUP_TABLE_FULL = 302
    DEVICE_UNREACHABLE = 304
    GROUP_NOT_MODIFIABLE = 305
    SCENE_COULD_NOT_BE_CREATED = 402
    SCENE_BUFFER_FULL = 403
    SENSOR_TYPE_NOT_ALLOWED = 501
    SENSOR_LIST_FULL = 502
    RULE_ENGINE_FULL = 601
    CONDITION_ERROR = 607
    ACTION_ERROR = 608
    UNABLE_TO_ACTIVATE = 609
    SCHEDULE_LIST_FULL = 701
    INVALID_TIMEZONE = 702
    SCHEDULE_TIME_CONFLICT = 703
    CANNOT_CREATE_SCHEDULE = 704
    CANNOT_ENABLE_SCHEDULE = 705
    COMMAND_ERROR = 706
    SOURCE_MODEL_INVALID = 801
    SOURCE_FACTORY_NEW = 802
    INVALID_STATE = 803
    INTERNAL_ERROR = 901


class RequestEnvelope(BaseModel):
    """One outgoing bridge operation."""

    model_config = ConfigDict(frozen=True)

    method: str
    path: str
    body: Optional[Any] = None


class SuccessItem(BaseModel):
    """A ``{"success": ...}`` response element.

    The payload maps addresses to their new values, holds the id of a created
    resource (``{"id": "5"}``), or is a sentence such as
    ``"/lights/1 deleted"``.
    """

    model_config = ConfigDict(frozen=True)

    payload: Union[Dict[str, Any], str]

    def entries(self) -> List[Tuple[str, Any]]:
        """Return the payload as ``(address, value)`` pairs, in order."""
        if isinstance(self.payload, str):
            address, _, rest = self.payload.partition(" ")
            return [(address, rest or None)]
        return list(self.payload.items())


class ErrorItem(BaseModel):
    """An ``{"error": {"type", "address", "description"}}`` response element."""

    model_config = ConfigDict(frozen=True)

    type: int
    address: str = ""
    description: str = ""

    @property
    def code(self) -> int:
        return self.type

    @property
    def error_type(self) -> Optional[ErrorType]:
        try:
            return ErrorType(self.type)
        except ValueError:
            return None

    def to_exception(self) -> BridgeError:
        return BridgeError(self.type, self.description, self.address or None)


ResponseItem = Union[SuccessItem, ErrorItem]


def encode(model: BaseModel) -> Dict[str, Any]:
    """Serialize a resource or request body using the vendor field names.

    Request bodies drop unset (``None``) fields; resources keep exactly the
    fields they were decoded from.
    """
    if isinstance(model, HueRequest):
        return model.model_dump(mode="json", by_alias=True, exclude_none=True)
    return model.model_dump(mode="json", by_alias=True, exclude_unset=True)


def decode_json(raw: bytes) -> Any:
    """Parse a raw response body."""
    try:
        return json.loads(raw)
    except (UnicodeDecodeError, ValueError) as e:
        raise DecodeError(f"Invalid JSON from bridge: {e}") from e


def decode(model_cls: Type[M], data: Any, resource_id: Optional[str] = None) -> M:
    """Decode one resource payload, attaching its id when given.

    The id lives in the URL, not in the payload, so ``encode`` leaves it out.
    To get an equal resource back from an encoded one, pass its id again as
    ``resource_id``.
    """
    if not isinstance(data, dict):
        raise DecodeError(
            f"Expected a JSON object for {model_cls.__name__}, got {type(data).__name__}"
        )
    try:
        model = model_cls.model_validate(data)
    except ValidationError as e:
        raise DecodeError(f"Invalid {model_cls.__name__} payload: {e}") from e
    if resource_id is not None and isinstance(model, HueResource):
        model.id = resource_id
    return model


def decode_collection(model_cls: Type[M], data: Any) -> List[M]:
    """Decode an id-keyed mapping such as the body of ``GET /lights``."""
    if not isinstance(data, dict):
        raise DecodeError(
            f"Expected a JSON object of {model_cls.__name__} entries, got {type(data).__name__}"
        )
    return [decode(model_cls, value, resource_id=key) for key, value in data.items()]


def is_response_array(data: Any) -> bool:
    """Whether ``data`` looks like a list of success/error elements."""
    return isinstance(data, list) and all(
        isinstance(item, dict) and ("success" in item or "error" in item)
        for item in data
    )


def decode_response_items(data: Any) -> List[ResponseItem]:
    """Decode a bridge response array into tagged success/error items."""
    if not isinstance(data, list):
        raise DecodeError(f"Expected a JSON array of responses, got {type(data).__name__}")

    items: List[ResponseItem] = []
    for index, element in enumerate(data):
        if not isinstance(element, dict):
            raise DecodeError(f"Response element {index} is not an object: {element!r}")
        try:
            if "success" in element:
                items.append(SuccessItem(payload=element["success"]))
            elif "error" in element:
                items.append(ErrorItem.model_validate(element["error"]))
            else:
                raise DecodeError(
                    f"Response element {index} is neither success nor error: {element!r}"
                )
        except ValidationError as e:
            raise DecodeError(f"Invalid response element {index}: {e}") from e
    return items


def raise_for_bridge_error(data: Any) -> None:
    """Raise the first bridge error if a read returned an error array."""
    if not isinstance(data, list) or not is_response_array(data):
        return
    for item in decode_response_items(data):
        if isinstance(item, ErrorItem):
            logger.warning(f"Bridge returned error {item.type}: {item.description}")
            raise item.to_exception()
