"""Resourcelinks: named bundles of references to other resources."""

from enum import Enum
from typing import Annotated, List, Optional

from pydantic import AfterValidator, BaseModel

from .common import HueRequest, HueResource


class LinkKind(str, Enum):
    GROUP = "groups"
    LIGHT = "lights"
    RESOURCELINK = "resourcelinks"
    RULE = "rules"
    SCENE = "scenes"
    SCHEDULE = "schedules"
    SENSOR = "sensors"


class Link(BaseModel):
    """A parsed ``/<collection>/<id>`` reference."""

    kind: LinkKind
    id: str

    @classmethod
    def parse(cls, value: str) -> "Link":
        parts = value.strip("/").split("/")
        if len(parts) != 2 or not parts[1]:
            raise ValueError(f"Expected link in the format /<kind>/<id>, got {value!r}")
        try:
            kind = LinkKind(parts[0])
        except ValueError as e:
            raise ValueError(f"Invalid link type {parts[0]!r}") from e
        return cls(kind=kind, id=parts[1])

    def __str__(self) -> str:
        return f"/{self.kind.value}/{self.id}"


def _validate_links(links: List[str]) -> List[str]:
    for link in links:
        Link.parse(link)
    return links


LinkList = Annotated[List[str], AfterValidator(_validate_links)]


class Resourcelink(HueResource):
    """A resourcelink; ``links`` holds the raw ``/<kind>/<id>`` strings."""

    name: str
    classid: int
    links: LinkList
    description: str = ""
    owner: Optional[str] = None
    type: str = "Link"
    recycle: Optional[bool] = None

    def parsed_links(self) -> List[Link]:
        return [Link.parse(link) for link in self.links]


class ResourcelinkCreator(HueRequest):
    """Body of ``POST /resourcelinks``."""

    name: str
    classid: int
    links: LinkList
    description: Optional[str] = None
    owner: Optional[str] = None
    type: Optional[str] = None
    recycle: Optional[bool] = None


class ResourcelinkModifier(HueRequest):
    """Body of ``PUT /resourcelinks/<id>``."""

    name: Optional[str] = None
    description: Optional[str] = None
    classid: Optional[int] = None
    links: Optional[LinkList] = None

