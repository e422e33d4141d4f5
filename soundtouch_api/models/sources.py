"""Audio sources (``/sources``)."""

import xml.etree.ElementTree as ET
from enum import Enum
from typing import Self

import structlog
from pydantic import BaseModel

from soundtouch_api.utils.xml_codec import format_bool, parse_bool, parse_root, set_attr, text_of, to_string

logger = structlog.get_logger(__name__)

SPOTIFY = "SPOTIFY"
BLUETOOTH = "BLUETOOTH"
AUX = "AUX"

STREAMING_SOURCE_TYPES = frozenset(
    {
        SPOTIFY,
        "PANDORA",
        "TUNEIN",
        "AMAZON",
        "DEEZER",
        "IHEART",
        "IHEARTRADIO",
        "LOCAL_INTERNET_RADIO",
    }
)

LOCAL_SOURCE_TYPES = frozenset({AUX, BLUETOOTH, "AIRPLAY", "LOCAL_MUSIC"})


class SourceStatus(str, Enum):
    READY = "READY"
    UNAVAILABLE = "UNAVAILABLE"
    ERROR = "ERROR"

    @classmethod
    def parse(cls, value: str | None) -> "SourceStatus":
        """Map a reported status onto a known one; anything unknown is UNAVAILABLE."""
        try:
            return cls(value)
        except ValueError:
            logger.debug("Unknown source status, treating as unavailable", status=value)
            return cls.UNAVAILABLE

    @property
    def description(self) -> str:
        return self.value.capitalize()

    def is_ready(self) -> bool:
        return self is SourceStatus.READY

    def is_unavailable(self) -> bool:
        return self is SourceStatus.UNAVAILABLE


class SourceItem(BaseModel):
    source: str
    source_account: str = ""
    status: SourceStatus = SourceStatus.UNAVAILABLE
    is_local: bool = False
    multiroom_allowed: bool = False
    display_name: str = ""

    @classmethod
    def from_element(cls, element: ET.Element) -> Self:
        return cls(
            source=element.get("source", ""),
            source_account=element.get("sourceAccount", ""),
            status=SourceStatus.parse(element.get("status")),
            is_local=parse_bool(element.get("isLocal")),
            multiroom_allowed=parse_bool(element.get("multiroomallowed")),
            display_name=text_of(element),
        )

    def to_element(self, parent: ET.Element) -> ET.Element:
        element = ET.SubElement(parent, "sourceItem")
        element.set("source", self.source)
        set_attr(element, "sourceAccount", self.source_account)
        element.set("status", self.status.value)
        element.set("isLocal", format_bool(self.is_local))
        element.set("multiroomallowed", format_bool(self.multiroom_allowed))
        element.text = self.display_name
        return element

    def get_display_name(self) -> str:
        if self.display_name:
            return self.display_name
        if self.source_account and self.source_account != self.source:
            return self.source_account
        return self.source.capitalize()

    def is_ready(self) -> bool:
        return self.status.is_ready()

    def is_spotify(self) -> bool:
        return self.source == SPOTIFY

    def is_bluetooth_source(self) -> bool:
        return self.source == BLUETOOTH

    def is_aux_source(self) -> bool:
        return self.source == AUX

    def is_streaming_service(self) -> bool:
        return self.source in STREAMING_SOURCE_TYPES

    def is_local_source(self) -> bool:
        return self.is_local or self.source in LOCAL_SOURCE_TYPES

    def supports_multiroom(self) -> bool:
        return self.multiroom_allowed


class Sources(BaseModel):
    device_id: str = ""
    items: list[SourceItem] = []

    @classmethod
    def from_xml(cls, data: str | bytes) -> Self:
        root = parse_root(data, "sources")
        return cls(
            device_id=root.get("deviceID", ""),
            items=[SourceItem.from_element(item) for item in root.findall("sourceItem")],
        )

    def to_xml(self) -> str:
        element = ET.Element("sources")
        element.set("deviceID", self.device_id)
        for item in self.items:
            item.to_element(element)
        return to_string(element)

    def get_available_sources(self) -> list[SourceItem]:
        return [item for item in self.items if item.is_ready()]

    def get_sources_by_type(self, source_type: str) -> list[SourceItem]:
        return [item for item in self.items if item.source == source_type]

    def get_spotify_sources(self) -> list[SourceItem]:
        """All Spotify sources; one per linked account."""
        return self.get_sources_by_type(SPOTIFY)

    def get_ready_spotify_sources(self) -> list[SourceItem]:
        return [item for item in self.get_spotify_sources() if item.is_ready()]

    def get_source_accounts(self, source_type: str) -> list[str]:
        accounts = []
        for item in self.get_sources_by_type(source_type):
            if item.source_account and item.source_account not in accounts:
                accounts.append(item.source_account)
        return accounts

    def get_source(self, source_type: str, source_account: str = "") -> SourceItem | None:
        """First source of a type, optionally narrowed to one account."""
        for item in self.get_sources_by_type(source_type):
            if not source_account or item.source_account == source_account:
                return item
        return None

    def get_streaming_sources(self) -> list[SourceItem]:
        return [item for item in self.items if item.is_streaming_service()]

    def get_local_sources(self) -> list[SourceItem]:
        return [item for item in self.items if item.is_local_source()]

    def get_multiroom_sources(self) -> list[SourceItem]:
        return [item for item in self.items if item.supports_multiroom()]

    def has_source(self, source_type: str) -> bool:
        return any(item.is_ready() for item in self.get_sources_by_type(source_type))

    def has_spotify(self) -> bool:
        return self.has_source(SPOTIFY)

    def has_bluetooth(self) -> bool:
        return self.has_source(BLUETOOTH)

    def has_aux(self) -> bool:
        return self.has_source(AUX)

    def get_source_count(self) -> int:
        return len(self.items)

    def get_ready_source_count(self) -> int:
        return len(self.get_available_sources())
