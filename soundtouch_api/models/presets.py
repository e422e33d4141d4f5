import xml.etree.ElementTree as ET
from collections import Counter
from datetime import datetime, timezone
from typing import Self

from pydantic import BaseModel

from soundtouch_api.models.content_item import ContentItem
from soundtouch_api.utils.xml_codec import parse_int, parse_optional_int, parse_root, set_attr, to_string

# Hardware preset buttons
PRESET_SLOTS = range(1, 7)


def _from_epoch(value: int | None) -> datetime | None:
    if value is None:
        return None
    return datetime.fromtimestamp(value, timezone.utc)


class Preset(BaseModel):
    id: int
    created_on: int | None = None
    updated_on: int | None = None
    content_item: ContentItem | None = None

    @classmethod
    def from_element(cls, element: ET.Element) -> Self:
        content = element.find("ContentItem")
        return cls(
            id=parse_int(element.get("id")),
            created_on=parse_optional_int(element.get("createdOn")),
            updated_on=parse_optional_int(element.get("updatedOn")),
            content_item=ContentItem.from_element(content) if content is not None else None,
        )

    def to_element(self, parent: ET.Element) -> ET.Element:
        element = ET.SubElement(parent, "preset")
        element.set("id", str(self.id))
        set_attr(element, "createdOn", self.created_on)
        set_attr(element, "updatedOn", self.updated_on)
        if self.content_item is not None:
            self.content_item.to_element(element)
        return element

    def get_created_time(self) -> datetime | None:
        return _from_epoch(self.created_on)

    def get_updated_time(self) -> datetime | None:
        return _from_epoch(self.updated_on)

    def has_timestamps(self) -> bool:
        return self.created_on is not None or self.updated_on is not None

    def get_display_name(self) -> str:
        if self.content_item is not None and self.content_item.item_name:
            return self.content_item.item_name
        return f"Preset {self.id}"

    def get_artwork_url(self) -> str:
        return self.content_item.container_art if self.content_item is not None else ""

    def is_spotify_preset(self) -> bool:
        return self.get_source() == "SPOTIFY"

    def is_empty(self) -> bool:
        return self.content_item is None

    def get_source(self) -> str:
        return self.content_item.source if self.content_item is not None else ""

    def get_source_account(self) -> str:
        return self.content_item.source_account if self.content_item is not None else ""

    def get_content_type(self) -> str:
        return self.content_item.type if self.content_item is not None else ""

    def get_location(self) -> str:
        return self.content_item.location if self.content_item is not None else ""

    def is_presetable(self) -> bool:
        return self.content_item is not None and self.content_item.is_presetable


class Presets(BaseModel):
    presets: list[Preset] = []

    @classmethod
    def from_xml(cls, data: str | bytes) -> Self:
        root = parse_root(data, "presets")
        return cls(presets=[Preset.from_element(item) for item in root.findall("preset")])

    def to_xml(self) -> str:
        element = ET.Element("presets")
        for preset in self.presets:
            preset.to_element(element)
        return to_string(element)

    def get_preset_count(self) -> int:
        return len(self.presets)

    def get_preset_by_id(self, preset_id: int) -> Preset | None:
        return next((preset for preset in self.presets if preset.id == preset_id), None)

    def get_spotify_presets(self) -> list[Preset]:
        return [preset for preset in self.presets if preset.is_spotify_preset()]

    def get_presets_by_source(self, source: str) -> list[Preset]:
        return [preset for preset in self.presets if preset.get_source() == source]

    def get_used_preset_slots(self) -> list[int]:
        return [preset.id for preset in self.presets if not preset.is_empty()]

    def get_empty_preset_slots(self) -> list[int]:
        used = set(self.get_used_preset_slots())
        return [slot for slot in PRESET_SLOTS if slot not in used]

    def has_presets(self) -> bool:
        return any(not preset.is_empty() for preset in self.presets)

    def get_most_recent_preset(self) -> Preset | None:
        """Latest by updatedOn; createdOn counts only for presets never updated."""
        most_recent = None
        latest = 0
        for preset in self.presets:
            stamp = preset.updated_on if preset.updated_on is not None else preset.created_on
            if stamp is not None and stamp > latest:
                latest = stamp
                most_recent = preset
        return most_recent

    def get_oldest_preset(self) -> Preset | None:
        dated = [preset for preset in self.presets if preset.created_on is not None]
        return min(dated, key=lambda preset: preset.created_on, default=None)

    def get_presets_summary(self) -> dict[str, int]:
        summary = {
            "total": self.get_preset_count(),
            "used": len(self.get_used_preset_slots()),
            "empty": len(self.get_empty_preset_slots()),
            "spotify": len(self.get_spotify_presets()),
        }
        summary.update(Counter(preset.get_source() for preset in self.presets if not preset.is_empty()))
        return summary
