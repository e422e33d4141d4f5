import xml.etree.ElementTree as ET
from typing import Self

from pydantic import BaseModel

from soundtouch_api.utils.xml_codec import add_child, child_text, format_bool, parse_bool


class ContentItem(BaseModel):
    """Playable content attached to a preset."""

    source: str = ""
    type: str = ""
    location: str = ""
    source_account: str = ""
    is_presetable: bool = False
    item_name: str = ""
    container_art: str = ""

    @classmethod
    def from_element(cls, element: ET.Element) -> Self:
        return cls(
            source=element.get("source", ""),
            type=element.get("type", ""),
            location=element.get("location", ""),
            source_account=element.get("sourceAccount", ""),
            is_presetable=parse_bool(element.get("isPresetable")),
            item_name=child_text(element, "itemName"),
            container_art=child_text(element, "containerArt"),
        )

    def to_element(self, parent: ET.Element) -> ET.Element:
        element = ET.SubElement(parent, "ContentItem")
        element.set("source", self.source)
        element.set("type", self.type)
        element.set("location", self.location)
        element.set("sourceAccount", self.source_account)
        element.set("isPresetable", format_bool(self.is_presetable))
        if self.item_name:
            add_child(element, "itemName", self.item_name)
        if self.container_art:
            add_child(element, "containerArt", self.container_art)
        return element
