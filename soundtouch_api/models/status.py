import xml.etree.ElementTree as ET
from typing import ClassVar, Self

from pydantic import BaseModel

from soundtouch_api.utils.xml_codec import parse_root, text_of, to_string


class StatusResponse(BaseModel):
    """Single-element ``<status>`` reply whose text names the endpoint hit."""

    success_paths: ClassVar[tuple[str, ...]] = ()

    status: str = ""

    @classmethod
    def from_xml(cls, data: str | bytes) -> Self:
        root = parse_root(data, "status")
        return cls(status=text_of(root))

    def to_xml(self) -> str:
        element = ET.Element("status")
        element.text = self.status
        return to_string(element)

    def is_success(self) -> bool:
        return self.status in self.success_paths
