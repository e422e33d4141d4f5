"""Helpers for mapping models onto the device's XML bodies.

Boolean and integer attributes follow the device's conventions: missing or
empty values read as false / zero, and booleans are written as
``true``/``false``.
"""

import xml.etree.ElementTree as ET

from soundtouch_api.exceptions import UnexpectedElementError

_TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def parse_root(data: str | bytes, tag: str) -> ET.Element:
    """Parse a document and check its root element name.

    Malformed documents raise ``xml.etree.ElementTree.ParseError`` unchanged.
    """
    root = ET.fromstring(data)
    if root.tag != tag:
        raise UnexpectedElementError(tag, root.tag)
    return root


def to_string(element: ET.Element) -> str:
    """Render an element with explicit end tags."""
    return ET.tostring(element, encoding="unicode", short_empty_elements=False)


def parse_bool(value: str | None) -> bool:
    if value is None:
        return False
    value = value.strip()
    if not value or value in _FALSE_VALUES:
        return False
    if value in _TRUE_VALUES:
        return True
    raise ValueError(f"invalid boolean value: {value!r}")


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def parse_int(value: str | None) -> int:
    if value is None or not value.strip():
        return 0
    return int(value.strip())


def parse_optional_int(value: str | None) -> int | None:
    if value is None or not value.strip():
        return None
    return int(value.strip())


def text_of(element: ET.Element | None) -> str:
    """Character data of an element, surrounding whitespace removed."""
    if element is None or element.text is None:
        return ""
    return element.text.strip()


def child_text(element: ET.Element, tag: str) -> str:
    return text_of(element.find(tag))


def set_attr(element: ET.Element, name: str, value: str | int | None) -> None:
    """Set an attribute, omitting it when the value is None or empty."""
    if value is None or value == "":
        return
    element.set(name, str(value))


def add_child(parent: ET.Element, tag: str, text: str | int | None = "") -> ET.Element:
    child = ET.SubElement(parent, tag)
    child.text = "" if text is None else str(text)
    return child
