import xml.etree.ElementTree as ET
from enum import Enum
from typing import Self

from pydantic import BaseModel

from soundtouch_api.exceptions import MalformedValueError, OutOfRangeError
from soundtouch_api.utils.xml_codec import (
    format_bool,
    parse_bool,
    parse_int,
    parse_root,
    set_attr,
    text_of,
    to_string,
)

MIN_BRIGHTNESS = 0
MAX_BRIGHTNESS = 100


class ClockFormat(str, Enum):
    HOUR_12 = "12"
    HOUR_24 = "24"
    AUTO = "auto"


_FORMAT_DESCRIPTIONS = {
    ClockFormat.HOUR_12.value: "12-hour format (AM/PM)",
    ClockFormat.HOUR_24.value: "24-hour format",
    ClockFormat.AUTO.value: "Auto format (system default)",
}

# (upper bound, label); 0 is "Off"
_BRIGHTNESS_LEVELS = (
    (0, "Off"),
    (25, "Low"),
    (50, "Medium"),
    (75, "High"),
    (MAX_BRIGHTNESS, "Maximum"),
)


def clamp_brightness(value: int) -> int:
    return max(MIN_BRIGHTNESS, min(MAX_BRIGHTNESS, value))


class ClockDisplay(BaseModel):
    device_id: str = ""
    enabled: bool = False
    format: str = ""
    brightness: int = 0
    auto_dim: bool = False
    time_zone: str = ""
    value: str = ""

    @classmethod
    def from_xml(cls, data: str | bytes) -> Self:
        root = parse_root(data, "clockDisplay")
        return cls(
            device_id=root.get("deviceID", ""),
            enabled=parse_bool(root.get("enabled")),
            format=root.get("format", ""),
            brightness=parse_int(root.get("brightness")),
            auto_dim=parse_bool(root.get("autoDim")),
            time_zone=root.get("timeZone", ""),
            value=text_of(root),
        )

    def to_xml(self) -> str:
        element = ET.Element("clockDisplay")
        set_attr(element, "deviceID", self.device_id)
        set_attr(element, "enabled", format_bool(True) if self.enabled else None)
        set_attr(element, "format", self.format)
        set_attr(element, "brightness", self.brightness or None)
        set_attr(element, "autoDim", format_bool(True) if self.auto_dim else None)
        set_attr(element, "timeZone", self.time_zone)
        element.text = self.value
        return to_string(element)

    def is_enabled(self) -> bool:
        return self.enabled

    def get_format(self) -> str:
        return self.format or ClockFormat.HOUR_12.value

    def get_format_description(self) -> str:
        return _FORMAT_DESCRIPTIONS.get(self.format.lower(), _FORMAT_DESCRIPTIONS[ClockFormat.HOUR_12.value])

    def get_brightness(self) -> int:
        """Brightness clamped to 0-100; devices occasionally report junk."""
        return clamp_brightness(self.brightness)

    def get_brightness_level(self) -> str:
        brightness = self.get_brightness()
        for upper, label in _BRIGHTNESS_LEVELS:
            if brightness <= upper:
                return label
        return _BRIGHTNESS_LEVELS[-1][1]

    def is_auto_dim_enabled(self) -> bool:
        return self.auto_dim

    def get_time_zone(self) -> str:
        return self.time_zone

    def get_device_id(self) -> str:
        return self.device_id

    def is_empty(self) -> bool:
        return (
            not self.enabled
            and not self.format
            and self.brightness == 0
            and not self.auto_dim
            and not self.time_zone
            and not self.device_id
            and not self.value
        )


class ClockDisplayRequest(BaseModel):
    """Partial update of the clock display.

    Fields left as None (or empty strings) are not sent, so the device keeps
    its current value for them.
    """

    enabled: bool | None = None
    format: str = ""
    brightness: int | None = None
    auto_dim: bool | None = None
    time_zone: str = ""

    def set_enabled(self, enabled: bool) -> Self:
        self.enabled = enabled
        return self

    def set_format(self, format: ClockFormat | str) -> Self:
        self.format = format.value if isinstance(format, ClockFormat) else format
        return self

    def set_brightness(self, brightness: int) -> Self:
        self.brightness = clamp_brightness(brightness)
        return self

    def set_auto_dim(self, auto_dim: bool) -> Self:
        self.auto_dim = auto_dim
        return self

    def set_time_zone(self, time_zone: str) -> Self:
        self.time_zone = time_zone
        return self

    def validate(self) -> None:
        if self.format and self.format.lower() not in _FORMAT_DESCRIPTIONS:
            raise MalformedValueError(
                f"invalid format '{self.format}': must be '12', '24', or 'auto'",
                "format",
            )
        if self.brightness is not None and not MIN_BRIGHTNESS <= self.brightness <= MAX_BRIGHTNESS:
            raise OutOfRangeError(
                f"brightness must be between 0 and 100, got {self.brightness}",
                "brightness",
            )

    def has_changes(self) -> bool:
        return (
            self.enabled is not None
            or bool(self.format)
            or self.brightness is not None
            or self.auto_dim is not None
            or bool(self.time_zone)
        )

    def to_xml(self) -> str:
        element = ET.Element("clockDisplay")
        if self.enabled is not None:
            element.set("enabled", format_bool(self.enabled))
        set_attr(element, "format", self.format)
        set_attr(element, "brightness", self.brightness)
        if self.auto_dim is not None:
            element.set("autoDim", format_bool(self.auto_dim))
        set_attr(element, "timeZone", self.time_zone)
        return to_string(element)
