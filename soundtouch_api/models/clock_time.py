"""Device system time (``/clockTime``)."""

import xml.etree.ElementTree as ET
from datetime import datetime, timedelta, timezone
from typing import Self

import structlog
from pydantic import BaseModel

from soundtouch_api.exceptions import MissingFieldError, OutOfRangeError, TimeParseError
from soundtouch_api.utils.xml_codec import parse_int, parse_root, set_attr, to_string

logger = structlog.get_logger(__name__)

# 2000-01-01T00:00:00Z and 2100-01-01T00:00:00Z
MIN_UTC = 946684800
MAX_UTC = 4102444800

CANONICAL_FORMAT = "%Y-%m-%d %H:%M:%S"

# Tried in order; results without an offset are taken as UTC.
TEXT_FORMATS = (
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%dT%H:%M:%S",
    "%H:%M:%S",
)


def _zone_name(dt: datetime) -> str:
    if dt.tzinfo is None:
        return "Local"
    key = getattr(dt.tzinfo, "key", None)
    if key:
        return key
    return dt.tzname() or ""


def _from_epoch(epoch: int) -> datetime:
    try:
        return datetime.fromtimestamp(epoch, timezone.utc)
    except (OverflowError, ValueError, OSError) as exc:
        raise TimeParseError(f"epoch {epoch} cannot be represented: {exc}", {"epoch": epoch}) from exc


def _canonical(epoch: int) -> str:
    # empty for epochs outside the datetime range; validate() reports those
    try:
        return _from_epoch(epoch).strftime(CANONICAL_FORMAT)
    except TimeParseError:
        return ""


def _own_text(element: ET.Element) -> str:
    parts = [element.text or ""]
    parts.extend(child.tail or "" for child in element)
    return "".join(parts).strip()


def parse_time_text(value: str) -> datetime:
    for fmt in TEXT_FORMATS:
        try:
            parsed = datetime.strptime(value, fmt)
        except ValueError:
            continue
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed
    raise TimeParseError(f"unable to parse time value: {value}", {"value": value})


class LocalTime(BaseModel):
    """Broken-down wall clock time. ``month`` is 0-based and ``day_of_week``
    counts from Sunday, as the device reports them."""

    year: int = 0
    month: int = 0
    day_of_month: int = 0
    day_of_week: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0

    @classmethod
    def from_datetime(cls, dt: datetime) -> Self:
        return cls(
            year=dt.year,
            month=dt.month - 1,
            day_of_month=dt.day,
            day_of_week=(dt.weekday() + 1) % 7,
            hour=dt.hour,
            minute=dt.minute,
            second=dt.second,
        )

    def to_datetime(self) -> datetime:
        """Host-local datetime. Out of range fields roll over into the next
        larger unit, so day 0 is the last day of the previous month."""
        year_offset, month_index = divmod(self.month, 12)
        try:
            offset = timedelta(
                days=self.day_of_month - 1,
                hours=self.hour,
                minutes=self.minute,
                seconds=self.second,
            )
            return (datetime(self.year + year_offset, month_index + 1, 1) + offset).astimezone()
        except (OverflowError, ValueError) as exc:
            raise TimeParseError(f"invalid local time: {exc}", self.model_dump()) from exc

    @classmethod
    def from_element(cls, element: ET.Element) -> Self:
        return cls(
            year=parse_int(element.get("year")),
            month=parse_int(element.get("month")),
            day_of_month=parse_int(element.get("dayOfMonth")),
            day_of_week=parse_int(element.get("dayOfWeek")),
            hour=parse_int(element.get("hour")),
            minute=parse_int(element.get("minute")),
            second=parse_int(element.get("second")),
        )

    def to_element(self, parent: ET.Element) -> ET.Element:
        element = ET.SubElement(parent, "localTime")
        element.set("year", str(self.year))
        element.set("month", str(self.month))
        element.set("dayOfMonth", str(self.day_of_month))
        element.set("dayOfWeek", str(self.day_of_week))
        element.set("hour", str(self.hour))
        element.set("minute", str(self.minute))
        element.set("second", str(self.second))
        return element


class ClockTime(BaseModel):
    utc_time: int = 0
    cue_music: int = 0
    time_format: str = ""
    brightness: int = 0
    clock_error: int = 0
    utc_sync_time: int = 0
    local_time: LocalTime | None = None
    zone: str = ""
    utc: int = 0
    value: str = ""

    @classmethod
    def from_xml(cls, data: str | bytes) -> Self:
        root = parse_root(data, "clockTime")
        local = root.find("localTime")
        return cls(
            utc_time=parse_int(root.get("utcTime")),
            cue_music=parse_int(root.get("cueMusic")),
            time_format=root.get("timeFormat", ""),
            brightness=parse_int(root.get("brightness")),
            clock_error=parse_int(root.get("clockError")),
            utc_sync_time=parse_int(root.get("utcSyncTime")),
            local_time=LocalTime.from_element(local) if local is not None else None,
            zone=root.get("zone", ""),
            utc=parse_int(root.get("utc")),
            value=_own_text(root),
        )

    def to_xml(self) -> str:
        element = ET.Element("clockTime")
        set_attr(element, "utcTime", self.utc_time or None)
        set_attr(element, "cueMusic", self.cue_music or None)
        set_attr(element, "timeFormat", self.time_format)
        set_attr(element, "brightness", self.brightness or None)
        set_attr(element, "clockError", self.clock_error or None)
        set_attr(element, "utcSyncTime", self.utc_sync_time or None)
        set_attr(element, "zone", self.zone)
        set_attr(element, "utc", self.utc or None)
        if self.local_time is not None:
            self.local_time.to_element(element).tail = self.value
        else:
            element.text = self.value
        return to_string(element)

    def get_time(self) -> datetime:
        """Best available time: epoch, then localTime, then the text value."""
        if self.utc_time > 0:
            return _from_epoch(self.utc_time)
        if self.utc > 0:
            return _from_epoch(self.utc)
        if self.local_time is not None:
            return self.local_time.to_datetime()
        if self.value:
            try:
                return parse_time_text(self.value)
            except TimeParseError:
                logger.debug("Unparseable clock time", value=self.value)
                raise
        raise TimeParseError("no time data available")

    def get_utc(self) -> int:
        if self.utc_time > 0:
            return self.utc_time
        return self.utc

    def get_time_string(self) -> str:
        try:
            return self.get_time().astimezone(timezone.utc).strftime(CANONICAL_FORMAT)
        except TimeParseError:
            return self.value

    def is_empty(self) -> bool:
        return self.utc_time == 0 and self.utc == 0 and not self.value and self.local_time is None

    def set_time(self, dt: datetime) -> None:
        epoch = int(dt.timestamp())
        self.utc_time = epoch
        self.utc = epoch
        self.value = _canonical(epoch)
        self.zone = _zone_name(dt)
        self.local_time = LocalTime.from_datetime(dt)

    def set_utc(self, epoch: int) -> None:
        moment = _from_epoch(epoch)
        self.utc_time = epoch
        self.utc = epoch
        self.value = moment.strftime(CANONICAL_FORMAT)
        self.local_time = LocalTime.from_datetime(moment)


class ClockTimeRequest(BaseModel):
    """Body for setting the device time."""

    zone: str = ""
    utc: int = 0
    value: str = ""

    @classmethod
    def from_datetime(cls, dt: datetime) -> Self:
        epoch = int(dt.timestamp())
        return cls(zone=_zone_name(dt), utc=epoch, value=_canonical(epoch))

    @classmethod
    def from_utc(cls, epoch: int) -> Self:
        return cls(utc=epoch, value=_canonical(epoch))

    def validate(self) -> None:
        if self.utc <= 0 and not self.value:
            raise MissingFieldError("either UTC timestamp or time value must be provided", "utc")
        if self.utc > 0 and not MIN_UTC <= self.utc <= MAX_UTC:
            raise OutOfRangeError(
                f"UTC timestamp {self.utc} is outside reasonable range",
                "utc",
                {"min": MIN_UTC, "max": MAX_UTC},
            )

    def to_xml(self) -> str:
        element = ET.Element("clockTime")
        set_attr(element, "zone", self.zone)
        set_attr(element, "utc", self.utc or None)
        element.text = self.value
        return to_string(element)
