import pytest

from soundtouch_api.exceptions import MalformedValueError, OutOfRangeError
from soundtouch_api.models.clock_display import ClockDisplay, ClockDisplayRequest, ClockFormat


class TestClockDisplay:
    def test_parse(self) -> None:
        display = ClockDisplay.from_xml(
            '<clockDisplay deviceID="A81B6A536A98" enabled="true" format="24" brightness="80" '
            'autoDim="true" timeZone="Europe/Berlin" />'
        )

        assert display.get_device_id() == "A81B6A536A98"
        assert display.is_enabled()
        assert display.get_format() == "24"
        assert display.get_format_description() == "24-hour format"
        assert display.get_brightness() == 80
        assert display.get_brightness_level() == "Maximum"
        assert display.is_auto_dim_enabled()
        assert display.get_time_zone() == "Europe/Berlin"
        assert not display.is_empty()

    def test_defaults(self) -> None:
        display = ClockDisplay.from_xml("<clockDisplay></clockDisplay>")

        assert display.is_empty()
        assert display.get_format() == "12"
        assert display.get_format_description() == "12-hour format (AM/PM)"
        assert display.get_brightness_level() == "Off"

    def test_format_description_is_case_insensitive(self) -> None:
        assert ClockDisplay(format="AUTO").get_format_description() == "Auto format (system default)"

    @pytest.mark.parametrize(
        ("brightness", "level"),
        [
            (0, "Off"),
            (1, "Low"),
            (25, "Low"),
            (26, "Medium"),
            (50, "Medium"),
            (51, "High"),
            (75, "High"),
            (76, "Maximum"),
            (100, "Maximum"),
            (150, "Maximum"),
            (-10, "Off"),
        ],
    )
    def test_brightness_level(self, brightness: int, level: str) -> None:
        assert ClockDisplay(brightness=brightness).get_brightness_level() == level

    def test_brightness_is_clamped(self) -> None:
        assert ClockDisplay(brightness=150).get_brightness() == 100
        assert ClockDisplay(brightness=-5).get_brightness() == 0

    def test_render_omits_unset(self) -> None:
        assert ClockDisplay(enabled=True, format="12").to_xml() == '<clockDisplay enabled="true" format="12"></clockDisplay>'


class TestClockDisplayRequest:
    def test_render_all_fields(self) -> None:
        request = (
            ClockDisplayRequest()
            .set_enabled(True)
            .set_format(ClockFormat.HOUR_24)
            .set_brightness(75)
            .set_auto_dim(False)
            .set_time_zone("America/New_York")
        )

        request.validate()
        assert request.to_xml() == (
            '<clockDisplay enabled="true" format="24" brightness="75" autoDim="false" '
            'timeZone="America/New_York"></clockDisplay>'
        )

    def test_empty_request(self) -> None:
        request = ClockDisplayRequest()

        assert not request.has_changes()
        assert request.to_xml() == "<clockDisplay></clockDisplay>"

    def test_explicit_false_is_a_change(self) -> None:
        request = ClockDisplayRequest().set_enabled(False)

        assert request.has_changes()
        assert request.to_xml() == '<clockDisplay enabled="false"></clockDisplay>'

    def test_zero_brightness_is_sent(self) -> None:
        assert ClockDisplayRequest().set_brightness(0).to_xml() == '<clockDisplay brightness="0"></clockDisplay>'

    @pytest.mark.parametrize(("value", "expected"), [(150, 100), (-20, 0), (42, 42)])
    def test_set_brightness_clamps(self, value: int, expected: int) -> None:
        assert ClockDisplayRequest().set_brightness(value).brightness == expected

    @pytest.mark.parametrize("value", ["12", "24", "auto", "AUTO"])
    def test_valid_formats(self, value: str) -> None:
        ClockDisplayRequest(format=value).validate()

    def test_invalid_format(self) -> None:
        with pytest.raises(MalformedValueError, match="invalid format '36': must be '12', '24', or 'auto'"):
            ClockDisplayRequest(format="36").validate()

    def test_brightness_out_of_range(self) -> None:
        with pytest.raises(OutOfRangeError, match="brightness must be between 0 and 100, got 101"):
            ClockDisplayRequest(brightness=101).validate()
