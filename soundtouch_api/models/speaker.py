"""Notification playback through the ``/speaker`` endpoint."""

import xml.etree.ElementTree as ET
from typing import ClassVar, Self
from urllib.parse import quote_plus

from pydantic import BaseModel

from soundtouch_api.config import settings
from soundtouch_api.exceptions import MissingFieldError, OutOfRangeError
from soundtouch_api.models.status import StatusResponse
from soundtouch_api.utils.xml_codec import add_child, child_text, parse_optional_int, parse_root, to_string

TTS_SERVICE = "TTS Notification"
TTS_MESSAGE = "Google TTS"


def build_tts_url(text: str, language: str, base_url: str | None = None) -> str:
    base_url = base_url or settings.tts_base_url
    return f"{base_url}?ie=UTF-8&tl={language}&client=tw-ob&q={quote_plus(text)}"


class PlayInfo(BaseModel):
    url: str = ""
    app_key: str = ""
    service: str = ""
    message: str = ""
    reason: str = ""
    volume: int | None = None

    @classmethod
    def new(cls, url: str, app_key: str, service: str, message: str, reason: str) -> Self:
        return cls(url=url, app_key=app_key, service=service, message=message, reason=reason)

    @classmethod
    def tts(cls, text: str, app_key: str, language: str | None = None, volume: int | None = None) -> Self:
        """Speak text through Google Translate's TTS endpoint."""
        language = language or settings.tts_language
        return cls(
            url=build_tts_url(text, language),
            app_key=app_key,
            service=TTS_SERVICE,
            message=TTS_MESSAGE,
            reason=text,
            volume=volume,
        )

    @classmethod
    def for_url(
        cls,
        url: str,
        app_key: str,
        service: str,
        message: str = "",
        reason: str = "",
        volume: int | None = None,
    ) -> Self:
        return cls(url=url, app_key=app_key, service=service, message=message, reason=reason, volume=volume)

    def set_volume(self, volume: int) -> Self:
        self.volume = volume
        return self

    def validate(self) -> None:
        if not self.url:
            raise MissingFieldError("URL cannot be empty", "url")
        if not self.app_key:
            raise MissingFieldError("app key cannot be empty", "app_key")
        if not self.service:
            raise MissingFieldError("service cannot be empty", "service")
        if self.volume is not None and not 0 <= self.volume <= 100:
            raise OutOfRangeError("volume must be between 0 and 100", "volume", {"volume": self.volume})

    @classmethod
    def from_xml(cls, data: str | bytes) -> Self:
        root = parse_root(data, "play_info")
        return cls(
            url=child_text(root, "url"),
            app_key=child_text(root, "app_key"),
            service=child_text(root, "service"),
            message=child_text(root, "message"),
            reason=child_text(root, "reason"),
            volume=parse_optional_int(child_text(root, "volume")),
        )

    def to_xml(self) -> str:
        element = ET.Element("play_info")
        add_child(element, "url", self.url)
        add_child(element, "app_key", self.app_key)
        add_child(element, "service", self.service)
        add_child(element, "message", self.message)
        add_child(element, "reason", self.reason)
        if self.volume is not None:
            add_child(element, "volume", self.volume)
        return to_string(element)

    def __str__(self) -> str:
        volume = "current" if self.volume is None else str(self.volume)
        return f"Service: {self.service}, Message: {self.message}, Volume: {volume}"


class SpeakerResponse(StatusResponse):
    success_paths: ClassVar[tuple[str, ...]] = ("/speaker",)
