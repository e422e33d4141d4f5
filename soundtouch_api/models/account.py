"""Music service account credentials for ``/setMusicServiceAccount`` and
``/removeMusicServiceAccount``."""

import xml.etree.ElementTree as ET
from typing import ClassVar, Self

from pydantic import BaseModel

from soundtouch_api.exceptions import MissingFieldError
from soundtouch_api.models.status import StatusResponse
from soundtouch_api.utils.xml_codec import add_child, child_text, parse_root, set_attr, to_string

STORED_MUSIC = "STORED_MUSIC"

_DESCRIPTIONS = {
    "SPOTIFY": "Spotify Premium",
    "PANDORA": "Pandora Music Service",
    "AMAZON": "Amazon Music",
    "DEEZER": "Deezer Premium",
    "IHEART": "iHeartRadio",
    STORED_MUSIC: "Network Music Library",
    "LOCAL_MUSIC": "Local Music Server",
}


class MusicServiceCredentials(BaseModel):
    source: str = ""
    display_name: str = ""
    user: str = ""
    password: str = ""

    @classmethod
    def new(cls, source: str, display_name: str, user: str, password: str) -> Self:
        return cls(source=source, display_name=display_name, user=user, password=password)

    @classmethod
    def spotify(cls, user: str, password: str) -> Self:
        return cls.new("SPOTIFY", "Spotify Premium", user, password)

    @classmethod
    def pandora(cls, user: str, password: str) -> Self:
        return cls.new("PANDORA", "Pandora Music Service", user, password)

    @classmethod
    def amazon_music(cls, user: str, password: str) -> Self:
        return cls.new("AMAZON", "Amazon Music", user, password)

    @classmethod
    def deezer(cls, user: str, password: str) -> Self:
        return cls.new("DEEZER", "Deezer Premium", user, password)

    @classmethod
    def iheartradio(cls, user: str, password: str) -> Self:
        return cls.new("IHEART", "iHeartRadio", user, password)

    @classmethod
    def stored_music(cls, user: str, display_name: str) -> Self:
        """NAS / UPnP media server account. These never carry a password."""
        return cls.new(STORED_MUSIC, display_name, user, "")

    def validate(self) -> None:
        """Raise MissingFieldError for the first required field that is empty."""
        if not self.source:
            raise MissingFieldError("source cannot be empty", "source")
        if not self.user:
            raise MissingFieldError("user cannot be empty", "user")
        if self.source != STORED_MUSIC and not self.password:
            raise MissingFieldError(f"password cannot be empty for {self.source}", "password")

    def is_for_removal(self) -> bool:
        return not self.password

    def has_password(self) -> bool:
        return bool(self.password)

    def for_removal(self) -> Self:
        """Copy of these credentials with the password cleared."""
        return self.model_copy(update={"password": ""})

    def get_description(self) -> str:
        if self.display_name:
            return self.display_name
        return _DESCRIPTIONS.get(self.source, self.source)

    @classmethod
    def from_xml(cls, data: str | bytes) -> Self:
        root = parse_root(data, "credentials")
        return cls(
            source=root.get("source", ""),
            display_name=root.get("displayName", ""),
            user=child_text(root, "user"),
            password=child_text(root, "pass"),
        )

    def to_xml(self) -> str:
        element = ET.Element("credentials")
        element.set("source", self.source)
        set_attr(element, "displayName", self.display_name)
        add_child(element, "user", self.user)
        add_child(element, "pass", self.password)
        return to_string(element)


class MusicServiceAccountResponse(StatusResponse):
    # any other path, including an empty body, is a failure
    success_paths: ClassVar[tuple[str, ...]] = ("/setMusicServiceAccount", "/removeMusicServiceAccount")
