import xml.etree.ElementTree as ET
from enum import Enum
from typing import Self

from pydantic import BaseModel

from soundtouch_api.utils.xml_codec import format_bool, parse_bool, parse_root, set_attr, to_string


class ServiceType(str, Enum):
    AIRPLAY = "AIRPLAY"
    ALEXA = "ALEXA"
    AMAZON = "AMAZON"
    BLUETOOTH = "BLUETOOTH"
    BMX = "BMX"
    DEEZER = "DEEZER"
    IHEART = "IHEART"
    LOCAL_INTERNET_RADIO = "LOCAL_INTERNET_RADIO"
    LOCAL_MUSIC = "LOCAL_MUSIC"
    NOTIFICATION = "NOTIFICATION"
    PANDORA = "PANDORA"
    SPOTIFY = "SPOTIFY"
    TUNEIN = "TUNEIN"


STREAMING_SERVICE_TYPES = frozenset(
    {
        ServiceType.SPOTIFY.value,
        ServiceType.PANDORA.value,
        ServiceType.TUNEIN.value,
        ServiceType.AMAZON.value,
        ServiceType.DEEZER.value,
        ServiceType.IHEART.value,
        ServiceType.LOCAL_INTERNET_RADIO.value,
    }
)

LOCAL_SERVICE_TYPES = frozenset(
    {
        ServiceType.BLUETOOTH.value,
        ServiceType.AIRPLAY.value,
        ServiceType.LOCAL_MUSIC.value,
    }
)


def _type_key(service_type: ServiceType | str) -> str:
    return service_type.value if isinstance(service_type, ServiceType) else service_type


class Service(BaseModel):
    # plain string so firmware-specific types survive parsing
    type: str
    is_available: bool = False
    reason: str = ""

    def get_reason(self) -> str:
        return self.reason

    def is_type(self, service_type: ServiceType | str) -> bool:
        return self.type == _type_key(service_type)


class ServiceAvailability(BaseModel):
    services: list[Service] | None = None

    @classmethod
    def from_xml(cls, data: str | bytes) -> Self:
        root = parse_root(data, "serviceAvailability")
        services_element = root.find("services")
        if services_element is None:
            return cls()
        return cls(
            services=[
                Service(
                    type=item.get("type", ""),
                    is_available=parse_bool(item.get("isAvailable")),
                    reason=item.get("reason", ""),
                )
                for item in services_element.findall("service")
            ]
        )

    def to_xml(self) -> str:
        element = ET.Element("serviceAvailability")
        if self.services is not None:
            services_element = ET.SubElement(element, "services")
            for service in self.services:
                item = ET.SubElement(services_element, "service")
                item.set("type", service.type)
                item.set("isAvailable", format_bool(service.is_available))
                set_attr(item, "reason", service.reason)
        return to_string(element)

    def _all(self) -> list[Service]:
        return self.services or []

    def get_available_services(self) -> list[Service]:
        return [service for service in self._all() if service.is_available]

    def get_unavailable_services(self) -> list[Service]:
        return [service for service in self._all() if not service.is_available]

    def is_service_available(self, service_type: ServiceType | str) -> bool:
        return any(service.is_type(service_type) and service.is_available for service in self._all())

    def get_service_by_type(self, service_type: ServiceType | str) -> Service | None:
        for service in self._all():
            if service.is_type(service_type):
                return service
        return None

    def has_spotify(self) -> bool:
        return self.is_service_available(ServiceType.SPOTIFY)

    def has_alexa(self) -> bool:
        return self.is_service_available(ServiceType.ALEXA)

    def has_bluetooth(self) -> bool:
        return self.is_service_available(ServiceType.BLUETOOTH)

    def has_airplay(self) -> bool:
        return self.is_service_available(ServiceType.AIRPLAY)

    def has_tunein(self) -> bool:
        return self.is_service_available(ServiceType.TUNEIN)

    def has_pandora(self) -> bool:
        return self.is_service_available(ServiceType.PANDORA)

    def has_local_music(self) -> bool:
        return self.is_service_available(ServiceType.LOCAL_MUSIC)

    def get_streaming_services(self) -> list[Service]:
        return [service for service in self._all() if service.type in STREAMING_SERVICE_TYPES]

    def get_local_services(self) -> list[Service]:
        return [service for service in self._all() if service.type in LOCAL_SERVICE_TYPES]

    def get_service_count(self) -> int:
        return len(self._all())

    def get_available_service_count(self) -> int:
        return len(self.get_available_services())

    def get_unavailable_service_count(self) -> int:
        return len(self.get_unavailable_services())
