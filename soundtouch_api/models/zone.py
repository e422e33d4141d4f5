"""Multiroom zones: ``/getZone``, ``/setZone`` and the single-slave
``/addZoneSlave`` / ``/removeZoneSlave`` endpoints."""

import xml.etree.ElementTree as ET
from enum import Enum
from typing import Self

from pydantic import BaseModel

from soundtouch_api.exceptions import (
    CardinalityError,
    DuplicateMemberError,
    MalformedValueError,
    MissingFieldError,
    SelfReferenceError,
    ZoneOperationError,
)
from soundtouch_api.utils.network import is_valid_ip
from soundtouch_api.utils.xml_codec import parse_root, set_attr, text_of, to_string


class ZoneStatus(str, Enum):
    STANDALONE = "STANDALONE"
    MASTER = "MASTER"
    SLAVE = "SLAVE"

    @property
    def description(self) -> str:
        return {
            ZoneStatus.STANDALONE: "Standalone",
            ZoneStatus.MASTER: "Zone Master",
            ZoneStatus.SLAVE: "Zone Member",
        }[self]


class ZoneOperation(str, Enum):
    CREATE = "CREATE"
    MODIFY = "MODIFY"
    ADD_MEMBER = "ADD_MEMBER"
    REMOVE_MEMBER = "REMOVE_MEMBER"
    DISSOLVE = "DISSOLVE"

    @property
    def description(self) -> str:
        return {
            ZoneOperation.CREATE: "Create Zone",
            ZoneOperation.MODIFY: "Modify Zone",
            ZoneOperation.ADD_MEMBER: "Add Member",
            ZoneOperation.REMOVE_MEMBER: "Remove Member",
            ZoneOperation.DISSOLVE: "Dissolve Zone",
        }[self]


# Reasons used with ZoneOperationError
ZONE_ERROR_ALREADY_IN_ZONE = "device already in zone"
ZONE_ERROR_NOT_IN_ZONE = "device not in zone"
ZONE_ERROR_MASTER_REQUIRED = "master device required"
ZONE_ERROR_UNSUPPORTED = "operation not supported by device"
ZONE_ERROR_MAX_MEMBERS = "maximum zone members reached"


class ZoneMember(BaseModel):
    device_id: str
    ip: str = ""

    @classmethod
    def from_element(cls, element: ET.Element) -> Self:
        return cls(device_id=text_of(element), ip=element.get("ipaddress", ""))

    def to_element(self, parent: ET.Element, always_ip: bool = False) -> ET.Element:
        element = ET.SubElement(parent, "member")
        if always_ip:
            element.set("ipaddress", self.ip)
        else:
            set_attr(element, "ipaddress", self.ip)
        element.text = self.device_id
        return element


class ZoneCapabilities(BaseModel):
    can_be_master: bool = True
    can_be_member: bool = True
    max_zone_members: int = 6
    supports_multiroom: bool = True

    def can_create_zone(self) -> bool:
        return self.supports_multiroom and self.can_be_master

    def can_join_zone(self) -> bool:
        return self.supports_multiroom and self.can_be_member


def _check_ip(member: ZoneMember) -> None:
    if member.ip and not is_valid_ip(member.ip):
        raise MalformedValueError(
            f"invalid IP address for device {member.device_id}: {member.ip}",
            "ip",
            {"device_id": member.device_id, "ip": member.ip},
        )


def _parse_zone(data: str | bytes) -> tuple[str, list[ZoneMember]]:
    root = parse_root(data, "zone")
    return root.get("master", ""), [ZoneMember.from_element(item) for item in root.findall("member")]


def _render_zone(master: str, members: list[ZoneMember], always_ip: bool = False) -> str:
    element = ET.Element("zone")
    element.set("master", master)
    for member in members:
        member.to_element(element, always_ip=always_ip)
    return to_string(element)


class ZoneInfo(BaseModel):
    """Zone as reported by the device."""

    master: str = ""
    members: list[ZoneMember] = []

    @classmethod
    def from_xml(cls, data: str | bytes) -> Self:
        master, members = _parse_zone(data)
        return cls(master=master, members=members)

    def to_xml(self) -> str:
        return _render_zone(self.master, self.members, always_ip=True)

    def is_standalone(self) -> bool:
        return not self.members

    def is_master(self, device_id: str) -> bool:
        return self.master == device_id

    def is_member(self, device_id: str) -> bool:
        return any(member.device_id == device_id for member in self.members)

    def is_in_zone(self, device_id: str) -> bool:
        return self.is_master(device_id) or self.is_member(device_id)

    def get_member_by_device_id(self, device_id: str) -> ZoneMember | None:
        return next((member for member in self.members if member.device_id == device_id), None)

    def get_member_by_ip(self, ip: str) -> ZoneMember | None:
        return next((member for member in self.members if member.ip == ip), None)

    def get_all_device_ids(self) -> list[str]:
        return [self.master, *(member.device_id for member in self.members)]

    def get_total_device_count(self) -> int:
        return 1 + len(self.members)

    def get_zone_status(self, device_id: str) -> ZoneStatus:
        if self.is_master(device_id):
            return ZoneStatus.STANDALONE if self.is_standalone() else ZoneStatus.MASTER
        if self.is_member(device_id):
            return ZoneStatus.SLAVE
        return ZoneStatus.STANDALONE

    def check_can_add_member(self, device_id: str, capabilities: ZoneCapabilities | None = None) -> None:
        """Raise ZoneOperationError if device_id cannot join this zone."""
        capabilities = capabilities or ZoneCapabilities()
        if not self.master:
            raise ZoneOperationError(ZoneOperation.ADD_MEMBER, device_id, ZONE_ERROR_MASTER_REQUIRED)
        if not capabilities.can_join_zone():
            raise ZoneOperationError(ZoneOperation.ADD_MEMBER, device_id, ZONE_ERROR_UNSUPPORTED)
        if self.is_in_zone(device_id):
            raise ZoneOperationError(ZoneOperation.ADD_MEMBER, device_id, ZONE_ERROR_ALREADY_IN_ZONE)
        if len(self.members) >= capabilities.max_zone_members:
            raise ZoneOperationError(ZoneOperation.ADD_MEMBER, device_id, ZONE_ERROR_MAX_MEMBERS)

    def check_can_remove_member(self, device_id: str) -> None:
        if not self.is_member(device_id):
            raise ZoneOperationError(ZoneOperation.REMOVE_MEMBER, device_id, ZONE_ERROR_NOT_IN_ZONE)

    def to_zone_request(self) -> "ZoneRequest":
        request = ZoneRequest(master=self.master)
        for member in self.members:
            request.add_member(member.device_id, member.ip)
        return request

    def __str__(self) -> str:
        if self.is_standalone():
            return f"Standalone device: {self.master}"
        member_ids = ", ".join(member.device_id for member in self.members)
        return f"Zone Master: {self.master}, Members: [{member_ids}] ({self.get_total_device_count()} total devices)"


class ZoneRequest(BaseModel):
    """Full zone layout for ``/setZone``."""

    master: str = ""
    members: list[ZoneMember] = []

    def add_member(self, device_id: str, ip: str = "") -> None:
        self.members.append(ZoneMember(device_id=device_id, ip=ip))

    def add_member_by_device_id(self, device_id: str) -> None:
        self.add_member(device_id)

    def remove_member(self, device_id: str) -> None:
        for index, member in enumerate(self.members):
            if member.device_id == device_id:
                del self.members[index]
                return

    def clear_members(self) -> None:
        self.members = []

    def has_member(self, device_id: str) -> bool:
        return any(member.device_id == device_id for member in self.members)

    def get_member_count(self) -> int:
        return len(self.members)

    def validate(self) -> None:
        if not self.master:
            raise MissingFieldError("master device ID is required", "master")

        seen = {self.master}
        for member in self.members:
            if not member.device_id:
                raise MissingFieldError("member device ID cannot be empty", "device_id")
            if member.device_id in seen:
                raise DuplicateMemberError(
                    f"duplicate device ID found: {member.device_id}",
                    "device_id",
                    {"device_id": member.device_id},
                )
            seen.add(member.device_id)
            _check_ip(member)

    @classmethod
    def from_xml(cls, data: str | bytes) -> Self:
        master, members = _parse_zone(data)
        return cls(master=master, members=members)

    def to_xml(self) -> str:
        return _render_zone(self.master, self.members)


class ZoneBuilder:
    """Fluent construction of a ZoneRequest."""

    def __init__(self, master_device_id: str) -> None:
        self._request = ZoneRequest(master=master_device_id)

    def with_member(self, device_id: str, ip: str = "") -> "ZoneBuilder":
        self._request.add_member(device_id, ip)
        return self

    def with_member_by_device_id(self, device_id: str) -> "ZoneBuilder":
        self._request.add_member_by_device_id(device_id)
        return self

    def build(self) -> ZoneRequest:
        self._request.validate()
        return self._request


class ZoneSlaveRequest(BaseModel):
    """Adds or removes exactly one slave on an existing zone."""

    master: str = ""
    members: list[ZoneMember] = []

    def add_slave(self, device_id: str, ip: str = "") -> None:
        self.members.append(ZoneMember(device_id=device_id, ip=ip))

    def validate(self) -> None:
        if not self.master:
            raise MissingFieldError("master device ID is required", "master")

        if len(self.members) != 1:
            raise CardinalityError(
                "zone slave operations require exactly one member",
                "members",
                {"count": len(self.members)},
            )

        member = self.members[0]
        if not member.device_id:
            raise MissingFieldError("slave device ID cannot be empty", "device_id")
        if member.device_id == self.master:
            raise SelfReferenceError(
                f"slave device ID cannot be the same as master: {member.device_id}",
                "device_id",
                {"device_id": member.device_id},
            )
        _check_ip(member)

    def get_slave_device_id(self) -> str:
        return self.members[0].device_id if self.members else ""

    def get_slave_ip(self) -> str:
        return self.members[0].ip if self.members else ""

    @classmethod
    def from_xml(cls, data: str | bytes) -> Self:
        master, members = _parse_zone(data)
        return cls(master=master, members=members)

    def to_xml(self) -> str:
        return _render_zone(self.master, self.members)

    def __str__(self) -> str:
        if not self.members:
            return f"Zone slave operation on master {self.master} (no slave specified)"
        slave = self.members[0]
        if slave.ip:
            return f"Zone slave operation: master={self.master}, slave={slave.device_id} ({slave.ip})"
        return f"Zone slave operation: master={self.master}, slave={slave.device_id}"

