"""Shared XML payloads captured from SoundTouch devices."""

import pytest


@pytest.fixture
def service_availability_xml() -> str:
    return """<?xml version="1.0" encoding="UTF-8" ?>
<serviceAvailability>
  <services>
    <service type="AIRPLAY" isAvailable="true" />
    <service type="ALEXA" isAvailable="false" />
    <service type="AMAZON" isAvailable="true" />
    <service type="BLUETOOTH" isAvailable="false" reason="INVALID_SOURCE_TYPE" />
    <service type="BMX" isAvailable="false" />
    <service type="DEEZER" isAvailable="true" />
    <service type="IHEART" isAvailable="true" />
    <service type="LOCAL_INTERNET_RADIO" isAvailable="true" />
    <service type="LOCAL_MUSIC" isAvailable="true" />
    <service type="NOTIFICATION" isAvailable="false" />
    <service type="PANDORA" isAvailable="true" />
    <service type="SPOTIFY" isAvailable="true" />
    <service type="TUNEIN" isAvailable="true" />
  </services>
</serviceAvailability>"""


@pytest.fixture
def sources_xml() -> str:
    return """<?xml version="1.0" encoding="UTF-8" ?>
<sources deviceID="A81B6A536A98">
    <sourceItem source="AUX" sourceAccount="AUX" status="READY" isLocal="true" multiroomallowed="true">AUX IN</sourceItem>
    <sourceItem source="SPOTIFY" sourceAccount="user@example.com" status="READY" isLocal="false" multiroomallowed="true">user+spotify@example.com</sourceItem>
    <sourceItem source="SPOTIFY" sourceAccount="other@example.com" status="FOO" isLocal="false" multiroomallowed="true" />
    <sourceItem source="BLUETOOTH" status="UNAVAILABLE" isLocal="true" multiroomallowed="true" />
    <sourceItem source="TUNEIN" status="READY" isLocal="false" multiroomallowed="false" />
</sources>"""


@pytest.fixture
def presets_xml() -> str:
    return """<?xml version="1.0" encoding="UTF-8" ?>
<presets>
    <preset id="1" createdOn="1719128436" updatedOn="1728740382">
        <ContentItem source="SPOTIFY" type="tracklisturl" location="/playback/container/abc123" sourceAccount="user@example.com" isPresetable="true">
            <itemName>My Playlist</itemName>
            <containerArt>https://i.scdn.co/image/ab67616d00001e02</containerArt>
        </ContentItem>
    </preset>
    <preset id="2" createdOn="1703353552" updatedOn="1743615710">
        <ContentItem source="SPOTIFY" type="tracklisturl" location="/playback/container/def456" sourceAccount="user@example.com" isPresetable="true">
            <itemName>Chill Music Collection</itemName>
        </ContentItem>
    </preset>
    <preset id="3">
        <ContentItem source="TUNEIN" type="stationurl" location="http://stream.example.com" isPresetable="true">
            <itemName>Radio Station</itemName>
        </ContentItem>
    </preset>
</presets>"""
