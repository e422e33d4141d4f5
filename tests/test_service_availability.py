from soundtouch_api.models.service_availability import Service, ServiceAvailability, ServiceType


class TestServiceAvailability:
    def test_parse_device_response(self, service_availability_xml: str) -> None:
        availability = ServiceAvailability.from_xml(service_availability_xml)

        assert availability.get_service_count() == 13
        assert availability.get_available_service_count() == 9
        assert availability.get_unavailable_service_count() == 4
        assert len(availability.get_streaming_services()) == 7
        assert [service.type for service in availability.get_local_services()] == [
            "AIRPLAY",
            "BLUETOOTH",
            "LOCAL_MUSIC",
        ]

    def test_has_helpers(self, service_availability_xml: str) -> None:
        availability = ServiceAvailability.from_xml(service_availability_xml)

        assert availability.has_spotify()
        assert availability.has_airplay()
        assert availability.has_tunein()
        assert availability.has_pandora()
        assert availability.has_local_music()
        assert not availability.has_alexa()
        assert not availability.has_bluetooth()

    def test_lookup_by_type(self, service_availability_xml: str) -> None:
        availability = ServiceAvailability.from_xml(service_availability_xml)

        bluetooth = availability.get_service_by_type(ServiceType.BLUETOOTH)
        assert bluetooth is not None
        assert bluetooth.get_reason() == "INVALID_SOURCE_TYPE"
        assert availability.get_service_by_type("SPOTIFY") is not None
        assert availability.get_service_by_type("UNKNOWN") is None
        assert availability.is_service_available("AMAZON")

    def test_missing_services_element(self) -> None:
        availability = ServiceAvailability.from_xml("<serviceAvailability></serviceAvailability>")

        assert availability.services is None
        assert availability.get_service_count() == 0
        assert availability.get_available_services() == []
        assert availability.get_service_by_type(ServiceType.SPOTIFY) is None
        assert not availability.has_spotify()
        assert availability.to_xml() == "<serviceAvailability></serviceAvailability>"

    def test_unknown_type_is_kept(self) -> None:
        availability = ServiceAvailability.from_xml(
            '<serviceAvailability><services><service type="FUTURE_SERVICE" isAvailable="true" />'
            "</services></serviceAvailability>"
        )

        assert availability.is_service_available("FUTURE_SERVICE")
        assert availability.get_streaming_services() == []
        assert availability.get_local_services() == []

    def test_render(self) -> None:
        availability = ServiceAvailability(
            services=[
                Service(type="SPOTIFY", is_available=True),
                Service(type="BLUETOOTH", is_available=False, reason="INVALID_SOURCE_TYPE"),
            ]
        )

        xml = availability.to_xml()
        assert xml == (
            "<serviceAvailability><services>"
            '<service type="SPOTIFY" isAvailable="true"></service>'
            '<service type="BLUETOOTH" isAvailable="false" reason="INVALID_SOURCE_TYPE"></service>'
            "</services></serviceAvailability>"
        )
        assert ServiceAvailability.from_xml(xml) == availability
