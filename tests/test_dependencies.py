import json

import pytest
import responses

from pdapi.api import ApiClient
from pdapi.dependencies import (
    ListServiceDependencies,
    ServiceDependency,
    ServiceDependencyService,
    ServiceObj,
)

BASE = "https://api.example.com"

BUSINESS_BODY = {
    "relationships": [
        {
            "type": "service_dependency",
            "supporting_service": {"type": "business_service_reference", "id": "1"},
            "dependent_service": {"type": "technical_service_reference", "id": "1"},
            "id": "1",
        }
    ]
}

TECHNICAL_BODY = {
    "relationships": [
        {
            "type": "service_dependency",
            "supporting_service": {"type": "service", "id": "1"},
            "dependent_service": {"type": "technical_service_reference", "id": "1"},
            "id": "1",
        }
    ]
}


def expected(supporting_type):
    return ListServiceDependencies(
        relationships=[
            ServiceDependency(
                type="service_dependency",
                id="1",
                supporting_service=ServiceObj(id="1", type=supporting_type),
                dependent_service=ServiceObj(id="1", type="technical_service_reference"),
            )
        ]
    )


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def service():
    return ServiceDependencyService(ApiClient("token", base_url=BASE))


@pytest.mark.parametrize("service_type", ["business_service", "business_service_reference"])
def test_business_dependencies(mocked, service, service_type):
    mocked.add(
        responses.GET, f"{BASE}/service_dependencies/business_services/1", json=BUSINESS_BODY
    )
    assert service.get_for_type("1", service_type) == expected("business_service_reference")


@pytest.mark.parametrize("service_type", ["service", "technical_service_reference"])
def test_technical_dependencies(mocked, service, service_type):
    mocked.add(
        responses.GET, f"{BASE}/service_dependencies/technical_services/1", json=TECHNICAL_BODY
    )
    assert service.get_for_type("1", service_type) == expected("service")


def test_wrong_type_raises(mocked, service):
    with pytest.raises(ValueError, match="foo"):
        service.get_for_type("1", "foo")
    assert len(mocked.calls) == 0


def test_associate(mocked, service):
    mocked.add(responses.POST, f"{BASE}/service_dependencies/associate", json=BUSINESS_BODY)
    given = ListServiceDependencies()
    result = service.associate(given)
    assert json.loads(mocked.calls[0].request.body) == {}
    assert result == expected("business_service_reference")


def test_disassociate(mocked, service):
    mocked.add(responses.POST, f"{BASE}/service_dependencies/disassociate", json=BUSINESS_BODY)
    given = ListServiceDependencies(
        relationships=[
            ServiceDependency(
                type="service_dependency",
                supporting_service=ServiceObj(id="foo123", type="business_service_reference"),
                dependent_service=ServiceObj(id="bar123", type="technical_service_reference"),
            )
        ]
    )
    result = service.disassociate(given)
    sent = ListServiceDependencies.from_dict(json.loads(mocked.calls[0].request.body))
    assert sent == given
    assert result == expected("business_service_reference")