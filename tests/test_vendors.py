from urllib.parse import parse_qs, urlparse

import pytest
import responses

from pdapi.api import ApiClient
from pdapi.vendors import ListVendorsOptions, ListVendorsResponse, Vendor, VendorService

BASE = "https://api.example.com"


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def service():
    return VendorService(ApiClient("token", base_url=BASE))


def test_list(mocked, service):
    mocked.add(responses.GET, f"{BASE}/vendors", json={"vendors": [{"id": "1"}]})
    assert service.list(ListVendorsOptions()) == ListVendorsResponse(vendors=[Vendor(id="1")])


def test_list_sends_options(mocked, service):
    mocked.add(responses.GET, f"{BASE}/vendors", json={"vendors": []})
    result = service.list(ListVendorsOptions(query="foo", limit=10))
    query = parse_qs(urlparse(mocked.calls[0].request.url).query)
    assert query == {"limit": ["10"], "query": ["foo"]}
    assert result == ListVendorsResponse(vendors=[])


def test_get(mocked, service):
    mocked.add(responses.GET, f"{BASE}/vendors/1", json={"vendor": {"id": "1"}})
    assert service.get("1") == Vendor(id="1")