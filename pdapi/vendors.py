"""Vendors."""

from __future__ import annotations

from dataclasses import dataclass

from pdapi.api import ApiClient
from pdapi.model import Model, wire


@dataclass
class Vendor(Model):
    """A vendor."""

    description: str = ""
    generic_service_type: str = ""
    html_url: str = ""
    id: str = ""
    integration_guide_url: str = ""
    logo_url: str = ""
    name: str = ""
    self_url: str = wire("self", default="")
    summary: str = ""
    thumbnail_url: str = ""
    type: str = ""
    website_url: str = ""


@dataclass
class ListVendorsOptions(Model):
    """Query options for listing vendors."""

    limit: int = 0
    more: bool = False
    offset: int = 0
    total: int = 0
    query: str = ""


@dataclass
class ListVendorsResponse(Model):
    """A list of vendors."""

    limit: int = 0
    more: bool = False
    offset: int = 0
    total: int = 0
    vendors: list[Vendor] | None = None


class VendorService:
    """Vendor endpoints."""

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    def list(self, options: ListVendorsOptions | None = None) -> ListVendorsResponse | None:
        """List vendors."""
        response = self._api.request("GET", "/vendors", params=options)
        return ListVendorsResponse.from_dict(response.json())

    def get(self, vendor_id: str) -> Vendor | None:
        """Fetch a vendor."""
        response = self._api.request("GET", f"/vendors/{vendor_id}")
        return Vendor.from_dict(response.json().get("vendor"))