"""Dependencies between business and technical services."""

from __future__ import annotations

from dataclasses import dataclass

from pdapi.api import ApiClient
from pdapi.model import Model

_BUSINESS_TYPES = frozenset({"business_service", "business_service_reference"})
_TECHNICAL_TYPES = frozenset({"service", "technical_service_reference"})


@dataclass
class ServiceObj(Model):
    """A service taking part in a dependency."""

    id: str = ""
    type: str = ""


@dataclass
class ServiceDependency(Model):
    """A dependency between a supporting and a dependent service."""

    id: str = ""
    type: str = ""
    supporting_service: ServiceObj | None = None
    dependent_service: ServiceObj | None = None


@dataclass
class ListServiceDependencies(Model):
    """A list of service dependencies."""

    relationships: list[ServiceDependency] | None = None


class ServiceDependencyService:
    """Service dependency endpoints."""

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    def associate(self, dependencies: ListServiceDependencies) -> ListServiceDependencies | None:
        """Create dependencies between services."""
        response = self._api.request(
            "POST", "/service_dependencies/associate", body=dependencies
        )
        return ListServiceDependencies.from_dict(response.json())

    def disassociate(
        self, dependencies: ListServiceDependencies
    ) -> ListServiceDependencies | None:
        """Remove dependencies between services."""
        response = self._api.request(
            "POST", "/service_dependencies/disassociate", body=dependencies
        )
        return ListServiceDependencies.from_dict(response.json())

    def get_for_type(
        self, service_id: str, service_type: str
    ) -> ListServiceDependencies | None:
        """Fetch the immediate dependencies of a business or technical service."""
        if service_type in _BUSINESS_TYPES:
            path = f"/service_dependencies/business_services/{service_id}"
        elif service_type in _TECHNICAL_TYPES:
            path = f"/service_dependencies/technical_services/{service_id}"
        else:
            raise ValueError(f"dependent Service type of {service_type} not found")
        response = self._api.request("GET", path)
        return ListServiceDependencies.from_dict(response.json())