"""Tags and their assignment to other objects."""

from __future__ import annotations

from dataclasses import dataclass

from pdapi.api import ApiClient, Response
from pdapi.model import Model, wire


@dataclass
class Tag(Model):
    """A tag."""

    label: str = ""
    id: str = ""
    type: str = ""
    summary: str = ""
    self_url: str = wire("self", default="")
    html_url: str = ""


@dataclass
class ListTagsOptions(Model):
    """Query options for listing tags."""

    limit: int = 0
    offset: int = 0
    total: int = 0
    query: str = ""


@dataclass
class ListTagsResponse(Model):
    """A list of tags."""

    limit: int = 0
    more: bool = False
    offset: int = 0
    total: int = 0
    tags: list[Tag] | None = None


@dataclass
class TagAssignment(Model):
    """One tag assigned to, or removed from, an object; the type is always sent."""

    type: str = wire(keep=True, default="")
    tag_id: str = wire("id", default="")
    label: str = ""
    entity_type: str = ""
    entity_id: str = ""


@dataclass
class TagAssignments(Model):
    """Tags to add to and remove from an object."""

    add: list[TagAssignment] | None = None
    remove: list[TagAssignment] | None = None


class TagService:
    """Tag endpoints."""

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    def list(self, options: ListTagsOptions | None = None) -> ListTagsResponse:
        """List every tag, across all pages.

        The listing always walks every page, so ``options`` do not narrow it.
        """
        return ListTagsResponse(tags=self._api.paged_get("/tags", "tags", Tag))

    def list_for_entity(self, entity: str, entity_id: str) -> ListTagsResponse:
        """List every tag of an object such as ``users`` or ``teams``."""
        return ListTagsResponse(
            tags=self._api.paged_get(f"/{entity}/{entity_id}/tags", "tags", Tag)
        )

    def create(self, tag: Tag) -> Tag | None:
        """Create a tag."""
        response = self._api.request("POST", "/tags", body={"tag": tag.to_dict()})
        return Tag.from_dict(response.json().get("tag"))

    def delete(self, tag_id: str) -> Response:
        """Delete a tag."""
        return self._api.request("DELETE", f"/tags/{tag_id}")

    def get(self, tag_id: str) -> Tag | None:
        """Fetch a tag."""
        response = self._api.request("GET", f"/tags/{tag_id}")
        return Tag.from_dict(response.json().get("tag"))

    def assign(
        self, entity: str, entity_id: str, assignments: TagAssignments
    ) -> Response:
        """Add and remove tag assignments on an object."""
        return self._api.request(
            "POST", f"/{entity}/{entity_id}/change_tags", body=assignments
        )