"""Tests for the resource catalog."""

from core.domain.models import Album, Comment, Photo, Post, Todo, User
from core.domain.resources import Resource


class TestResource:
    """Tests for Resource."""

    def test__all__returns_members_in_menu_order(self) -> None:
        """all() enumerates every resource in a stable order."""
        assert [r.value for r in Resource.all()] == [
            "posts",
            "comments",
            "albums",
            "photos",
            "todos",
            "users",
        ]

    def test__path__is_injective(self) -> None:
        """Every resource has its own path segment."""
        paths = [r.path for r in Resource.all()]

        assert len(set(paths)) == len(paths)

    def test__path__matches_endpoint_name(self) -> None:
        """Path segments are the endpoint names."""
        assert Resource.COMMENTS.path == "comments"
        assert Resource.USERS.path == "users"

    def test__element_type__maps_each_resource(self) -> None:
        """Each resource decodes into its own element shape."""
        assert Resource.POSTS.element_type is Post
        assert Resource.COMMENTS.element_type is Comment
        assert Resource.ALBUMS.element_type is Album
        assert Resource.PHOTOS.element_type is Photo
        assert Resource.TODOS.element_type is Todo
        assert Resource.USERS.element_type is User

    def test__header__is_uppercased_name(self) -> None:
        """List headers show the resource name upper-cased."""
        assert Resource.TODOS.header() == "TODOS"

    def test__lookup_by_value(self) -> None:
        """Resources can be parsed from their string value."""
        assert Resource("photos") is Resource.PHOTOS
