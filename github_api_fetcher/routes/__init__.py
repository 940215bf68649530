"""Convenience routes composing requests per GitHub resource."""

from .base import RouteFetcher
from .gist import GistRoute
from .organization import OrganizationRoute
from .repository import RepositoryRoute
from .user import UserRoute

__all__ = ["GistRoute", "OrganizationRoute", "RepositoryRoute", "RouteFetcher", "UserRoute"]
