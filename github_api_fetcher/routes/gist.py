from ..models import GistProfile
from ..queries import GistProfileRequest
from .base import RouteFetcher


class GistRoute(RouteFetcher):
    def get_profile(self, owner_username: str, gist_id: str) -> GistProfile | None:
        """Returns the gist's profile, or None if it was not found.

        Example: ``get_profile("staltz", "868e7e9bc2a7b8c1f754")``
        """
        return self.fetcher.fetch(GistProfileRequest(owner_username, gist_id))
