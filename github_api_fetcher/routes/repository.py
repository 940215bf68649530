from ..models import RepositoryProfile
from ..queries import RepositoryProfileRequest
from .base import RouteFetcher


class RepositoryRoute(RouteFetcher):
    def get_profile(self, owner_username: str, repository_name: str) -> RepositoryProfile | None:
        """Returns the repository's profile, or None if it was not found."""
        return self.fetcher.fetch(RepositoryProfileRequest(owner_username, repository_name))
