from ..models import OrganizationProfile
from ..queries import OrganizationProfileRequest
from .base import RouteFetcher


class OrganizationRoute(RouteFetcher):
    def get_profile(self, organization_name: str) -> OrganizationProfile | None:
        """Returns the organization's profile, or None if it was not found."""
        return self.fetcher.fetch(OrganizationProfileRequest(organization_name))
