"""Request for a GitHub organization profile."""

from ..errors import not_found
from ..graphql import Field, Fragment, GraphQLRequest, dig
from ..models import OrganizationProfile
from . import fragments
from .parse import parse_organization_profile

profile_fragment = Fragment(
    "OrganizationProfile",
    fragments.ORGANIZATION,
    [
        Field("id", "gitHubId"),
        Field("login", "name"),
        Field("name", "displayName"),
        Field("url", "publicUrl"),
        Field("description"),
        Field("avatarUrl"),
        Field("membersWithRole", "membersCount", [Field("totalCount", "count")]),
    ],
)


class OrganizationProfileRequest(GraphQLRequest[OrganizationProfile]):
    query = f"""
        query GetOrganizationProfile($name: String!) {{
            organization(login: $name) {{
                {profile_fragment.spread}
            }}
        }}

        {profile_fragment}
    """

    def __init__(self, name: str):
        super().__init__({"name": name})

    def parse_response(self, data: dict) -> OrganizationProfile:
        raw = dig(data, ("organization",))
        if raw is None:
            raise not_found(f"Organization '{self.variables['name']}' not found")
        return parse_organization_profile(raw)
