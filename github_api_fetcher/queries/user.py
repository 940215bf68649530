"""Requests for GitHub user profiles and their paged collections."""

from ..errors import ParseError, not_found
from ..graphql import Field, Fragment, GraphQLRequest, PagedRequest, dig, page_info_fragment
from ..models import GistProfileMinified, OrganizationProfileMinified, RepositoryProfileMinified, UserProfile
from . import fragments
from .parse import parse_min_gist, parse_min_organization, parse_min_repository, parse_user_profile

profile_fragment = Fragment(
    "UserProfile",
    fragments.USER,
    [
        Field("id", "gitHubId"),
        Field("login", "username"),
        Field("name", "displayName"),
        Field("company"),
        Field("url", "publicUrl"),
        Field("createdAt", "creationDateTime"),
        Field("avatarUrl"),
        Field("isHireable", "forHire"),
        Field("followers", "followersCount", [Field("totalCount", "count")]),
    ],
)


class UserProfileRequest(GraphQLRequest[UserProfile]):
    query = f"""
        query GetUserProfile($username: String!) {{
            user(login: $username) {{
                {profile_fragment.spread}
            }}
        }}

        {profile_fragment}
    """

    def __init__(self, username: str):
        super().__init__({"username": username})

    def parse_response(self, data: dict) -> UserProfile:
        raw = dig(data, ("user",))
        if raw is None:
            raise not_found(f"User '{self.variables['username']}' not found")
        return parse_user_profile(raw)


class OrganizationMembershipsRequest(PagedRequest[OrganizationProfileMinified]):
    """Organizations the user is a member of."""

    connection_path = ("user", "organizations")
    query = f"""
        query GetUserOrganizationMemberships($username: String!, $cursor: String) {{
            user(login: $username) {{
                organizations(first: 100, after: $cursor) {{
                    nodes {{
                        {fragments.min_organization.spread}
                    }}
                    pageInfo {{
                        {page_info_fragment.spread}
                    }}
                }}
            }}
        }}

        {fragments.min_organization}
        {page_info_fragment}
    """

    def __init__(self, username: str):
        super().__init__({"username": username})

    def parse_response(self, data: dict) -> list[OrganizationProfileMinified]:
        super().parse_response(data)  # Updates page info and prepares the next page
        return [parse_min_organization(node) for node in self.nodes(data)]


class RepositoryOwnershipsRequest(PagedRequest[RepositoryProfileMinified]):
    """Public repositories owned by the user."""

    connection_path = ("user", "repositories")
    query = f"""
        query GetUserRepositoryOwnerships($username: String!, $cursor: String) {{
            user(login: $username) {{
                repositories(first: 100, after: $cursor, privacy: PUBLIC, ownerAffiliations: OWNER) {{
                    nodes {{
                        {fragments.min_repository.spread}
                    }}
                    pageInfo {{
                        {page_info_fragment.spread}
                    }}
                }}
            }}
        }}

        {fragments.min_repository}
        {page_info_fragment}
    """

    def __init__(self, username: str):
        super().__init__({"username": username})

    def parse_response(self, data: dict) -> list[RepositoryProfileMinified]:
        super().parse_response(data)
        return [parse_min_repository(node) for node in self.nodes(data)]


class PublicGistsRequest(PagedRequest[GistProfileMinified]):
    """Public gists owned by the user."""

    connection_path = ("user", "gists")
    query = f"""
        query GetUserGists($username: String!, $cursor: String) {{
            user(login: $username) {{
                gists(privacy: PUBLIC, first: 100, after: $cursor) {{
                    nodes {{
                        {fragments.min_gist.spread}
                    }}
                    pageInfo {{
                        {page_info_fragment.spread}
                    }}
                }}
            }}
        }}

        {fragments.min_gist}
        {page_info_fragment}
    """

    def __init__(self, username: str):
        super().__init__({"username": username})

    def parse_response(self, data: dict) -> list[GistProfileMinified]:
        super().parse_response(data)
        return [parse_min_gist(node) for node in self.nodes(data)]


class ContributionYearsRequest(GraphQLRequest[list[int]]):
    """Years the user has contributed in, most recent first."""

    query = """
        query GetUserContributionYears($username: String!) {
            user(login: $username) {
                contributionsCollection {
                    contributionYears
                }
            }
        }
    """

    def __init__(self, username: str):
        super().__init__({"username": username})

    def parse_response(self, data: dict) -> list[int]:
        user = dig(data, ("user",))
        if user is None:
            raise not_found(f"User '{self.variables['username']}' not found")
        years = dig(user, ("contributionsCollection", "contributionYears"))
        if not isinstance(years, list):
            raise ParseError(data)
        return [int(year) for year in years]
