"""Request for a GitHub repository profile."""

from ..errors import not_found
from ..graphql import Field, Fragment, GraphQLRequest, dig
from ..models import RepositoryProfile
from . import fragments
from .parse import parse_repository_profile

profile_fragment = Fragment(
    "RepositoryProfile",
    fragments.REPOSITORY,
    [
        Field("id", "gitHubId"),
        Field("name"),
        Field("owner", "ownerName", [Field("login", "name")]),
        Field("description"),
        Field("isPrivate"),
        Field("primaryLanguage", "primaryProgrammingLanguage", fragments.language.fields),
        Field(
            "languages",
            "appliedProgrammingLanguages",
            [
                Field(
                    "edges",
                    children=[
                        Field("size", "bytesCount"),
                        Field("node", children=fragments.language.fields),
                    ],
                )
            ],
            "first: 100, orderBy: {field: SIZE, direction: DESC}",
        ),
        Field("isFork"),
        Field("url", "publicUrl"),
        Field("createdAt", "creationDateTime"),
        Field("pushedAt", "lastPushDateTime"),
        Field(
            "repositoryTopics",
            "topics",
            [Field("nodes", children=[Field("topic", children=[Field("name")])])],
            "first: 100",
        ),
        Field("stargazers", "starsCount", [Field("totalCount", "count")]),
        Field("watchers", "watchersCount", [Field("totalCount", "count")]),
        Field("forkCount"),
    ],
)


class RepositoryProfileRequest(GraphQLRequest[RepositoryProfile]):
    query = f"""
        query GetRepositoryProfile($ownerUsername: String!, $repositoryName: String!) {{
            repository(owner: $ownerUsername, name: $repositoryName) {{
                {profile_fragment.spread}
            }}
        }}

        {profile_fragment}
    """

    def __init__(self, owner_username: str, repository_name: str):
        super().__init__({"ownerUsername": owner_username, "repositoryName": repository_name})

    def parse_response(self, data: dict) -> RepositoryProfile:
        raw = dig(data, ("repository",))
        if raw is None:
            raise not_found(
                f"Repository '{self.variables['ownerUsername']}/{self.variables['repositoryName']}' not found"
            )
        return parse_repository_profile(raw)
