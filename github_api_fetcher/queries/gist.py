"""Request for a GitHub gist profile."""

from ..errors import not_found
from ..graphql import Field, Fragment, GraphQLRequest, dig
from ..models import GistProfile
from . import fragments
from .parse import parse_gist_profile

profile_fragment = Fragment(
    "GistProfile",
    fragments.GIST,
    [
        *fragments.min_gist.fields,
        Field("description"),
        Field("isFork"),
        Field("createdAt", "creationDateTime"),
        Field("pushedAt", "lastPushDateTime"),
        Field("forks", "forksCount", [Field("totalCount", "count")]),
        Field("stargazers", "starsCount", [Field("totalCount", "count")]),
        Field(
            "files",
            children=[
                Field("language", children=[Field("name")]),
                Field("size", "bytesCount"),
            ],
        ),
        Field("comments", "commentsCount", [Field("totalCount", "count")]),
    ],
)


class GistProfileRequest(GraphQLRequest[GistProfile]):
    query = f"""
        query GetGistProfile($ownerUsername: String!, $gistName: String!) {{
            user(login: $ownerUsername) {{
                gist(name: $gistName) {{
                    {profile_fragment.spread}
                }}
            }}
        }}

        {profile_fragment}
    """

    def __init__(self, owner_username: str, gist_name: str):
        super().__init__({"ownerUsername": owner_username, "gistName": gist_name})

    def parse_response(self, data: dict) -> GistProfile:
        raw = dig(data, ("user", "gist"))
        if raw is None:
            raise not_found(
                f"Gist '{self.variables['gistName']}' of '{self.variables['ownerUsername']}' not found"
            )
        return parse_gist_profile(raw)
