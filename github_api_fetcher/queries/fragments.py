"""Common GraphQL fragments shared by requests."""

from ..graphql import Field, Fragment, page_info_fragment

# Names of GitHub GraphQL objects to build fragments on
USER = "User"
ORGANIZATION = "Organization"
REPOSITORY = "Repository"
GIST = "Gist"
LANGUAGE = "Language"
PULL_REQUEST = "PullRequest"

language = Fragment(
    "language",
    LANGUAGE,
    [
        Field("name"),
        Field("color"),
    ],
)

min_organization = Fragment(
    "minOrganizationProfile",
    ORGANIZATION,
    [
        Field("id", "gitHubId"),
        Field("login", "name"),
        Field("url", "publicUrl"),
    ],
)

min_repository = Fragment(
    "minRepositoryProfile",
    REPOSITORY,
    [
        Field("id", "gitHubId"),
        Field("name"),
        Field("owner", "ownerName", [Field("login", "name")]),
        Field("url", "publicUrl"),
        Field("isPrivate"),
    ],
)

min_gist = Fragment(
    "minGistProfile",
    GIST,
    [
        Field("id", "gitHubId"),
        Field("name"),
        Field("owner", "ownerUsername", [Field("login", "username")]),
        Field("url", "publicUrl"),
    ],
)

pull_request = Fragment(
    "pullRequest",
    PULL_REQUEST,
    [
        Field("title"),
        Field("createdAt", "creationDateTime"),
        Field("merged", "isMerged"),
        Field("closed", "isClosed"),
        Field("additions", "additionsCount"),
        Field("deletions", "deletionsCount"),
        Field("url", "publicUrl"),
    ],
)

__all__ = [
    "language",
    "min_gist",
    "min_organization",
    "min_repository",
    "page_info_fragment",
    "pull_request",
]
