"""Requests for the GitHub GraphQL API."""

from .contributions import (
    CommitContributionsRequest,
    IssueContributionsRequest,
    PullRequestContributionsRequest,
    PullRequestReviewContributionsRequest,
)
from .gist import GistProfileRequest
from .organization import OrganizationProfileRequest
from .repository import RepositoryProfileRequest
from .user import (
    ContributionYearsRequest,
    OrganizationMembershipsRequest,
    PublicGistsRequest,
    RepositoryOwnershipsRequest,
    UserProfileRequest,
)

__all__ = [
    "CommitContributionsRequest",
    "ContributionYearsRequest",
    "GistProfileRequest",
    "IssueContributionsRequest",
    "OrganizationMembershipsRequest",
    "OrganizationProfileRequest",
    "PublicGistsRequest",
    "PullRequestContributionsRequest",
    "PullRequestReviewContributionsRequest",
    "RepositoryOwnershipsRequest",
    "RepositoryProfileRequest",
    "UserProfileRequest",
]
