"""Data models returned by the fetcher."""

from dataclasses import asdict, dataclass, field, is_dataclass
from datetime import datetime
from enum import IntEnum


class Month(IntEnum):
    """Calendar month, numbered like the ``datetime`` module (January is 1)."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


@dataclass
class OrganizationProfileMinified:
    """Reference to an organization, see OrganizationProfile for details."""

    github_id: str
    name: str  # Equivalent to the username of a user
    public_url: str | None = None


@dataclass
class OrganizationProfile(OrganizationProfileMinified):
    display_name: str | None = None
    description: str | None = None
    avatar_url: str | None = None
    members_count: int = 0


@dataclass
class ProgrammingLanguage:
    name: str
    color: str | None = None


@dataclass
class AppliedProgrammingLanguage(ProgrammingLanguage):
    bytes_count: int = 0


@dataclass
class RepositoryProfileMinified:
    github_id: str
    name: str
    owner_name: str
    public_url: str | None = None
    is_private: bool = False


@dataclass
class RepositoryProfile(RepositoryProfileMinified):
    description: str | None = None
    primary_programming_language: ProgrammingLanguage | None = None
    # Ordered by size, largest first
    applied_programming_languages: list[AppliedProgrammingLanguage] = field(default_factory=list)
    is_fork: bool = False
    creation_date_time: datetime | None = None
    last_push_date_time: datetime | None = None
    topics: list[str] = field(default_factory=list)
    stars_count: int = 0
    watchers_count: int = 0
    fork_count: int = 0


@dataclass
class GistProfileMinified:
    github_id: str
    name: str  # The gist's id, as used in its URL
    owner_username: str
    public_url: str | None = None


@dataclass
class GistProfile(GistProfileMinified):
    description: str | None = None
    is_fork: bool = False
    creation_date_time: datetime | None = None
    last_push_date_time: datetime | None = None
    forks_count: int = 0
    stars_count: int = 0
    # Only files with a detected programming language
    files: list[AppliedProgrammingLanguage] = field(default_factory=list)
    comments_count: int = 0


@dataclass
class UserProfile:
    """Public profile of a GitHub user.

    Memberships, repository ownerships and gists are filled in by the user
    route with data from separate paged requests.
    """

    github_id: str
    username: str
    display_name: str | None = None
    company: str | None = None
    public_url: str | None = None
    creation_date_time: datetime | None = None
    avatar_url: str | None = None
    for_hire: bool = False
    followers_count: int = 0
    organization_memberships: list[OrganizationProfileMinified] = field(default_factory=list)
    public_repository_ownerships: list[RepositoryProfileMinified] = field(default_factory=list)
    public_gists: list[GistProfileMinified] = field(default_factory=list)


@dataclass
class ContributionsByRepository:
    repository: RepositoryProfileMinified
    count: int


@dataclass
class MonthlyContributions:
    month: str
    # Contributions in private repositories are only counted
    private_contributions_count: int = 0
    public_contributions: list[ContributionsByRepository] = field(default_factory=list)


@dataclass
class YearlyContributions:
    year: int
    months: list[MonthlyContributions] = field(default_factory=list)


@dataclass
class PullRequest:
    title: str
    creation_date_time: datetime | None = None
    is_merged: bool = False
    is_closed: bool = False
    additions_count: int = 0
    deletions_count: int = 0
    public_url: str | None = None


@dataclass
class PullRequestContributionsByRepository:
    repository: RepositoryProfileMinified
    pull_request_contributions: list[PullRequest] = field(default_factory=list)


@dataclass
class MonthlyPullRequestContributions:
    month: str
    private_pull_request_contributions_count: int = 0
    public_pull_request_contributions: list[PullRequestContributionsByRepository] = field(
        default_factory=list
    )


@dataclass
class YearlyPullRequestContributions:
    year: int
    months: list[MonthlyPullRequestContributions] = field(default_factory=list)


def _json_ready(value):
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _json_ready(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_json_ready(v) for v in value]
    return value


def to_json_ready(value):
    """Convert models (or lists of models) to JSON-serializable structures."""
    if is_dataclass(value) and not isinstance(value, type):
        return _json_ready(asdict(value))
    if isinstance(value, list):
        return [to_json_ready(v) for v in value]
    return _json_ready(value)
