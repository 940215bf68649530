"""Mapping functions from raw response objects to models.

The raw objects use the aliases declared in the requests' fragments.
"""

from datetime import datetime

from ..errors import ParseError
from ..models import (
    AppliedProgrammingLanguage,
    ContributionsByRepository,
    GistProfile,
    GistProfileMinified,
    MonthlyContributions,
    MonthlyPullRequestContributions,
    OrganizationProfile,
    OrganizationProfileMinified,
    ProgrammingLanguage,
    PullRequest,
    PullRequestContributionsByRepository,
    RepositoryProfile,
    RepositoryProfileMinified,
    UserProfile,
)


def _object(raw, what: str = "object") -> dict:
    if not isinstance(raw, dict):
        raise ParseError(raw, f"Expected {what} in response data")
    return raw


def _required(raw: dict, key: str):
    value = raw.get(key)
    if value is None:
        raise ParseError(raw, f"Missing '{key}' in response data")
    return value


def _list(raw: dict, key: str) -> list:
    value = raw.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ParseError(raw, f"Expected a list at '{key}' in response data")
    return [v for v in value if v is not None]


def _count(raw: dict, key: str, inner: str = "count") -> int:
    """Read a connection's total count, e.g. ``followersCount: {count: 3}``."""
    value = raw.get(key)
    if not isinstance(value, dict):
        return 0
    return value.get(inner) or 0


def parse_datetime(value: str | None) -> datetime | None:
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (AttributeError, ValueError) as exc:
        raise ParseError(value, f"Invalid date-time: {value!r}") from exc


def parse_min_organization(raw) -> OrganizationProfileMinified:
    raw = _object(raw, "organization")
    return OrganizationProfileMinified(
        github_id=_required(raw, "gitHubId"),
        name=_required(raw, "name"),
        public_url=raw.get("publicUrl"),
    )


def parse_organization_profile(raw) -> OrganizationProfile:
    raw = _object(raw, "organization")
    return OrganizationProfile(
        github_id=_required(raw, "gitHubId"),
        name=_required(raw, "name"),
        public_url=raw.get("publicUrl"),
        display_name=raw.get("displayName"),
        description=raw.get("description"),
        avatar_url=raw.get("avatarUrl"),
        members_count=_count(raw, "membersCount"),
    )


def parse_language(raw) -> ProgrammingLanguage | None:
    if raw is None:
        return None
    raw = _object(raw, "language")
    return ProgrammingLanguage(name=_required(raw, "name"), color=raw.get("color"))


def parse_min_repository(raw) -> RepositoryProfileMinified:
    raw = _object(raw, "repository")
    owner = _object(_required(raw, "ownerName"), "repository owner")
    return RepositoryProfileMinified(
        github_id=_required(raw, "gitHubId"),
        name=_required(raw, "name"),
        owner_name=_required(owner, "name"),
        public_url=raw.get("publicUrl"),
        is_private=bool(raw.get("isPrivate", False)),
    )


def parse_repository_profile(raw) -> RepositoryProfile:
    minified = parse_min_repository(raw)

    # "appliedProgrammingLanguages": {"edges": [{"bytesCount": 73926, "node": {"name": "Haskell", "color": "#5e5086"}}]}
    languages = []
    for edge in _list(raw.get("appliedProgrammingLanguages") or {}, "edges"):
        node = _object(_required(edge, "node"), "language")
        languages.append(
            AppliedProgrammingLanguage(
                name=_required(node, "name"),
                color=node.get("color"),
                bytes_count=edge.get("bytesCount") or 0,
            )
        )

    # "topics": {"nodes": [{"topic": {"name": "android"}}]}
    topics = []
    for node in _list(raw.get("topics") or {}, "nodes"):
        topic = _object(_required(node, "topic"), "topic")
        topics.append(_required(topic, "name"))

    return RepositoryProfile(
        github_id=minified.github_id,
        name=minified.name,
        owner_name=minified.owner_name,
        public_url=minified.public_url,
        is_private=minified.is_private,
        description=raw.get("description"),
        primary_programming_language=parse_language(raw.get("primaryProgrammingLanguage")),
        applied_programming_languages=languages,
        is_fork=bool(raw.get("isFork", False)),
        creation_date_time=parse_datetime(raw.get("creationDateTime")),
        last_push_date_time=parse_datetime(raw.get("lastPushDateTime")),
        topics=topics,
        stars_count=_count(raw, "starsCount"),
        watchers_count=_count(raw, "watchersCount"),
        fork_count=raw.get("forkCount") or 0,
    )


def parse_min_gist(raw) -> GistProfileMinified:
    raw = _object(raw, "gist")
    owner = _object(_required(raw, "ownerUsername"), "gist owner")
    return GistProfileMinified(
        github_id=_required(raw, "gitHubId"),
        name=_required(raw, "name"),
        owner_username=_required(owner, "username"),
        public_url=raw.get("publicUrl"),
    )


def parse_gist_profile(raw) -> GistProfile:
    minified = parse_min_gist(raw)

    # Only collect files with a programming language (skips images and other assets)
    files = []
    for file in _list(raw, "files"):
        language_name = (file.get("language") or {}).get("name")
        if not language_name:
            continue
        files.append(
            AppliedProgrammingLanguage(
                name=language_name,
                color=None,
                bytes_count=file.get("bytesCount") or 0,
            )
        )

    return GistProfile(
        github_id=minified.github_id,
        name=minified.name,
        owner_username=minified.owner_username,
        public_url=minified.public_url,
        description=raw.get("description"),
        is_fork=bool(raw.get("isFork", False)),
        creation_date_time=parse_datetime(raw.get("creationDateTime")),
        last_push_date_time=parse_datetime(raw.get("lastPushDateTime")),
        forks_count=_count(raw, "forksCount"),
        stars_count=_count(raw, "starsCount"),
        files=files,
        comments_count=_count(raw, "commentsCount"),
    )


def parse_user_profile(raw) -> UserProfile:
    raw = _object(raw, "user")
    return UserProfile(
        github_id=_required(raw, "gitHubId"),
        username=_required(raw, "username"),
        display_name=raw.get("displayName"),
        company=raw.get("company"),
        public_url=raw.get("publicUrl"),
        creation_date_time=parse_datetime(raw.get("creationDateTime")),
        avatar_url=raw.get("avatarUrl"),
        for_hire=bool(raw.get("forHire", False)),
        followers_count=_count(raw, "followersCount"),
    )


def parse_pull_request(raw) -> PullRequest:
    raw = _object(raw, "pull request")
    return PullRequest(
        title=_required(raw, "title"),
        creation_date_time=parse_datetime(raw.get("creationDateTime")),
        is_merged=bool(raw.get("isMerged", False)),
        is_closed=bool(raw.get("isClosed", False)),
        additions_count=raw.get("additionsCount") or 0,
        deletions_count=raw.get("deletionsCount") or 0,
        public_url=raw.get("publicUrl"),
    )


def parse_contributions_by_repository(raw) -> ContributionsByRepository:
    """Parse ``{"repository": {...}, "contributions": {"totalCount": 3}}``."""
    raw = _object(raw, "contributions")
    return ContributionsByRepository(
        repository=parse_min_repository(_required(raw, "repository")),
        count=_count(raw, "contributions", "totalCount"),
    )


def partition_contributions(
    month: str, contributions: list[ContributionsByRepository]
) -> MonthlyContributions:
    """Split contributions into public ones and a count of private ones."""
    public_contributions = [c for c in contributions if not c.repository.is_private]
    private_count = sum(c.count for c in contributions if c.repository.is_private)
    return MonthlyContributions(
        month=month,
        private_contributions_count=private_count,
        public_contributions=public_contributions,
    )


def partition_pull_request_contributions(
    month: str, raw_contributions: list
) -> MonthlyPullRequestContributions:
    """Parse and split pull request contributions by repository.

    Each raw element looks like
    ``{"repository": {...}, "contributions": {"nodes": [{"pullRequest": {...}}]}}``.
    Pull requests in private repositories are only counted.
    """
    public_contributions = []
    private_count = 0
    for raw in raw_contributions:
        raw = _object(raw, "pull request contributions")
        repository = parse_min_repository(_required(raw, "repository"))
        nodes = _list(raw.get("contributions") or {}, "nodes")
        if repository.is_private:
            private_count += len(nodes)
            continue
        public_contributions.append(
            PullRequestContributionsByRepository(
                repository=repository,
                pull_request_contributions=[
                    parse_pull_request(_required(node, "pullRequest")) for node in nodes
                ],
            )
        )

    return MonthlyPullRequestContributions(
        month=month,
        private_pull_request_contributions_count=private_count,
        public_pull_request_contributions=public_contributions,
    )
