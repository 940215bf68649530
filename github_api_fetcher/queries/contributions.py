"""Requests for a user's monthly contributions, grouped by repository.

Contributions may include private repositories, depending on the user's
GitHub settings and the scopes of the access token. Those are only counted,
never listed.
"""

import calendar
from datetime import datetime, timezone

from ..errors import ParseError, not_found
from ..graphql import GraphQLRequest, dig
from ..models import MonthlyContributions, MonthlyPullRequestContributions, Month
from . import fragments
from .parse import (
    parse_contributions_by_repository,
    partition_contributions,
    partition_pull_request_contributions,
)


def _iso_utc(value: datetime) -> str:
    return value.isoformat().replace("+00:00", "Z")


def month_range(year: int, month: int) -> tuple[str, str]:
    """First and last second of a month, as ISO-8601 UTC strings."""
    last_day = calendar.monthrange(year, month)[1]
    start = datetime(year, month, 1, tzinfo=timezone.utc)
    end = datetime(year, month, last_day, 23, 59, 59, tzinfo=timezone.utc)
    return _iso_utc(start), _iso_utc(end)


def _contributions_query(operation: str, collection_field: str, selection: str, extra_fragments: str = "") -> str:
    return f"""
        query {operation}($username: String!, $from: DateTime!, $to: DateTime!) {{
            user(login: $username) {{
                contributionsCollection(from: $from, to: $to) {{
                    {collection_field}(maxRepositories: 100) {{
                        repository {{
                            {fragments.min_repository.spread}
                        }}
                        {selection}
                    }}
                }}
            }}
        }}

        {fragments.min_repository}
        {extra_fragments}
    """


class _MonthlyContributionsRequest(GraphQLRequest):
    collection_field: str = ""

    def __init__(self, username: str, year: int, month: Month | int):
        self.year = year
        self.month = Month(month)
        start, end = month_range(year, self.month)
        super().__init__({"username": username, "from": start, "to": end})

    def _raw_contributions(self, data: dict) -> list:
        user = dig(data, ("user",))
        if user is None:
            raise not_found(f"User '{self.variables['username']}' not found")
        raw = dig(user, ("contributionsCollection", self.collection_field))
        if not isinstance(raw, list):
            raise ParseError(data)
        return [c for c in raw if c is not None]


class _ContributionsByRepositoryRequest(_MonthlyContributionsRequest):
    def parse_response(self, data: dict) -> MonthlyContributions:
        contributions = [
            parse_contributions_by_repository(raw) for raw in self._raw_contributions(data)
        ]
        return partition_contributions(self.month.name, contributions)


class CommitContributionsRequest(_ContributionsByRepositoryRequest):
    collection_field = "commitContributionsByRepository"
    query = _contributions_query(
        "GetUserCommitContributionsByRepository",
        collection_field,
        "contributions { totalCount }",
    )


class IssueContributionsRequest(_ContributionsByRepositoryRequest):
    collection_field = "issueContributionsByRepository"
    query = _contributions_query(
        "GetUserIssueContributionsByRepository",
        collection_field,
        "contributions { totalCount }",
    )


class PullRequestReviewContributionsRequest(_ContributionsByRepositoryRequest):
    collection_field = "pullRequestReviewContributionsByRepository"
    query = _contributions_query(
        "GetUserPullRequestReviewContributionsByRepository",
        collection_field,
        "contributions { totalCount }",
    )


class PullRequestContributionsRequest(_MonthlyContributionsRequest):
    collection_field = "pullRequestContributionsByRepository"
    query = _contributions_query(
        "GetUserPullRequestContributionsByRepository",
        collection_field,
        f"""contributions(first: 100) {{
                            nodes {{
                                pullRequest {{
                                    {fragments.pull_request.spread}
                                }}
                            }}
                        }}""",
        str(fragments.pull_request),
    )

    def parse_response(self, data: dict) -> MonthlyPullRequestContributions:
        return partition_pull_request_contributions(self.month.name, self._raw_contributions(data))
