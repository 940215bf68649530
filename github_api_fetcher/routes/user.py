"""Route for GitHub users: profile, memberships, ownerships and contributions.

All methods return None if the user with the given username was not found.

Contributions might include private repositories depending on the user's
GitHub settings and the access token's scopes. Those are only counted.
"""

import logging
from typing import Callable

from ..graphql import GraphQLRequest
from ..models import (
    GistProfileMinified,
    Month,
    OrganizationProfileMinified,
    RepositoryProfileMinified,
    UserProfile,
    YearlyContributions,
    YearlyPullRequestContributions,
)
from ..queries import (
    CommitContributionsRequest,
    ContributionYearsRequest,
    IssueContributionsRequest,
    OrganizationMembershipsRequest,
    PublicGistsRequest,
    PullRequestContributionsRequest,
    PullRequestReviewContributionsRequest,
    RepositoryOwnershipsRequest,
    UserProfileRequest,
)
from .base import RouteFetcher

logger = logging.getLogger(__name__)

# (username, year, month) -> request for that month
MonthlyRequestFactory = Callable[[str, int, Month], GraphQLRequest]


class UserRoute(RouteFetcher):
    def get_profile(self, username: str) -> UserProfile | None:
        """Returns the user's profile with memberships, repositories and gists."""
        profile = self.fetcher.fetch(UserProfileRequest(username))
        if profile is None:
            return None

        organization_memberships = self.get_organization_memberships(username)
        if organization_memberships is not None:
            profile.organization_memberships = organization_memberships

        public_repository_ownerships = self.get_public_repository_ownerships(username)
        if public_repository_ownerships is not None:
            profile.public_repository_ownerships = public_repository_ownerships

        public_gists = self.get_public_gists(username)
        if public_gists is not None:
            profile.public_gists = public_gists

        return profile

    def get_organization_memberships(self, username: str) -> list[OrganizationProfileMinified] | None:
        return self.fetcher.page_fetch(OrganizationMembershipsRequest(username))

    def get_public_repository_ownerships(self, username: str) -> list[RepositoryProfileMinified] | None:
        return self.fetcher.page_fetch(RepositoryOwnershipsRequest(username))

    def get_public_gists(self, username: str) -> list[GistProfileMinified] | None:
        return self.fetcher.page_fetch(PublicGistsRequest(username))

    def get_contribution_years(self, username: str) -> list[int] | None:
        """Returns every year the user has contributed in, e.g. [2019, 2018, 2016]."""
        return self.fetcher.fetch(ContributionYearsRequest(username))

    def get_commit_contributions_by_year(self, username: str, year: int) -> YearlyContributions | None:
        months = self._fetch_months(username, year, CommitContributionsRequest)
        return None if months is None else YearlyContributions(year=year, months=months)

    def get_all_commit_contributions(self, username: str) -> list[YearlyContributions] | None:
        return self._fetch_all_years(username, self.get_commit_contributions_by_year)

    def get_issue_contributions_by_year(self, username: str, year: int) -> YearlyContributions | None:
        months = self._fetch_months(username, year, IssueContributionsRequest)
        return None if months is None else YearlyContributions(year=year, months=months)

    def get_all_issue_contributions(self, username: str) -> list[YearlyContributions] | None:
        return self._fetch_all_years(username, self.get_issue_contributions_by_year)

    def get_pull_request_review_contributions_by_year(
        self, username: str, year: int
    ) -> YearlyContributions | None:
        months = self._fetch_months(username, year, PullRequestReviewContributionsRequest)
        return None if months is None else YearlyContributions(year=year, months=months)

    def get_all_pull_request_review_contributions(self, username: str) -> list[YearlyContributions] | None:
        return self._fetch_all_years(username, self.get_pull_request_review_contributions_by_year)

    def get_pull_request_contributions_by_year(
        self, username: str, year: int
    ) -> YearlyPullRequestContributions | None:
        months = self._fetch_months(username, year, PullRequestContributionsRequest)
        return None if months is None else YearlyPullRequestContributions(year=year, months=months)

    def get_all_pull_request_contributions(self, username: str) -> list[YearlyPullRequestContributions] | None:
        return self._fetch_all_years(username, self.get_pull_request_contributions_by_year)

    def _fetch_months(self, username: str, year: int, request_factory: MonthlyRequestFactory) -> list | None:
        """Fetch one request per month of the year, January first.

        Requests are sent strictly one after another. Sending them
        concurrently trips GitHub's abuse detection mechanism.
        """
        months = []
        for month in Month:
            monthly = self.fetcher.fetch(request_factory(username, year, month))
            if monthly is None:
                return None
            months.append(monthly)
        return months

    def _fetch_all_years(self, username: str, fetch_year: Callable[[str, int], object]) -> list | None:
        years = self.get_contribution_years(username)
        if years is None:
            return None

        results = []
        for year in years:
            yearly = fetch_year(username, year)
            if yearly is None:
                logger.debug("No contributions for %s in %d", username, year)
                continue
            results.append(yearly)
        return results
