"""Unit tests for the user route."""

from unittest.mock import MagicMock

import pytest

from ..models import (
    GistProfileMinified,
    Month,
    MonthlyContributions,
    MonthlyPullRequestContributions,
    OrganizationProfileMinified,
    RepositoryProfileMinified,
    UserProfile,
    YearlyContributions,
)
from ..queries import (
    CommitContributionsRequest,
    ContributionYearsRequest,
    OrganizationMembershipsRequest,
    PublicGistsRequest,
    PullRequestContributionsRequest,
    RepositoryOwnershipsRequest,
    UserProfileRequest,
)
from .user import UserRoute


@pytest.fixture
def fetcher():
    return MagicMock()


@pytest.fixture
def route(fetcher):
    return UserRoute(fetcher)


def describe_UserRoute():

    def describe_get_profile():

        @pytest.fixture
        def organization():
            return OrganizationProfileMinified("O_1", "github")

        @pytest.fixture
        def repository():
            return RepositoryProfileMinified("R_1", "hello-world", "octocat")

        @pytest.fixture
        def gist():
            return GistProfileMinified("G_1", "abc123", "octocat")

        def it_fills_paged_collections(route, fetcher, organization, repository, gist):
            fetcher.fetch.return_value = UserProfile("U_1", "octocat")
            fetcher.page_fetch.side_effect = [[organization], [repository], [gist]]

            profile = route.get_profile("octocat")

            assert profile.organization_memberships == [organization]
            assert profile.public_repository_ownerships == [repository]
            assert profile.public_gists == [gist]
            requests = [call.args[0] for call in fetcher.page_fetch.call_args_list]
            assert [type(r) for r in requests] == [
                OrganizationMembershipsRequest,
                RepositoryOwnershipsRequest,
                PublicGistsRequest,
            ]
            assert all(r.variables == {"username": "octocat"} for r in requests)

        def it_returns_none_for_unknown_user(route, fetcher):
            fetcher.fetch.return_value = None

            assert route.get_profile("ghost") is None
            assert isinstance(fetcher.fetch.call_args.args[0], UserProfileRequest)
            fetcher.page_fetch.assert_not_called()

        def it_keeps_empty_collection_when_not_found(route, fetcher, repository):
            fetcher.fetch.return_value = UserProfile("U_1", "octocat")
            fetcher.page_fetch.side_effect = [None, [repository], []]

            profile = route.get_profile("octocat")

            assert profile.organization_memberships == []
            assert profile.public_repository_ownerships == [repository]

    def describe_get_contribution_years():

        def it_fetches_years(route, fetcher):
            fetcher.fetch.return_value = [2020, 2019]

            assert route.get_contribution_years("octocat") == [2020, 2019]
            assert isinstance(fetcher.fetch.call_args.args[0], ContributionYearsRequest)

    def describe_get_commit_contributions_by_year():

        def it_fetches_months_serially_from_january(route, fetcher):
            fetcher.fetch.side_effect = lambda request: MonthlyContributions(request.month.name)

            yearly = route.get_commit_contributions_by_year("octocat", 2020)

            assert yearly.year == 2020
            assert [m.month for m in yearly.months] == [month.name for month in Month]
            requests = [call.args[0] for call in fetcher.fetch.call_args_list]
            assert all(isinstance(r, CommitContributionsRequest) for r in requests)
            assert [r.variables["from"] for r in requests][:2] == ["2020-01-01T00:00:00Z", "2020-02-01T00:00:00Z"]
            assert requests[-1].variables["to"] == "2020-12-31T23:59:59Z"

        def it_returns_none_if_a_month_is_not_found(route, fetcher):
            fetcher.fetch.side_effect = [MonthlyContributions("JANUARY"), None]

            assert route.get_commit_contributions_by_year("ghost", 2020) is None
            assert fetcher.fetch.call_count == 2

    def describe_get_pull_request_contributions_by_year():

        def it_uses_pull_request_requests(route, fetcher):
            fetcher.fetch.side_effect = lambda request: MonthlyPullRequestContributions(request.month.name)

            yearly = route.get_pull_request_contributions_by_year("octocat", 2021)

            assert len(yearly.months) == 12
            assert isinstance(fetcher.fetch.call_args.args[0], PullRequestContributionsRequest)

    def describe_get_all_commit_contributions():

        def it_fetches_every_contribution_year(route, fetcher):
            def fetch(request):
                if isinstance(request, ContributionYearsRequest):
                    return [2020, 2019]
                return MonthlyContributions(request.month.name)

            fetcher.fetch.side_effect = fetch

            yearly = route.get_all_commit_contributions("octocat")

            assert [y.year for y in yearly] == [2020, 2019]
            assert all(isinstance(y, YearlyContributions) for y in yearly)
            assert fetcher.fetch.call_count == 1 + 2 * 12

        def it_returns_none_for_unknown_user(route, fetcher):
            fetcher.fetch.return_value = None

            assert route.get_all_commit_contributions("ghost") is None
            assert fetcher.fetch.call_count == 1
