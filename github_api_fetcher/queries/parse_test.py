"""Unit tests for mapping raw response objects to models."""

from datetime import datetime, timezone

import pytest

from ..errors import ParseError
from ..models import AppliedProgrammingLanguage, ContributionsByRepository, ProgrammingLanguage, RepositoryProfileMinified
from .parse import (
    parse_contributions_by_repository,
    parse_datetime,
    parse_gist_profile,
    parse_min_repository,
    parse_organization_profile,
    parse_repository_profile,
    parse_user_profile,
    partition_contributions,
    partition_pull_request_contributions,
)


def _raw_repository(name="demo", is_private=False):
    return {
        "gitHubId": f"R_{name}",
        "name": name,
        "ownerName": {"name": "octocat"},
        "publicUrl": f"https://github.com/octocat/{name}",
        "isPrivate": is_private,
    }


def _repository(name="demo", is_private=False):
    return RepositoryProfileMinified(
        github_id=f"R_{name}",
        name=name,
        owner_name="octocat",
        public_url=f"https://github.com/octocat/{name}",
        is_private=is_private,
    )


def describe_parse_datetime():

    def it_parses_utc_timestamps():
        assert parse_datetime("2019-03-01T12:30:00Z") == datetime(2019, 3, 1, 12, 30, tzinfo=timezone.utc)

    def it_passes_none_through():
        assert parse_datetime(None) is None

    def it_raises_parse_error_for_invalid_values():
        with pytest.raises(ParseError):
            parse_datetime("yesterday")


def describe_parse_min_repository():

    def it_reads_aliased_fields():
        assert parse_min_repository(_raw_repository()) == _repository()

    def it_requires_owner():
        raw = _raw_repository()
        del raw["ownerName"]
        with pytest.raises(ParseError):
            parse_min_repository(raw)

    def it_rejects_non_objects():
        with pytest.raises(ParseError):
            parse_min_repository("demo")


def describe_parse_repository_profile():

    def it_reads_languages_topics_and_counts():
        raw = {
            **_raw_repository(),
            "description": "A demo",
            "primaryProgrammingLanguage": {"name": "Haskell", "color": "#5e5086"},
            "appliedProgrammingLanguages": {
                "edges": [
                    {"bytesCount": 73926, "node": {"name": "Haskell", "color": "#5e5086"}},
                    {"bytesCount": 120, "node": {"name": "Shell", "color": None}},
                ]
            },
            "isFork": False,
            "creationDateTime": "2018-01-02T03:04:05Z",
            "lastPushDateTime": None,
            "topics": {"nodes": [{"topic": {"name": "android"}}, {"topic": {"name": "cli"}}]},
            "starsCount": {"count": 12},
            "watchersCount": {"count": 3},
            "forkCount": 4,
        }

        profile = parse_repository_profile(raw)

        assert profile.primary_programming_language == ProgrammingLanguage("Haskell", "#5e5086")
        assert profile.applied_programming_languages == [
            AppliedProgrammingLanguage("Haskell", "#5e5086", 73926),
            AppliedProgrammingLanguage("Shell", None, 120),
        ]
        assert profile.topics == ["android", "cli"]
        assert (profile.stars_count, profile.watchers_count, profile.fork_count) == (12, 3, 4)
        assert profile.creation_date_time.year == 2018
        assert profile.last_push_date_time is None

    def it_defaults_missing_collections():
        profile = parse_repository_profile(_raw_repository())

        assert profile.applied_programming_languages == []
        assert profile.topics == []
        assert profile.primary_programming_language is None
        assert profile.stars_count == 0


def describe_parse_gist_profile():

    def it_keeps_only_files_with_a_language():
        raw = {
            "gitHubId": "G_1",
            "name": "abc123",
            "ownerUsername": {"username": "octocat"},
            "files": [
                {"language": {"name": "Python"}, "bytesCount": 300},
                {"language": None, "bytesCount": 5000},
            ],
            "starsCount": {"count": 2},
        }

        profile = parse_gist_profile(raw)

        assert profile.owner_username == "octocat"
        assert profile.files == [AppliedProgrammingLanguage("Python", None, 300)]
        assert profile.stars_count == 2
        assert profile.comments_count == 0


def describe_parse_user_profile():

    def it_reads_aliased_fields():
        raw = {
            "gitHubId": "U_1",
            "username": "octocat",
            "displayName": "The Octocat",
            "forHire": True,
            "followersCount": {"count": 42},
        }

        profile = parse_user_profile(raw)

        assert profile.username == "octocat"
        assert profile.display_name == "The Octocat"
        assert profile.for_hire is True
        assert profile.followers_count == 42
        assert profile.organization_memberships == []


def describe_parse_organization_profile():

    def it_reads_members_count():
        profile = parse_organization_profile({"gitHubId": "O_1", "name": "github", "membersCount": {"count": 7}})
        assert profile.members_count == 7


def describe_parse_contributions_by_repository():

    def it_reads_total_count():
        raw = {"repository": _raw_repository(), "contributions": {"totalCount": 3}}
        assert parse_contributions_by_repository(raw) == ContributionsByRepository(_repository(), 3)


def describe_partition_contributions():

    def it_counts_private_and_lists_public():
        contributions = [
            ContributionsByRepository(_repository("a"), 3),
            ContributionsByRepository(_repository("secret", is_private=True), 5),
            ContributionsByRepository(_repository("b"), 1),
            ContributionsByRepository(_repository("hidden", is_private=True), 2),
        ]

        monthly = partition_contributions("MARCH", contributions)

        assert monthly.month == "MARCH"
        assert monthly.private_contributions_count == 7
        assert [c.repository.name for c in monthly.public_contributions] == ["a", "b"]

    def it_handles_empty_month():
        monthly = partition_contributions("JUNE", [])
        assert monthly.private_contributions_count == 0
        assert monthly.public_contributions == []


def describe_partition_pull_request_contributions():

    def it_counts_private_pull_requests_by_node():
        raw = [
            {
                "repository": _raw_repository("public"),
                "contributions": {
                    "nodes": [
                        {"pullRequest": {"title": "Fix", "isMerged": True, "additionsCount": 5}},
                        {"pullRequest": {"title": "Feature", "creationDateTime": "2020-05-01T00:00:00Z"}},
                    ]
                },
            },
            {
                "repository": _raw_repository("private", is_private=True),
                "contributions": {"nodes": [{"pullRequest": {"title": "x"}}] * 3},
            },
        ]

        monthly = partition_pull_request_contributions("MAY", raw)

        assert monthly.private_pull_request_contributions_count == 3
        [public] = monthly.public_pull_request_contributions
        assert public.repository.name == "public"
        assert [pr.title for pr in public.pull_request_contributions] == ["Fix", "Feature"]
        assert public.pull_request_contributions[0].is_merged is True
        assert public.pull_request_contributions[0].additions_count == 5
