"""CLI commands for fetching GitHub profiles and contributions."""

import argparse
import json
import logging
import sys
from pathlib import Path

CONTRIBUTION_KINDS = ("commits", "issues", "pull-requests", "pull-request-reviews")

EXIT_NOT_FOUND = 1
EXIT_REQUEST_ERROR = 2


def _log(msg: str):
    sys.stderr.write(f"[github-api-fetcher] {msg}\n")
    sys.stderr.flush()


def _parse_var(value: str):
    """Parse a ``--var`` value as JSON, falling back to a plain string."""
    try:
        return json.loads(value)
    except ValueError:
        return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Fetch profiles and contributions from the GitHub GraphQL API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--token",
        default=None,
        help="API access token (default: GITHUB_FETCHER_API_ACCESS_TOKEN)",
    )
    parser.add_argument(
        "--cache-dir",
        type=Path,
        default=None,
        help="Cache successful responses in this directory (default: GITHUB_FETCHER_CACHE_DIR)",
    )
    parser.add_argument(
        "--skip-cache",
        action="store_true",
        help="Skip reading from cache (still writes to cache)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    user_parser = subparsers.add_parser(
        "user",
        help="Fetch a user's profile, memberships, repositories and gists",
    )
    user_parser.add_argument("username", help="GitHub username")

    contributions_parser = subparsers.add_parser(
        "user-contributions",
        help="Fetch a user's monthly contributions",
    )
    contributions_parser.add_argument("username", help="GitHub username")
    contributions_parser.add_argument(
        "kind",
        choices=CONTRIBUTION_KINDS,
        help="Type of contribution",
    )
    contributions_parser.add_argument(
        "--year",
        type=int,
        default=None,
        help="Only fetch this calendar year (default: every contribution year)",
    )

    organization_parser = subparsers.add_parser(
        "organization",
        help="Fetch an organization's profile",
    )
    organization_parser.add_argument("name", help="Organization login")

    repository_parser = subparsers.add_parser(
        "repository",
        help="Fetch a repository's profile",
    )
    repository_parser.add_argument("owner", help="Username of the repository owner")
    repository_parser.add_argument("name", help="Repository name")

    gist_parser = subparsers.add_parser(
        "gist",
        help="Fetch a gist's profile",
    )
    gist_parser.add_argument("owner", help="Username of the gist owner")
    gist_parser.add_argument("gist_id", help="Gist id, as used in its URL")

    query_parser = subparsers.add_parser(
        "query",
        help="Send a raw GraphQL query and print the response data",
    )
    query_parser.add_argument("query", help="GraphQL query string")
    query_parser.add_argument(
        "--var",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Query variable, VALUE parsed as JSON if possible (repeatable)",
    )

    return parser


def _fetch_contributions(user_route, username: str, kind: str, year: int | None):
    by_year = {
        "commits": user_route.get_commit_contributions_by_year,
        "issues": user_route.get_issue_contributions_by_year,
        "pull-requests": user_route.get_pull_request_contributions_by_year,
        "pull-request-reviews": user_route.get_pull_request_review_contributions_by_year,
    }
    all_years = {
        "commits": user_route.get_all_commit_contributions,
        "issues": user_route.get_all_issue_contributions,
        "pull-requests": user_route.get_all_pull_request_contributions,
        "pull-request-reviews": user_route.get_all_pull_request_review_contributions,
    }
    if year is not None:
        return by_year[kind](username, year)
    return all_years[kind](username)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    from .errors import ConfigError, ResponseError
    from .fetcher import APIFetcher
    from .models import to_json_ready
    from .settings import get_settings

    logging.basicConfig(
        level=get_settings().log_level.upper(),
        stream=sys.stderr,
        format="[%(name)s] %(levelname)s %(message)s",
    )

    try:
        fetcher = APIFetcher(args.token, cache_dir=args.cache_dir, skip_cache=args.skip_cache)
    except ConfigError as e:
        _log(f"Configuration error: {e}")
        return EXIT_REQUEST_ERROR

    try:
        if args.command == "user":
            from .routes import UserRoute

            result = UserRoute(fetcher).get_profile(args.username)
        elif args.command == "user-contributions":
            from .routes import UserRoute

            result = _fetch_contributions(UserRoute(fetcher), args.username, args.kind, args.year)
        elif args.command == "organization":
            from .routes import OrganizationRoute

            result = OrganizationRoute(fetcher).get_profile(args.name)
        elif args.command == "repository":
            from .routes import RepositoryRoute

            result = RepositoryRoute(fetcher).get_profile(args.owner, args.name)
        elif args.command == "gist":
            from .routes import GistRoute

            result = GistRoute(fetcher).get_profile(args.owner, args.gist_id)
        else:
            from .queries.raw import RawQueryRequest

            variables = {}
            for v in args.var:
                k, _, value = v.partition("=")
                variables[k] = _parse_var(value)
            result = fetcher.fetch(RawQueryRequest(args.query, variables))
    except ResponseError as e:
        _log(f"{e.kind.name}: {e.message}")
        return EXIT_REQUEST_ERROR
    finally:
        fetcher.close()

    if result is None:
        _log("Not found")
        return EXIT_NOT_FOUND

    json.dump(to_json_ready(result), sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
