"""Typed client for the GitHub GraphQL API.

Builds queries from composable fragments, classifies failed responses and
walks cursor-based pagination to assemble complete result sets.
"""

from .cli import main
from .errors import ConfigError, PageStateError, ParseError, ResponseError, ResponseErrorType
from .fetcher import APIFetcher
from .graphql import Field, Fragment, GraphQLRequest, PagedRequest, PageInfo, page_info_fragment

__all__ = [
    "main",
    "APIFetcher",
    "ConfigError",
    "Field",
    "Fragment",
    "GraphQLRequest",
    "PageInfo",
    "PageStateError",
    "PagedRequest",
    "ParseError",
    "ResponseError",
    "ResponseErrorType",
    "page_info_fragment",
]

if __name__ == "__main__":
    main()
