"""GraphQL client that sends requests to GitHub and walks paged result sets."""

import hashlib
import json
import logging
from datetime import timedelta
from pathlib import Path
from typing import TypeVar

import httpx
from cachetta import Cachetta

from .errors import ConfigError, ParseError, ResponseError, ResponseErrorType, classify_error
from .graphql import GraphQLRequest, PagedRequest
from .settings import get_settings

T = TypeVar("T")

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
DEFAULT_CACHE_DURATION = timedelta(days=1)


def _cache_path_for(cache_dir: Path, endpoint: str, token: str):
    """Build a Cachetta path function keyed on endpoint, token, query and variables.

    Only a hash of the token enters the key.
    """
    token_hash = hashlib.sha256(token.encode()).hexdigest()[:16]

    def _path(query, variables=None):
        params = {
            "endpoint": endpoint,
            "token": token_hash,
            "query": query,
            "variables": variables or {},
        }
        raw = f"graphql|{json.dumps(params, sort_keys=True)}"
        key = hashlib.sha256(raw.encode()).hexdigest()[:16]
        return Path(cache_dir) / f"{key}.json"

    return _path


def _json_body(resp: httpx.Response):
    try:
        return resp.json()
    except ValueError:
        return None


def _error_message(body) -> str | None:
    """Extract the top-level message of an error response, if any."""
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return None


def _graphql_error_message(errors) -> str:
    if not isinstance(errors, list):
        errors = [errors]
    messages = [e.get("message", str(e)) if isinstance(e, dict) else str(e) for e in errors]
    return f"GraphQL errors: {'; '.join(messages)}"


class APIFetcher:
    """Sends GraphQL requests to the GitHub endpoint.

    The access token is taken from ``access_token`` if given, otherwise from
    settings (``GITHUB_FETCHER_API_ACCESS_TOKEN``). Failed requests are
    classified into ResponseErrors; NOT_FOUND is returned as None.

    When a cache directory is configured, successful response bodies are
    cached on disk. ``skip_cache`` skips reading the cache (still writes).
    """

    def __init__(
        self,
        access_token: str | None = None,
        endpoint: str | None = None,
        cache_dir: Path | None = None,
        skip_cache: bool = False,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        settings = get_settings()
        token = access_token or settings.api_access_token
        if not token:
            raise ConfigError("GITHUB_FETCHER_API_ACCESS_TOKEN is not set")

        self.endpoint = endpoint or settings.api_endpoint
        self._client = httpx.Client(
            headers={
                "Authorization": f"Bearer {token}",
                "Content-Type": "application/json",
            },
            timeout=timeout,
        )

        # Pure request function: failures raise classified errors and are never cached
        def _do_post(query, variables=None):
            payload = {"query": query, "variables": variables or {}}
            try:
                resp = self._client.post(self.endpoint, json=payload)
            except httpx.TransportError as exc:
                raise classify_error(None, f"{type(exc).__name__}: {exc}") from exc

            body = _json_body(resp)
            if not 200 <= resp.status_code < 300:
                raise classify_error(resp.status_code, _error_message(body))

            errors = body.get("errors") if isinstance(body, dict) else None
            if errors:
                raise classify_error(resp.status_code, _graphql_error_message(errors), errors)

            if not isinstance(body, dict) or body.get("data") is None:
                raise ParseError(body if body is not None else resp.text, "Response has no data")
            return body

        cache_dir = cache_dir or settings.cache_dir
        self.cache_dir = Path(cache_dir) if cache_dir else None
        if self.cache_dir is not None:
            cache = Cachetta(
                path=_cache_path_for(self.cache_dir, self.endpoint, token),
                duration=DEFAULT_CACHE_DURATION,
            )
            if skip_cache:
                cache = cache.copy(read=False)
            self._post = cache(_do_post)
        else:
            self._post = _do_post

    def send(self, request: GraphQLRequest[T]) -> T | None:
        """Send a single request and parse its response.

        Returns None if the requested resource was not found.
        """
        logger.debug("Sending %s %s", request.operation_name, request.variables)
        try:
            body = self._post(request.query, request.variables)
            data = body["data"]
            try:
                return request.parse_response(data)
            except (AttributeError, KeyError, TypeError, ValueError) as exc:
                raise ParseError(data) from exc
        except ResponseError as e:
            if e.kind is ResponseErrorType.NOT_FOUND:
                logger.debug("%s: %s", request.operation_name, e.message)
                return None
            logger.warning("%s failed with %s: %s", request.operation_name, e.kind.name, e.message)
            raise

    def page_fetch(self, paged_request: PagedRequest[T]) -> list[T] | None:
        """Fetch every page of a paged request.

        Returns None if the requested resource was not found.
        """
        results = self.send(paged_request)
        if results is None:
            return None

        results = list(results)
        while paged_request.has_next_page():
            sent_cursor = paged_request.page_info.cursor
            next_results = self.send(paged_request)
            if next_results is None:
                logger.warning(
                    "%s: page not found after %d results, returning partial results",
                    paged_request.operation_name,
                    len(results),
                )
                break
            results.extend(next_results)
            # A page without pageInfo, or with a repeated cursor, would be requested again
            if paged_request.has_next_page() and paged_request.page_info.cursor == sent_cursor:
                logger.warning(
                    "%s: cursor did not advance after %d results, stopping",
                    paged_request.operation_name,
                    len(results),
                )
                break

        return results

    def fetch(self, request: GraphQLRequest[T]):
        """Fetch the result of a request, following all pages of a paged request.

        Returns None if the requested resource was not found.
        """
        if isinstance(request, PagedRequest):
            return self.page_fetch(request)
        return self.send(request)

    def close(self):
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
