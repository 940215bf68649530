"""GraphQL query building blocks: fragments, requests and paged requests."""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .errors import PageStateError, ParseError, not_found

T = TypeVar("T")

_OPERATION_NAME = re.compile(r"\b(?:query|mutation)\s+(\w+)")


@dataclass(frozen=True)
class Field:
    """A field on a GraphQL object, used in fragments.

    Nested ``children`` make the field select a sub-object or collection.
    ``argument`` is only rendered for fields with children.
    See: https://graphql.org/learn/queries/#fields
    """

    wire_name: str
    alias: str | None = None
    children: tuple["Field", ...] | None = None
    argument: str | None = None

    def __post_init__(self):
        if self.children is not None and not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))


def _render_fields(fields: tuple[Field, ...], depth: int) -> str:
    indent = "  " * depth
    lines = []
    for field in fields:
        line = f"{indent}{field.alias}: {field.wire_name}" if field.alias else f"{indent}{field.wire_name}"
        if field.children is not None:
            if field.argument is not None:
                line += f"({field.argument})"
            line += " {\n" + _render_fields(field.children, depth + 1) + f"\n{indent}}}"
        lines.append(line)
    return "\n".join(lines)


@dataclass(frozen=True)
class Fragment:
    """A named GraphQL fragment declared on a remote object type.

    Interpolating a fragment into a string (``f"{fragment}"``) yields its
    declaration; ``fragment.spread`` yields the ``...name`` token.
    See: https://graphql.org/learn/queries/#fragments
    """

    name: str
    target_type_name: str
    fields: tuple[Field, ...]

    def __post_init__(self):
        if not isinstance(self.fields, tuple):
            object.__setattr__(self, "fields", tuple(self.fields))

    @property
    def spread(self) -> str:
        return f"...{self.name}"

    def render(self) -> str:
        return (
            f"fragment {self.name} on {self.target_type_name} {{\n"
            f"{_render_fields(self.fields, 1)}\n"
            f"}}"
        )

    def __str__(self) -> str:
        return self.render()


@dataclass
class PageInfo:
    """Page info of a result set returned from the endpoint."""

    has_next_page: bool = False
    cursor: str | None = None

    @classmethod
    def from_raw(cls, raw: dict) -> "PageInfo":
        if not isinstance(raw, dict):
            raise ParseError(raw, "Unable to parse page info")
        return cls(
            has_next_page=bool(raw.get("hasNextPage", False)),
            cursor=raw.get("cursor", raw.get("endCursor")),
        )


page_info_fragment = Fragment(
    "pageInfo",
    "PageInfo",
    [
        Field("hasNextPage"),
        Field("endCursor", "cursor"),
    ],
)


def dig(data: Any, path: tuple[str, ...]) -> Any:
    """Follow ``path`` through nested dicts.

    Returns None when a key is missing or a value on the way is null.
    Raises ParseError when a value on the way is not an object.
    """
    current = data
    for key in path:
        if current is None:
            return None
        if not isinstance(current, dict):
            raise ParseError(data, f"Expected an object at '{key}' in response data")
        current = current.get(key)
    return current


class GraphQLRequest(ABC, Generic[T]):
    """A GraphQL request to be sent to the endpoint.

    Responsible for defining the request, and parsing the response data.
    """

    query: str = ""

    def __init__(self, variables: dict | None = None):
        self.variables: dict[str, Any] = dict(variables or {})

    @property
    def operation_name(self) -> str:
        match = _OPERATION_NAME.search(self.query)
        return match.group(1) if match else type(self).__name__

    @abstractmethod
    def parse_response(self, data: dict) -> T:
        """Parse the ``data`` object of a response into the result.

        Raises a NOT_FOUND ResponseError when the queried entity is absent,
        and ParseError on any other unexpected shape.
        """


class PagedRequest(GraphQLRequest[list[T]]):
    """A paged, stateful GraphQL request.

    ``connection_path`` locates the connection object (the one holding
    ``nodes`` and ``pageInfo``) inside the response data. The query must
    declare a ``$cursor: String`` variable and select ``pageInfo`` with
    ``page_info_fragment``.

    An instance tracks the pages of one logical query. Reusing it for a
    different query, or sharing it between concurrent callers, is not
    supported.
    """

    connection_path: tuple[str, ...] = ()

    def __init__(self, variables: dict | None = None):
        super().__init__(variables)
        self.page_info: PageInfo | None = None

    def has_next_page(self) -> bool:
        """Returns True if the last received page reported a next page."""
        if self.page_info is None:
            return False
        return self.page_info.has_next_page and self.page_info.cursor is not None

    def _prepare_next_page(self) -> None:
        if self.page_info is None:
            raise PageStateError("No page info set")
        self.variables = {**self.variables, "cursor": self.page_info.cursor}

    def connection(self, data: dict) -> Any:
        return dig(data, self.connection_path) if self.connection_path else data

    def nodes(self, data: dict) -> list:
        """Returns the raw nodes on the current page."""
        connection = self.connection(data)
        if connection is None:
            raise not_found()
        if not isinstance(connection, dict) or not isinstance(connection.get("nodes"), list):
            raise ParseError(data)
        return [node for node in connection["nodes"] if node is not None]

    def parse_response(self, data: dict) -> list[T]:
        """Updates page info from the response data and returns an empty list.

        Subclasses call this first, then parse the elements on the page.
        """
        connection = self.connection(data)
        raw_page_info = connection.get("pageInfo") if isinstance(connection, dict) else None
        if raw_page_info is not None:
            self.page_info = PageInfo.from_raw(raw_page_info)
            if self.page_info.cursor is not None:
                self._prepare_next_page()
        return []
