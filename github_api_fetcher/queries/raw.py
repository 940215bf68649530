"""Request for an arbitrary, caller-written GraphQL query."""

from ..graphql import GraphQLRequest


class RawQueryRequest(GraphQLRequest[dict]):
    """Sends ``query`` as is and returns the response data unparsed."""

    def __init__(self, query: str, variables: dict | None = None):
        super().__init__(variables)
        self.query = query

    def parse_response(self, data: dict) -> dict:
        return data
