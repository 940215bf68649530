from ..fetcher import APIFetcher


class RouteFetcher:
    """API fetcher for a specific resource."""

    def __init__(self, fetcher: APIFetcher):
        self.fetcher = fetcher
