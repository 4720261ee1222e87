from typing import Optional


class FetchError(Exception):
    """Base class for everything that can make a fetch attempt fail."""


class HttpStatusError(FetchError):
    def __init__(self, resource: str, status_code: int, url: Optional[str] = None) -> None:
        self.resource = resource
        self.status_code = status_code
        self.url = url
        super().__init__(f"{resource} API responded with status: {status_code}")


class TransportError(FetchError):
    """Request failed before a usable response arrived (network, redirects, content decoding)."""


class MalformedResponseError(FetchError):
    """Response body is not JSON or not shaped like the resource."""


class NoUpcomingLaunchesError(FetchError):
    def __init__(self) -> None:
        super().__init__("No upcoming launches found")


class NoFutureLaunchesError(FetchError):
    def __init__(self) -> None:
        super().__init__("No future launches found in upcoming launches")
