from nextlaunch.errors import (
    FetchError,
    HttpStatusError,
    MalformedResponseError,
    NoFutureLaunchesError,
    NoUpcomingLaunchesError,
    TransportError,
)
from nextlaunch.fetcher import LaunchFetcher, fetch_next_launch, select_next_launch
from nextlaunch.formatter import format_launch_data
from nextlaunch.models import Coordinates, DisplayRecord, FetchResult, Launch, Launchpad

__all__ = [
    "fetch_next_launch",
    "format_launch_data",
    "select_next_launch",
    "LaunchFetcher",
    "Launch",
    "Launchpad",
    "FetchResult",
    "Coordinates",
    "DisplayRecord",
    "FetchError",
    "HttpStatusError",
    "TransportError",
    "MalformedResponseError",
    "NoUpcomingLaunchesError",
    "NoFutureLaunchesError",
]
