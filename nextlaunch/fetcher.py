"""
Next-launch lookup against the SpaceX API.

An attempt lists the upcoming launches, picks the earliest one that is
still in the future and then resolves its launchpad. Failed attempts are
retried with a linear backoff (1s, 2s, ...) and the last error is raised
once the attempts run out.
"""

import logging
import time
from datetime import datetime
from typing import Callable, Iterable, Optional

import httpx

from nextlaunch.clients import LaunchClient, LaunchpadClient
from nextlaunch.config import BASE_URL, RETRY_ATTEMPTS, RETRY_DELAY_SECONDS
from nextlaunch.errors import FetchError, NoFutureLaunchesError, NoUpcomingLaunchesError
from nextlaunch.models import FetchResult, Launch
from nextlaunch.utils.utils import utc_now

logger = logging.getLogger(__name__)


def select_next_launch(launches: Iterable[Launch], now: datetime) -> Launch:
    """Return the earliest launch scheduled strictly after ``now``.

    Launches without a date are ignored. Equal dates keep the order they
    came in.
    """
    launches = list(launches)
    if not launches:
        raise NoUpcomingLaunchesError()

    future = sorted(
        (launch for launch in launches if launch.date is not None and launch.date > now),
        key=lambda launch: launch.date,
    )
    if not future:
        raise NoFutureLaunchesError()

    return future[0]


class LaunchFetcher:
    def __init__(
        self,
        base_url: str = BASE_URL,
        attempts: int = RETRY_ATTEMPTS,
        retry_delay: float = RETRY_DELAY_SECONDS,
        http_client: Optional[httpx.Client] = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        if attempts < 1:
            raise ValueError("attempts must be at least 1")

        self.attempts = attempts
        self.retry_delay = retry_delay
        self.sleep = sleep
        self.clock = clock
        self.launches = LaunchClient(base_url, http_client=http_client)
        self.launchpads = LaunchpadClient(base_url, http_client=http_client)

    def fetch_once(self) -> FetchResult:
        upcoming = self.launches.upcoming()
        launch = select_next_launch(upcoming, self.clock())
        logger.info("Next launch is %s at %s", launch.name, launch.date.isoformat())

        # Launchpad lookup only starts once the launch is chosen
        launchpad = self.launchpads.get(launch.launchpad_id)
        return FetchResult(launch=launch, launchpad=launchpad)

    def fetch_next_launch(self) -> FetchResult:
        last_error: Optional[FetchError] = None

        for attempt in range(1, self.attempts + 1):
            try:
                return self.fetch_once()
            except FetchError as e:
                last_error = e
                logger.warning("SpaceX API attempt %d failed: %s", attempt, e)

                if attempt < self.attempts:
                    self.sleep(self.retry_delay * attempt)

        if last_error is None:
            raise FetchError("Failed to fetch SpaceX launch data")
        raise last_error


def fetch_next_launch() -> FetchResult:
    return LaunchFetcher().fetch_next_launch()
