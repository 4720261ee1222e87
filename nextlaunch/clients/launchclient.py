import logging

from nextlaunch.clients.baseclient import BaseClient
from nextlaunch.errors import MalformedResponseError
from nextlaunch.models.launch import Launch
from nextlaunch.utils.utils import parse_date

logger = logging.getLogger(__name__)


class LaunchClient(BaseClient):
    name = "Launch"

    def upcoming(self) -> list[Launch]:
        return self.transform(self.extract("launches/upcoming"))

    def transform(self, raw_data: list[dict]) -> list[Launch]:
        if not isinstance(raw_data, list):
            raise MalformedResponseError(
                f"Unexpected upcoming launches payload: {type(raw_data).__name__}"
            )

        launches = []
        for raw in raw_data:
            if not isinstance(raw, dict) or not raw.get("id"):
                logger.debug("Skipping launch record without id: %r", raw)
                continue

            try:
                date = parse_date(raw.get("date_utc"))
            except (AttributeError, TypeError, ValueError):
                # Left undated, so it never counts as a future launch
                logger.debug("Unparseable date_utc %r for launch %s", raw.get("date_utc"), raw["id"])
                date = None

            launches.append(
                Launch(
                    # Identifiers
                    id=raw["id"],
                    name=raw.get("name"),
                    # Timing
                    date=date,
                    # Hardware
                    launchpad_id=raw.get("launchpad"),
                    # Metadata
                    details=raw.get("details"),
                    links=raw.get("links"),
                )
            )

        return launches
