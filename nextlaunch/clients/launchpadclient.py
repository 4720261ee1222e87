from nextlaunch.clients.baseclient import BaseClient
from nextlaunch.errors import MalformedResponseError
from nextlaunch.models.launchpad import Launchpad


class LaunchpadClient(BaseClient):
    name = "Launchpad"

    def get(self, launchpad_id: str) -> Launchpad:
        return self.transform(self.extract(f"launchpads/{launchpad_id}"))

    def transform(self, raw_data: dict) -> Launchpad:
        if not isinstance(raw_data, dict):
            raise MalformedResponseError(
                f"Unexpected launchpad payload: {type(raw_data).__name__}"
            )

        return Launchpad(
            id=raw_data.get("id"),
            full_name=raw_data.get("full_name"),
            locality=raw_data.get("locality"),
            region=raw_data.get("region"),
            latitude=raw_data.get("latitude"),
            longitude=raw_data.get("longitude"),
        )
