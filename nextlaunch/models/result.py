from dataclasses import dataclass
from typing import Any, Mapping, Optional

from nextlaunch.models.launch import Launch
from nextlaunch.models.launchpad import Launchpad


@dataclass(frozen=True)
class FetchResult:
    launch: Launch
    launchpad: Launchpad


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lng: float


@dataclass(frozen=True)
class DisplayRecord:
    mission_name: str
    launch_date: str
    days_until_launch: Optional[int]
    launch_site: str
    location: str
    coordinates: Coordinates
    details: str
    links: Optional[Mapping[str, Any]]

    def to_dict(self) -> dict:
        # links is handed over as-is, not copied
        return {
            "missionName": self.mission_name,
            "launchDate": self.launch_date,
            "daysUntilLaunch": self.days_until_launch,
            "launchSite": self.launch_site,
            "location": self.location,
            "coordinates": {
                "lat": self.coordinates.lat,
                "lng": self.coordinates.lng,
            },
            "details": self.details,
            "links": self.links,
        }
