from dataclasses import dataclass


@dataclass(frozen=True)
class Launchpad:
    id: str
    full_name: str
    locality: str
    region: str
    latitude: float
    longitude: float
