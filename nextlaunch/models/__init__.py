from nextlaunch.models.launch import Launch
from nextlaunch.models.launchpad import Launchpad
from nextlaunch.models.result import Coordinates, DisplayRecord, FetchResult

__all__ = ["Launch", "Launchpad", "FetchResult", "Coordinates", "DisplayRecord"]
