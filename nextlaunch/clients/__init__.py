from nextlaunch.clients.baseclient import BaseClient
from nextlaunch.clients.launchclient import LaunchClient
from nextlaunch.clients.launchpadclient import LaunchpadClient

__all__ = ["BaseClient", "LaunchClient", "LaunchpadClient"]
