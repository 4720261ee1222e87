from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Launch:
    # Identifiers
    id: str
    name: str

    # Timing, None when the API has no usable date
    date: Optional[datetime] = None

    # Hardware
    launchpad_id: Optional[str] = None

    # Metadata / additional info
    details: Optional[str] = None
    links: Optional[Mapping[str, Any]] = None
