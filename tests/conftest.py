from datetime import datetime, timedelta, timezone

import httpx
import pytest

NOW = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


def iso(dt: datetime) -> str:
    return dt.strftime("%Y-%m-%dT%H:%M:%S.000Z")


def raw_launch(launch_id: str, when: datetime, **extra) -> dict:
    data = {
        "id": launch_id,
        "name": f"Mission {launch_id}",
        "flight_number": 200,
        "date_utc": iso(when),
        "date_precision": "hour",
        "upcoming": True,
        "tbd": False,
        "net": False,
        "rocket": "5e9d0d95eda69973a809d1ec",
        "launchpad": "5e9e4502f509094188566f88",
        "details": None,
        "links": {"webcast": None, "patch": {"small": None, "large": None}},
    }
    data.update(extra)
    return data


@pytest.fixture
def raw_launchpad() -> dict:
    return {
        "id": "5e9e4502f509094188566f88",
        "name": "KSC LC 39A",
        "full_name": "Kennedy Space Center Historic Launch Complex 39A",
        "locality": "Cape Canaveral",
        "region": "Florida",
        "timezone": "America/New_York",
        "latitude": 28.6080585,
        "longitude": -80.6039558,
        "launch_attempts": 55,
        "launch_successes": 54,
        "status": "active",
        "details": "NASA historic launch pad.",
    }


class FakeSpaceX:
    """Scripted responses for the two endpoints, one entry consumed per request."""

    def __init__(self, launches: list, launchpads: list) -> None:
        self.launches = list(launches)
        self.launchpads = list(launchpads)
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path.endswith("/launches/upcoming"):
            return self._next(self.launches)
        if "/launchpads/" in path:
            return self._next(self.launchpads)
        return httpx.Response(404, json={"error": "Not Found"})

    @staticmethod
    def _next(queue: list) -> httpx.Response:
        item = queue.pop(0)
        if isinstance(item, httpx.Response):
            return item
        if isinstance(item, Exception):
            raise item
        return httpx.Response(200, json=item)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def clock():
    return lambda: NOW


@pytest.fixture
def sleeps() -> list:
    return []


@pytest.fixture
def days():
    return lambda n: NOW + timedelta(days=n)


@pytest.fixture
def make_launch():
    return raw_launch


@pytest.fixture
def spacex():
    return FakeSpaceX
