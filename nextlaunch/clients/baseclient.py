import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

import httpx

from nextlaunch.config import BASE_URL, HTTP_TIMEOUT_SECONDS
from nextlaunch.errors import HttpStatusError, MalformedResponseError, TransportError

T = TypeVar("T")

logger = logging.getLogger(__name__)


class BaseClient(ABC, Generic[T]):
    name: str

    def __init__(
        self,
        base_url: str = BASE_URL,
        http_client: Optional[httpx.Client] = None,
        timeout: float = HTTP_TIMEOUT_SECONDS,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.http_client = http_client
        self.timeout = timeout

    def extract(self, path: str) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.debug("GET %s", url)

        try:
            if self.http_client is not None:
                response = self.http_client.get(url, timeout=self.timeout)
            else:
                # Fetch Data from API (synchronously)
                with httpx.Client(timeout=self.timeout) as client:
                    response = client.get(url)
        except httpx.RequestError as e:
            raise TransportError(f"{self.name} API request failed: {e}") from e

        if not response.is_success:
            raise HttpStatusError(self.name, response.status_code, url)

        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError(f"{self.name} API returned invalid JSON") from e

    @abstractmethod
    def transform(self, raw_data: Any) -> T:
        """Turn the decoded JSON body into model objects"""
        pass
