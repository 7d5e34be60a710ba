from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

DEFAULT_BASE_URL = "http://127.0.0.1:2233"
DEFAULT_TIMEOUT = 30.0
CONNECT_TIMEOUT = 10.0


@dataclass
class RequestConfig:
    base_url: Optional[str] = None
    timeout: Optional[float] = None  # seconds
    headers: Dict[str, str] = field(default_factory=dict)

    def extend(self, other: Optional["RequestConfig"]) -> "RequestConfig":
        """Return a new config with `other`'s explicit values layered on top."""
        if other is None:
            return RequestConfig(self.base_url, self.timeout, dict(self.headers))
        headers = dict(self.headers)
        headers.update(other.headers)
        return RequestConfig(
            base_url=other.base_url if other.base_url is not None else self.base_url,
            timeout=other.timeout if other.timeout is not None else self.timeout,
            headers=headers,
        )

    @property
    def effective_base_url(self) -> str:
        return (self.base_url or DEFAULT_BASE_URL).rstrip("/")

    @property
    def effective_timeout(self) -> float:
        return self.timeout if self.timeout is not None else DEFAULT_TIMEOUT
