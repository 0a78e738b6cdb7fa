from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_USER_AGENT = "parish-feeds/0.1 (+https://www.trinityeaston.org/)"


@dataclass(slots=True)
class ClientConfig:
    """Client settings; environment overrides are read when an instance is created."""

    timeout: float = field(default_factory=lambda: float(os.getenv("FEEDS_TIMEOUT", "30")))
    user_agent: str = field(default_factory=lambda: os.getenv("FEEDS_USER_AGENT", DEFAULT_USER_AGENT))
    max_workers: int = field(default_factory=lambda: int(os.getenv("FEEDS_MAX_WORKERS", "4")))

    @property
    def headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent, "Accept": "application/xml, text/xml, */*"}
