"""Network logo with a single-character fallback"""

import logging
from enum import Enum
from typing import Optional

from bonai_rewards.domain.exceptions import ImageLoadError
from bonai_rewards.infrastructure.clients.images import ImageClient
from bonai_rewards.infrastructure.observability.metrics import logo_failure_counter
from bonai_rewards.presentation.schemas import LogoFrame

logger = logging.getLogger(__name__)


class LogoState(str, Enum):
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


def placeholder_glyph(name: str) -> str:
    """First character of the name, or '?' for an empty name"""
    return name[:1] or "?"


class LogoView:
    """Logo image whose load failure never reaches the caller"""

    def __init__(self, url: str, name: str):
        self.url = url
        self.placeholder = placeholder_glyph(name)
        self.state = LogoState.LOADING
        self.content: Optional[bytes] = None

    async def load(self, client: ImageClient) -> None:
        try:
            self.content = await client.fetch(self.url)
            self.state = LogoState.LOADED
        except ImageLoadError as e:
            self.mark_failed(str(e))

    def mark_failed(self, reason: str = "") -> None:
        self.state = LogoState.FAILED
        self.content = None
        logo_failure_counter.inc()
        logger.warning("Logo replaced by placeholder", extra={"url": self.url, "reason": reason})

    def render(self) -> LogoFrame:
        return LogoFrame(
            url=self.url,
            placeholder=self.placeholder,
            show_placeholder=self.state == LogoState.FAILED,
        )
