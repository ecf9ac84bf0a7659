"""One-shot timer scheduling."""

from .asyncio_scheduler import AsyncioScheduler, AsyncioTimerHandle

__all__ = [
    "AsyncioScheduler",
    "AsyncioTimerHandle",
]
