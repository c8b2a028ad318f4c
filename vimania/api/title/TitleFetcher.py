"""Background title fetching."""

from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor

from ...utils.logger import get_logger
from ..config.SecurityConfig import SecurityConfig
from ..errors import VimaniaError
from .fetch_title import fetch_title

logger = get_logger("title")

TitleCallback = Callable[[str | None, VimaniaError | None], None]


class TitleFetcher:
    """Fetch page titles on a thread pool.

    Each fetch returns a Future resolving to the title (or None on failure)
    and calls callback(title, error) exactly once. With async_fetch=False, or
    after shutdown(), fetches run on the calling thread and the callback has
    run by the time fetch() returns.
    """

    def __init__(self, timeout_ms: int, security: SecurityConfig, async_fetch: bool = True, max_workers: int = 4):
        self.timeout_ms = timeout_ms
        self.security = security
        self._executor: ThreadPoolExecutor | None = (
            ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="vimania-title") if async_fetch else None
        )

    def _run(self, url: str, callback: TitleCallback | None) -> str | None:
        title: str | None = None
        error: VimaniaError | None = None
        try:
            title = fetch_title(url, self.timeout_ms, self.security)
        except VimaniaError as e:
            logger.warning(f"Failed to fetch title for {url}: {e}")
            error = e
        if callback is not None:
            callback(title, error)
        return title

    def fetch(self, url: str, callback: TitleCallback | None = None) -> "Future[str | None]":
        if self._executor is not None:
            return self._executor.submit(self._run, url, callback)

        future: Future[str | None] = Future()
        future.set_result(self._run(url, callback))
        return future

    def shutdown(self) -> None:
        """Wait for in-flight fetches and stop the pool."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
