"""Editor session: the commands a host editor binds."""

import logging
from concurrent.futures import Future
from pathlib import Path

from ...constants import UNKNOWN_URL_TITLE
from ...utils.logger import configure_logging, get_logger
from ..config.VimaniaConfig import VimaniaConfig
from ..dispatch.DispatchResult import DispatchResult
from ..dispatch.edit_file_with_anchor import edit_file_with_anchor
from ..dispatch.EditorBuffer import EditorBuffer
from ..dispatch.ProcessLauncher import ProcessLauncher
from ..dispatch.SubprocessLauncher import SubprocessLauncher
from ..dispatch.UriDispatcher import Notifier, UriDispatcher
from ..errors import InvalidUrl, VimaniaError
from ..link.CursorPosition import CursorPosition
from ..link.find_next_link import find_next_link
from ..link.find_prev_link import find_prev_link
from ..link.parse_line_at_cursor import parse_line_at_cursor
from ..target.classify_target import classify_target
from ..title.build_markdown_link import build_markdown_link
from ..title.TitleFetcher import TitleCallback, TitleFetcher
from ..url.is_url import is_url

logger = get_logger("session")


class Vimania:
    """Link handling bound to one editor.

    Call initialize() before any command and shutdown() when done. Domain
    errors never escape a command: they are logged and reported through
    notify as warnings.

    Example:
        session = Vimania(buffer)
        session.initialize(VimaniaConfig.load())
        session.handle_uri()
        session.shutdown()
    """

    def __init__(
        self,
        buffer: EditorBuffer,
        launcher: ProcessLauncher | None = None,
        notify: Notifier | None = None,
        base_dir: Path | None = None,
    ):
        self.buffer = buffer
        self.launcher = launcher or SubprocessLauncher()
        self._notify = notify
        self.base_dir = base_dir
        self.config: VimaniaConfig | None = None
        self._dispatcher: UriDispatcher | None = None
        self._fetcher: TitleFetcher | None = None

    def notify(self, message: str, level: int = logging.INFO) -> None:
        logger.log(level, message)
        if self._notify is not None:
            self._notify(message, level)

    def initialize(self, config: VimaniaConfig, async_fetch: bool = True, configure_logs: bool = True) -> None:
        if configure_logs:
            configure_logging(level=config.log_level)
        self.config = config
        self._dispatcher = UriDispatcher(
            config, self.buffer, self.launcher, notify=self.notify, base_dir=self.base_dir
        )
        self._fetcher = TitleFetcher(config.timeout, config.security, async_fetch=async_fetch)
        logger.debug("Session initialized")

    def shutdown(self) -> None:
        if self._fetcher is not None:
            self._fetcher.shutdown()
        self._fetcher = None
        self._dispatcher = None
        self.config = None
        logger.debug("Session shut down")

    @property
    def initialized(self) -> bool:
        return self._dispatcher is not None

    def _require_initialized(self) -> tuple[UriDispatcher, TitleFetcher]:
        if self._dispatcher is None or self._fetcher is None:
            raise RuntimeError("Vimania session is not initialized; call initialize(config) first")
        return self._dispatcher, self._fetcher

    def _cursor(self) -> CursorPosition:
        row, col = self.buffer.get_cursor()
        return CursorPosition(row=row, col=col)

    def handle_uri(self) -> DispatchResult | None:
        """Open whatever the link under the cursor points at."""
        dispatcher, _ = self._require_initialized()
        target = parse_line_at_cursor(self.buffer.get_lines(), self._cursor())
        try:
            return dispatcher.dispatch(classify_target(target))
        except VimaniaError as e:
            self.notify(f"Error handling URI: {e}", logging.WARNING)
            return None

    def get_url_title(self, url: str, callback: TitleCallback | None = None) -> "Future[str | None]":
        """Fetch a page title; failures are notified and resolve to None."""
        _, fetcher = self._require_initialized()

        def on_done(title: str | None, error: VimaniaError | None) -> None:
            if error is not None:
                self.notify(f"Failed to get title: {error}", logging.WARNING)
            if callback is not None:
                callback(title, error)

        return fetcher.fetch(url, on_done)

    def paste_markdown_link(self, url: str) -> "Future[str | None] | None":
        """Insert ``[title](url)`` at the cursor once the title is known.

        Returns None without fetching when url is not a URL. On an async
        session the text is inserted from the worker thread.
        """
        _, fetcher = self._require_initialized()
        url = url.strip() if url else ""
        if not is_url(url):
            self.notify(str(InvalidUrl(f"Clipboard does not contain a valid URL: {url}")), logging.WARNING)
            return None

        def insert(title: str | None, error: VimaniaError | None) -> None:
            if error is not None:
                self.notify(f"Failed to get title: {error}", logging.WARNING)
            self.buffer.insert_text(build_markdown_link(title or UNKNOWN_URL_TITLE, url))

        return fetcher.fetch(url, insert)

    def find_next_link(self) -> CursorPosition | None:
        self._require_initialized()
        position = find_next_link(self.buffer.get_lines(), self._cursor())
        if position is None:
            self.notify("No next link found")
        else:
            self.buffer.set_cursor(position.row, position.col)
        return position

    def find_prev_link(self) -> CursorPosition | None:
        self._require_initialized()
        position = find_prev_link(self.buffer.get_lines(), self._cursor())
        if position is None:
            self.notify("No previous link found")
        else:
            self.buffer.set_cursor(position.row, position.col)
        return position

    def edit_file_with_anchor(self, arg: str) -> int | None:
        """Open ``path#anchor``; see edit_file_with_anchor()."""
        self._require_initialized()
        try:
            return edit_file_with_anchor(arg, self.buffer)
        except ValueError as e:
            self.notify(str(e), logging.WARNING)
            return None
