"""Act on classified link targets."""

import logging
import os
import shlex
from collections.abc import Callable
from pathlib import Path

from ...utils.logger import get_logger
from ..anchor.find_anchor_line import find_anchor_line
from ..config.VimaniaConfig import VimaniaConfig
from ..errors import AnchorNotFound, FileNotReadable
from ..target.should_open_in_editor import should_open_in_editor
from ..target.Target import Target
from ..target.TargetKind import TargetKind
from ..url.validate_url import validate_url
from ._detect_open_command import _detect_open_command
from .DispatchResult import DispatchResult
from .EditorBuffer import EditorBuffer
from .ProcessLauncher import ProcessLauncher

logger = get_logger("dispatch")

Notifier = Callable[[str, int], None]


def _log_notification(message: str, level: int) -> None:
    logger.log(level, message)


class UriDispatcher:
    """Dispatch a Target to the handler for its kind.

    Relative file paths resolve against base_dir (the current directory when
    not given).
    """

    def __init__(
        self,
        config: VimaniaConfig,
        buffer: EditorBuffer,
        launcher: ProcessLauncher,
        notify: Notifier | None = None,
        base_dir: Path | None = None,
    ):
        self.config = config
        self.buffer = buffer
        self.launcher = launcher
        self.notify = notify or _log_notification
        self.base_dir = base_dir
        self._handlers: dict[TargetKind, Callable[[Target], DispatchResult]] = {
            TargetKind.NOOP: self._handle_noop,
            TargetKind.ANCHOR: self._handle_anchor,
            TargetKind.WEB: self._handle_web,
            TargetKind.FILE: self._handle_file,
            TargetKind.PELICAN: self._handle_file,
        }

    def dispatch(self, target: Target) -> DispatchResult:
        logger.info(f"Handling {target.kind.value} target: {target.value}")
        return self._handlers[target.kind](target)

    def _handle_noop(self, target: Target) -> DispatchResult:
        self.notify("No link found at cursor", logging.INFO)
        return DispatchResult(kind=target.kind, action="noop", value="")

    def _handle_anchor(self, target: Target) -> DispatchResult:
        self.jump_to_anchor(target.value)
        return DispatchResult(kind=target.kind, action="anchor", value=target.value)

    def jump_to_anchor(self, anchor: str) -> int:
        """Move the cursor to the heading or custom ID named by anchor.

        Raises:
            AnchorNotFound: If no line in the current buffer matches
        """
        line = find_anchor_line(anchor, self.buffer.get_lines())
        if line is None:
            raise AnchorNotFound(anchor)
        self.buffer.set_cursor(line, 0)
        logger.debug(f"Jumped to anchor {anchor} at line {line}")
        return line

    def _handle_web(self, target: Target) -> DispatchResult:
        validate_url(target.value, self.config.security)
        if self.config.browser_cmd:
            argv = shlex.split(self.config.browser_cmd)
        else:
            argv = _detect_open_command()
        launched = self.launcher.launch(argv[0], [*argv[1:], target.value])
        if not launched:
            self.notify(f"Failed to open browser for {target.value}", logging.WARNING)
        return DispatchResult(kind=target.kind, action="browser", value=target.value, success=launched)

    def resolve_path(self, path: str) -> Path:
        """Expand ~ and environment variables; anchor relative paths at base_dir."""
        resolved = Path(os.path.expandvars(os.path.expanduser(path)))
        if not resolved.is_absolute():
            resolved = (self.base_dir or Path.cwd()) / resolved
        return resolved

    def _handle_file(self, target: Target) -> DispatchResult:
        assert target.file is not None
        path = self.resolve_path(target.file.path)

        if not should_open_in_editor(target.file.path, self.config.extensions):
            return self._open_with_os(target, path)

        try:
            if not path.exists():
                path.parent.mkdir(parents=True, exist_ok=True)
                logger.info(f"Creating new file: {path}")
            self.buffer.open_in_new_view(str(path))
        except OSError as e:
            raise FileNotReadable(path, e.strerror or str(e)) from e

        if target.file.line is not None:
            self.buffer.set_cursor(target.file.line - 1, 0)
        if target.file.anchor:
            try:
                self.jump_to_anchor(target.file.anchor)
            except AnchorNotFound as e:
                self.notify(str(e), logging.WARNING)
        return DispatchResult(kind=target.kind, action="editor", value=str(path))

    def _open_with_os(self, target: Target, path: Path) -> DispatchResult:
        if not path.is_file():
            raise FileNotReadable(path)
        argv = _detect_open_command()
        launched = self.launcher.launch(argv[0], [*argv[1:], str(path)])
        if not launched:
            self.notify(f"Failed to open file with OS: {path}", logging.WARNING)
        return DispatchResult(kind=target.kind, action="os", value=str(path), success=launched)
