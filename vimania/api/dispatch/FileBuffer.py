"""File-backed EditorBuffer."""

from pathlib import Path

from ..link.read_document import read_document


class FileBuffer:
    """EditorBuffer over plain files, for the CLI and tests.

    Opening a file replaces the current buffer; the cursor lives in memory
    and inserted text is kept in memory until save() is called.
    """

    def __init__(self, path: Path | str | None = None, row: int = 0, col: int = 0):
        self.path: Path | None = None
        self.lines: list[str] = []
        self.opened: list[str] = []
        self.row = row
        self.col = col
        if path is not None:
            self._load(Path(path))

    def _load(self, path: Path) -> None:
        self.path = path
        self.lines = read_document(path) if path.is_file() else []

    def get_lines(self) -> list[str]:
        return self.lines

    def get_cursor(self) -> tuple[int, int]:
        return (self.row, self.col)

    def set_cursor(self, row: int, col: int) -> None:
        last_row = max(len(self.lines) - 1, 0)
        self.row = min(max(row, 0), last_row)
        self.col = max(col, 0)

    def open_in_new_view(self, path: str) -> None:
        self.opened.append(path)
        self._load(Path(path))
        self.row = 0
        self.col = 0

    def insert_text(self, text: str) -> None:
        if not self.lines:
            self.lines.append("")
        line = self.lines[self.row]
        col = min(self.col, len(line))
        self.lines[self.row] = line[:col] + text + line[col:]
        self.col = col + len(text)

    def save(self) -> None:
        if self.path is None:
            raise RuntimeError("Buffer has no file")
        self.path.write_text("\n".join(self.lines) + "\n", encoding="utf-8")
