from pathlib import Path


def read_document(path: Path) -> list[str]:
    """Read a text file as a list of lines without line terminators."""
    return path.read_text(encoding="utf-8", errors="replace").splitlines()
