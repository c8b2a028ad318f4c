"""Acting on link targets: anchors, browser, editor and OS opener."""

from .DispatchResult import DispatchResult
from .edit_file_with_anchor import edit_file_with_anchor
from .EditorBuffer import EditorBuffer
from .FileBuffer import FileBuffer
from .ProcessLauncher import ProcessLauncher
from .SubprocessLauncher import SubprocessLauncher
from .UriDispatcher import UriDispatcher

__all__ = [
    "DispatchResult",
    "EditorBuffer",
    "FileBuffer",
    "ProcessLauncher",
    "SubprocessLauncher",
    "UriDispatcher",
    "edit_file_with_anchor",
]
