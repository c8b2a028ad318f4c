"""StageResult: what every cmd_* function returns."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Announce, progress, result and output of one command run.

    The command returns immediately with ``announce`` and a
    ``progress_callback`` generator; running the generator does the work,
    yields ``(fraction, message)`` pairs and fills in result, output and
    success.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False

    def run(self) -> "StageResult":
        """Drain the progress generator without displaying it."""
        for _ in self.progress_callback(self):
            pass
        return self
