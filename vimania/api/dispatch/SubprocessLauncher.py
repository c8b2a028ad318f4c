"""ProcessLauncher backed by subprocess."""

import subprocess
from collections.abc import Sequence

from ...utils.logger import get_logger

logger = get_logger("dispatch")


class SubprocessLauncher:
    """Start detached processes; output is discarded."""

    def launch(self, command: str, args: Sequence[str]) -> bool:
        argv = [command, *args]
        try:
            process = subprocess.Popen(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as e:
            logger.error(f"Failed to launch {argv}: {e}")
            return False
        logger.debug(f"Launched {argv} (PID: {process.pid})")
        return True
