"""External process invocation for the rustdoc-js tester.

Child processes inherit the console; nothing is captured and exit
statuses are returned, never raised.
"""

import logging
import shlex
import subprocess
import sys
from typing import Sequence

logger = logging.getLogger(__name__)

# Shell conventions for a command that could not be started
EXIT_NOT_FOUND = 127
EXIT_CANNOT_EXECUTE = 126


def run_process(command: Sequence[str]) -> int:
    """Run a command to completion with the console passed through.

    Args:
        command: Program followed by its arguments.

    Returns:
        The program's exit status, or 127/126 if it could not be started.
    """
    cmd = [str(part) for part in command]
    logger.debug("Running: %s", shlex.join(cmd))

    # Keep our own output ahead of the child's
    sys.stdout.flush()
    sys.stderr.flush()

    try:
        completed = subprocess.run(cmd)
    except FileNotFoundError as e:
        print(f"{cmd[0]}: {e.strerror or 'No such file or directory'}", file=sys.stderr)
        return EXIT_NOT_FOUND
    except OSError as e:
        print(f"{cmd[0]}: {e.strerror or e}", file=sys.stderr)
        return EXIT_CANNOT_EXECUTE

    logger.debug("%s exited with %d", cmd[0], completed.returncode)
    return completed.returncode
