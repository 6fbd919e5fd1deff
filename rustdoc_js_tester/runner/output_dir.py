"""Scoped per-test output directory."""

import logging
import os
import shutil
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Union

logger = logging.getLogger(__name__)


def remove_output(path: Union[str, Path]) -> None:
    """Remove `path` recursively, like `rm -rf`. Errors are ignored."""
    path = Path(path)
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path, onexc=_log_failure)
    elif os.path.lexists(path):
        try:
            path.unlink()
        except OSError as e:
            _log_failure(os.unlink, path, e)


def _log_failure(function, path, error) -> None:
    logger.debug("Could not remove %s: %s", path, error)


@contextmanager
def scoped_output_dir(path: Union[str, Path]) -> Iterator[Path]:
    """Yield `path` and remove it on every way out of the block."""
    path = Path(path)
    try:
        yield path
    finally:
        remove_output(path)
