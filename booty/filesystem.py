"""Helpers for creating folders and files beneath the user's home directory."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from pathlib import Path

FILE_CREATED = "File created successfully."
FILE_SKIPPED = "File already exists. (skipped)"


class PathStatus(enum.Enum):
    """Outcome of making sure a directory exists."""

    CREATED = enum.auto()
    ALREADY_EXISTS = enum.auto()
    FAILED = enum.auto()


@dataclass(frozen=True)
class PathCheckResult:
    """The status of a directory check and the absolute path it concerns."""

    status: PathStatus
    path: Path


def _home() -> Path:
    try:
        return Path.home()
    except (RuntimeError, KeyError) as err:
        raise OSError(f"unable to find home directory: {err}") from err


def ensure_subdir_in_home(subdir: str | os.PathLike[str]) -> PathCheckResult:
    """Make sure ``subdir`` exists inside the home directory, creating it owner-only.

    Only the last component is created; a missing parent is an error.
    Raises ``OSError`` when the directory cannot be found or created.
    """
    full_path = _home() / subdir

    try:
        is_dir = full_path.stat() and full_path.is_dir()
    except FileNotFoundError:
        try:
            full_path.mkdir(mode=0o700)
        except OSError as err:
            raise OSError(f"failed to create directory: {err}") from err
        return PathCheckResult(PathStatus.CREATED, full_path)
    except OSError as err:
        raise OSError(f"error checking directory: {err}") from err

    if is_dir:
        return PathCheckResult(PathStatus.ALREADY_EXISTS, full_path)
    raise NotADirectoryError(f"path exists but is not a directory: {full_path}")


def write_file_to_home_subdir(
    subdir: str | os.PathLike[str], filename: str, data: bytes
) -> str:
    """Write ``data`` to ``filename`` inside a home subdirectory unless it already exists.

    Returns a message describing what happened. Raises ``OSError`` on failure.
    """
    try:
        result = ensure_subdir_in_home(subdir)
    except OSError as err:
        raise OSError(
            f"failed to find or create destination directory: {err}"
        ) from err

    dest_path = result.path / filename

    try:
        dest_path.stat()
    except FileNotFoundError:
        pass
    except OSError as err:
        raise OSError(f"error checking file: {err}") from err
    else:
        return FILE_SKIPPED

    try:
        fd = os.open(dest_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o640)
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
    except OSError as err:
        raise OSError(f"failed to write file: {err}") from err

    return FILE_CREATED