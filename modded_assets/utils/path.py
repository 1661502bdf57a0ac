"""Path utilities for locating mod content regardless of letter casing.

Mods are frequently authored on Windows, where `Textures/Banner.png` and
`textures/banner.PNG` name the same file. On Linux they don't, so paths
coming from mod code or metadata are resolved here against what is actually
on disk.
"""

import logging
import os
from pathlib import Path, PureWindowsPath
from typing import Sequence

logger = logging.getLogger(__name__)


class FileSystem:
    """The filesystem queries `combine()` needs. Subclass this to resolve
    paths against something other than the local disk (tests use an
    in-memory one)."""

    def is_dir(self, path: str) -> bool:
        raise NotImplementedError

    def list_directories(self, path: str) -> list[str]:
        """Base names of the subdirectories of `path`."""
        raise NotImplementedError

    def list_files(self, path: str) -> list[str]:
        """Base names of the non-directory entries of `path`."""
        raise NotImplementedError


class OsFileSystem(FileSystem):
    def is_dir(self, path):
        return os.path.isdir(path)

    def list_directories(self, path):
        with os.scandir(path) as entries:
            return [e.name for e in entries if e.is_dir()]

    def list_files(self, path):
        with os.scandir(path) as entries:
            return [e.name for e in entries if not e.is_dir()]


os_filesystem = OsFileSystem()


def convert_path_to_os_style(path: str) -> str:
    """Convert a Windows or Posix-style path to the current OS-specific style"""
    return str(Path(PureWindowsPath(path)))


def find_case_insensitive_name(names, target: str) -> str | None:
    """Return the name in `names` equal to `target` ignoring case, or None.

    If several names match (only possible on a case-sensitive filesystem),
    the smallest one by plain string ordering wins, so the result doesn't
    depend on the order the OS happens to list directory entries in.

    Names are compared upper-cased, so e.g. the Kelvin sign doesn't match
    `k`. Characters whose upper case is several characters (`ß` -> `SS`)
    still compare equal to their expansion.
    """
    target = target.upper()
    for name in sorted(names):
        if name.upper() == target:
            return name
    return None


def combine(segments: Sequence[str], fs: FileSystem | None = None) -> str:
    """Combine path segments into a single path, matching existing
    directories and files case-insensitively.

    The first segment is used as-is. Each following segment is matched
    against the subdirectories, then the files, of the path built so far;
    on a match the on-disk name is used. If the path so far isn't an
    existing directory or nothing matches, the segment is joined literally,
    so the result can also be used to create new files. Empty segments are
    skipped.

    Raises ValueError if no segments are given. Errors from listing a
    directory are not caught.
    """
    if isinstance(segments, str):
        segments = [segments]
    if not segments:
        raise ValueError('No paths provided')
    if fs is None:
        fs = os_filesystem

    current_path = segments[0]
    for next_part in segments[1:]:
        if not next_part:
            continue

        if not fs.is_dir(current_path):
            current_path = os.path.join(current_path, next_part)
            continue

        # directories take priority over files
        match = find_case_insensitive_name(
            fs.list_directories(current_path), next_part
        )
        if match is None:
            match = find_case_insensitive_name(
                fs.list_files(current_path), next_part
            )

        if match is None:
            logger.debug(f'No entry matching {next_part!r} in {current_path}')
            match = next_part
        elif match != next_part:
            logger.debug(f'Matched {next_part!r} to {match!r} in {current_path}')
        current_path = os.path.join(current_path, match)

    return current_path


def find_case_sensitive_path(
    dir: str, insensitive_path: str, fs: FileSystem | None = None
) -> str | None:
    """Find the actual path of `insensitive_path` (relative to `dir`),
    or None if nothing by that name exists."""
    if fs is None:
        fs = os_filesystem
    insensitive_path = os.path.normpath(convert_path_to_os_style(insensitive_path))
    insensitive_path = insensitive_path.lstrip(os.path.sep)
    parts = [
        part for part in insensitive_path.split(os.path.sep)
        if part and part != os.curdir
    ]
    # only names actually listed under `dir` are followed
    if not parts or os.pardir in parts:
        return None

    path = combine([dir, *parts], fs)
    parent, name = os.path.split(path)
    if fs.is_dir(path) or (
        fs.is_dir(parent) and name in fs.list_files(parent)
    ):
        return path
    return None
