"""Low‑level file‑system helpers used by the *mvc_generator* package.

The goal of this module is to provide **pure, synchronous** helpers that
write text files.  Generated files are never overwritten:
:func:`create_file` only writes when nothing exists at the target path,
which is what makes repeated generator runs safe.  Errors from the
operating system are re-raised as :class:`FileCreationError` (defined in
:mod:`mvc_generator.exceptions`).
"""

from __future__ import annotations

import contextlib
import logging
from pathlib import Path

from .exceptions import FileCreationError

__all__ = ["write_file", "read_file", "create_file", ]

log = logging.getLogger(__name__)


def write_file(target: Path | str, content: str, *, encoding: str = "utf-8", ) -> Path:
    """Write *content* to *target* atomically.

    The function creates any missing parent directories, writes the
    content to a temporary file first, and then atomically moves the
    temporary file to ``target``.  This prevents a half-written entry file
    if the process is interrupted.

    Parameters
    ----------
    target:
        Destination file path.
    content:
        Text to write, verbatim.
    encoding:
        Text encoding – defaults to ``"utf-8"``.
    Returns
    -------
    Path
        The path of the written file.
    """

    target = Path(target)
    if target.is_dir():
        raise FileCreationError(f"Cannot write to a directory: {target!s}")
    tmp = target.with_name(target.name + ".tmp")
    try:
        target.parent.mkdir(parents = True, exist_ok = True)
        # newline="" keeps "\n" as-is on every platform.
        with tmp.open("w", encoding = encoding, newline = "") as fp:
            fp.write(content)
        tmp.replace(target)
        return target
    except (OSError, UnicodeError) as exc:
        with contextlib.suppress(OSError):
            tmp.unlink(missing_ok = True)
        raise FileCreationError(f"Failed to write file {target!s}: {exc}") from exc


def read_file(source: Path | str, *, encoding: str = "utf-8") -> str:
    """Return the text of *source*; unreadable or undecodable files raise :class:`FileCreationError`."""
    source = Path(source)
    try:
        with source.open("r", encoding = encoding, newline = "") as fp:
            return fp.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FileCreationError(f"Failed to read file {source!s}: {exc}") from exc


def create_file(path: Path | str, content: str) -> bool:
    """Create *path* with *content* unless a file is already there.

    Every ancestor directory of *path* is created first.  Returns ``True``
    when the file was written and ``False`` when it already existed, in
    which case its content is left untouched.
    """

    path = Path(path)
    try:
        path.parent.mkdir(parents = True, exist_ok = True)
    except OSError as exc:
        raise FileCreationError(
                f"Failed to create directory {path.parent!s}: {exc}"
                ) from exc

    if path.exists():
        log.debug("Skipping existing file %s", path)
        return False

    write_file(path, content)
    log.debug("Created %s (%d bytes)", path, len(content))
    return True
