"""Register a resource's router in the shared ``app.js`` entry file.

The entry file is patched line by line instead of being re-rendered, so
anything a developer added by hand between runs survives.  Two lines are
spliced in per resource:

* the ``require`` of the route module, right after the last top-level
  ``require`` above the anchor comment;
* the ``app.use(...)`` registration, below the anchor comment after one
  blank placeholder line and after any registrations already there.

A resource is registered at most once: if its ``require`` line is already
present the file is left alone.
Inserted lines use the separator most of the file already uses, so CRLF
files stay CRLF.
"""

from __future__ import annotations

import enum
import logging
from pathlib import Path

from .file_generator import read_file, write_file
from .templates import ROUTES_ANCHOR, render_route_import, render_route_registration

__all__ = ["RouteOutcome", "register_route", ]

log = logging.getLogger(__name__)


class RouteOutcome(str, enum.Enum):
    """Result of :func:`register_route`."""

    INSERTED = "inserted"
    ALREADY_PRESENT = "already_present"
    NO_ENTRY_FILE = "no_entry_file"
    ANCHOR_NOT_FOUND = "anchor_not_found"


def _dominant_newline(text: str) -> str:
    crlf = text.count("\r\n")
    return "\r\n" if crlf and crlf * 2 >= text.count("\n") else "\n"


def _find_anchor(lines: list[str]) -> int | None:
    for index, line in enumerate(lines):
        if ROUTES_ANCHOR in line:
            return index
    return None


def _is_dependency_import(line: str) -> bool:
    # Top-level only: indented requires live inside functions.
    return line.startswith("const ") and "require(" in line


def _is_registration(line: str) -> bool:
    return line.strip().startswith("app.use(")


def _insert_import(lines: list[str], anchor: int, statement: str) -> None:
    last_import = None
    for index in range(anchor):
        if _is_dependency_import(lines[index]):
            last_import = index
    position = 0 if last_import is None else last_import + 1
    lines.insert(position, statement)


def _insert_registration(lines: list[str], anchor: int, statement: str) -> None:
    if len(lines) == anchor + 1:
        lines.append("")
    position = anchor + 2
    while position < len(lines) and _is_registration(lines[position]):
        position += 1
    lines.insert(position, statement)


def register_route(entry_file: Path | str, name: str, pluralized: str) -> RouteOutcome:
    """Splice the import and registration of *name* into *entry_file*.

    Parameters
    ----------
    entry_file:
        Path of the shared entry file.  It is read, patched in memory and
        written back in one go.
    name:
        Validated resource name, e.g. ``"user"``.
    pluralized:
        Pluralized form used in the mount path, e.g. ``"users"``.

    Returns
    -------
    RouteOutcome
        ``NO_ENTRY_FILE`` and ``ANCHOR_NOT_FOUND`` leave the filesystem
        untouched, as does ``ALREADY_PRESENT``.
    """

    entry_file = Path(entry_file)
    if not entry_file.is_file():
        log.debug("Entry file %s does not exist", entry_file)
        return RouteOutcome.NO_ENTRY_FILE

    text = read_file(entry_file)
    route_import = render_route_import(name)
    route_use = render_route_registration(name, pluralized)

    if route_import in text:
        log.debug("%s already imported in %s", name, entry_file)
        return RouteOutcome.ALREADY_PRESENT

    newline = _dominant_newline(text)
    lines = text.split(newline)
    anchor = _find_anchor(lines)
    if anchor is None:
        log.info("Anchor %r not found in %s", ROUTES_ANCHOR, entry_file)
        return RouteOutcome.ANCHOR_NOT_FOUND

    _insert_import(lines, anchor, route_import)
    # The import always lands above the anchor.
    anchor += 1
    _insert_registration(lines, anchor, route_use)

    write_file(entry_file, newline.join(lines))
    log.info("Registered %s at %s in %s", name, route_use, entry_file)
    return RouteOutcome.INSERTED
