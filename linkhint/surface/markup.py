"""Scanners that decorate plain text the way link-aware modes do.

``goto_address`` mirrors address highlighting (overlays over URLs and
e-mail addresses); ``mark_compilation_errors`` tags ``file:line:`` prefixes
of compiler and grep output.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .buffer import Buffer

ADDRESS_TAG = "goto-address"
ANNOTATION_TAG = "help-echo"
LOCATION_TAG = "compilation-location"

URL_RE = re.compile(r"\b(?:https?|ftp|file|mailto)://[^\s<>\"'()\[\]]*[^\s<>\"'()\[\].,;:!?]")
MAIL_RE = re.compile(r"\b[\w.+-]+@[\w-]+(?:\.[\w-]+)+\b")
COMPILATION_RE = re.compile(r"^(?P<file>[^\s:][^:\n]*):(?P<line>\d+):(?:(?P<column>\d+):)?", re.MULTILINE)


@dataclass(frozen=True)
class SourceLocation:
    """Target of one compilation-output reference."""

    path: str
    line: int
    column: int | None = None


def goto_address(buffer: Buffer) -> int:
    """Overlay every URL and e-mail address; return the number added."""
    spans: list[tuple[int, int, str]] = []
    for match in URL_RE.finditer(buffer.text):
        spans.append((match.start(), match.end(), match.group(0)))
    for match in MAIL_RE.finditer(buffer.text):
        if any(start <= match.start() < end for start, end, _ in spans):
            continue
        spans.append((match.start(), match.end(), f"mailto:{match.group(0)}"))
    spans.sort()
    for start, end, address in spans:
        buffer.make_overlay(start, end, **{ADDRESS_TAG: True, "address": address})
    return len(spans)


def address_at(buffer: Buffer, position: int) -> str | None:
    """Return the address of the overlay covering ``position``."""
    for overlay in buffer.overlays_in(position, position + 1):
        if overlay.properties.get(ADDRESS_TAG):
            return overlay.properties.get("address")
    return None


def mark_compilation_errors(buffer: Buffer) -> int:
    """Tag ``file:line[:column]:`` prefixes; return the number tagged."""
    count = 0
    for match in COMPILATION_RE.finditer(buffer.text):
        column = match.group("column")
        location = SourceLocation(
            path=match.group("file"),
            line=int(match.group("line")),
            column=int(column) if column is not None else None,
        )
        end = match.end() - 1
        buffer.put_property(match.start(), end, ANNOTATION_TAG, "mouse-2: visit this location")
        buffer.put_property(match.start(), end, LOCATION_TAG, location)
        count += 1
    return count
