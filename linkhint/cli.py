"""Command-line front door for linkhint.

Loads a text file, decorates its links for the chosen variant, and either
lists the visible candidates or runs the interactive hint selector.
"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from pathlib import Path

from .config import HintSettings, is_valid_hint_keys, load_hint_settings, save_hint_keys
from .dispatch import FollowOutcome, collect, follow_link
from .editor import launch_editor
from .errors import NotFollowable
from .model import Variant, Viewport
from .selector import HintRenderRequest, HintSelector, render_hint_overlay
from .surface import (
    LOCATION_TAG,
    ORG_LINK_RE,
    Buffer,
    BufferSurface,
    SourceLocation,
    SurfacePrimitives,
    address_at,
    goto_address,
    mark_compilation_errors,
)

CLI_VARIANTS = (Variant.ORG.value, Variant.ADDRESS.value, Variant.COMPILATION.value)


def read_text(path: Path) -> str:
    """Read text, falling back to latin-1 when UTF-8 decoding fails."""
    try:
        return path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError:
        return path.read_text(encoding="latin-1")


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _nonnegative_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def _default_visible_lines() -> int:
    """Resolve default viewport height from current terminal size."""
    term = shutil.get_terminal_size((80, 24))
    return max(1, term.lines - 1)


def build_buffer(text: str, variant: Variant) -> Buffer:
    """Create a buffer with the link markup ``variant`` collects."""
    buffer = Buffer(text)
    if variant is Variant.ADDRESS:
        goto_address(buffer)
    elif variant is Variant.COMPILATION:
        mark_compilation_errors(buffer)
    return buffer


def build_primitives(buffer: Buffer, viewport: Viewport, targets: list[object]) -> SurfacePrimitives:
    """Surface primitives whose activation records the followed target."""
    surface = BufferSurface(buffer, viewport)

    def open_at(position: int) -> None:
        address = address_at(buffer, position)
        if address is not None:
            targets.append(address)
            return
        match = ORG_LINK_RE.match(buffer.text, position)
        if match is not None:
            targets.append(next(group for group in match.groups() if group))

    def activate_at(position: int) -> None:
        location = buffer.get_property(position, LOCATION_TAG)
        if isinstance(location, SourceLocation):
            targets.append(location)

    return surface.primitives(activate_at=activate_at, open_at=open_at)


def format_candidates(buffer: Buffer, variant: Variant, primitives: SurfacePrimitives) -> str:
    """Render ``offset<TAB>label`` rows for every visible candidate."""
    rows = []
    for candidate in collect(variant, primitives):
        location = buffer.get_property(candidate.position, LOCATION_TAG)
        if isinstance(location, SourceLocation):
            label = f"{location.path}:{location.line}"
        else:
            label = candidate.label or ""
        rows.append(f"{candidate.position}\t{label}\n")
    return "".join(rows)


def run_interactive(
    buffer: Buffer,
    variant: Variant,
    viewport: Viewport,
    settings: HintSettings,
    no_color: bool,
) -> int:
    """Run one hint selection in the terminal and report the followed target."""
    from .terminal import TerminalController, read_key

    if not sys.stdin.isatty():
        raise SystemExit("Interactive selection needs a terminal; use --list.")

    targets: list[object] = []
    primitives = build_primitives(buffer, viewport, targets)
    visible_text = buffer.substring(viewport.start, viewport.end)
    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())

    def render(request: HintRenderRequest) -> None:
        terminal.draw(
            render_hint_overlay(
                visible_text,
                viewport.start,
                request.hints,
                typed=request.typed,
                style=settings.style,
                no_color=no_color,
            )
        )

    selector = HintSelector(
        read_key=lambda: read_key(stdin_fd),
        render=render,
        keys=settings.keys,
        single_candidate_jump=settings.single_candidate_jump,
    )
    try:
        with terminal.raw_mode():
            outcome = follow_link(variant, primitives, selector)
    except NotFollowable as exc:
        sys.stderr.write(f"{exc}\n")
        return 1

    if outcome is FollowOutcome.NO_CANDIDATES:
        sys.stderr.write("No links in view.\n")
        return 1
    if outcome is FollowOutcome.CANCELLED or not targets:
        return 1

    target = targets[-1]
    if isinstance(target, SourceLocation):
        error = launch_editor(target)
        if error is not None:
            sys.stderr.write(f"{error}\n")
            return 1
        return 0
    sys.stdout.write(f"{target}\n")
    return 0


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and list or follow links visible in a file."""
    parser = argparse.ArgumentParser(
        description="Jump to any visible link in a text file with a few keystrokes."
    )
    parser.add_argument("path", help="Path to a text file.")
    parser.add_argument("--variant", choices=CLI_VARIANTS, default=Variant.ORG.value, help="Link markup to look for.")
    parser.add_argument("--start", type=_nonnegative_int, default=0, help="First visible line (0-based).")
    parser.add_argument(
        "--lines",
        type=_positive_int,
        default=None,
        help="Number of visible lines (default: terminal height).",
    )
    parser.add_argument("--list", action="store_true", help="Print visible candidates and exit.")
    parser.add_argument("--keys", default=None, help="Hint key alphabet (overrides config).")
    parser.add_argument("--save-keys", action="store_true", help="Persist --keys as the default alphabet.")
    parser.add_argument("--no-color", action="store_true", help="Disable colored hint labels.")
    parser.add_argument("--verbose", action="store_true", help="Log collection and activation details.")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    path = Path(args.path)
    if not path.is_file():
        raise SystemExit(f"File not found: {path}")

    if args.save_keys and args.keys is None:
        raise SystemExit("--save-keys needs --keys.")

    settings = load_hint_settings()
    if args.keys is not None:
        if not is_valid_hint_keys(args.keys):
            raise SystemExit("--keys needs at least two distinct non-space characters.")
        if args.save_keys:
            save_hint_keys(args.keys)
        settings = HintSettings(
            keys=args.keys,
            style=settings.style,
            single_candidate_jump=settings.single_candidate_jump,
        )

    variant = Variant(args.variant)
    buffer = build_buffer(read_text(path), variant)
    lines = args.lines if args.lines is not None else _default_visible_lines()
    viewport = buffer.line_range(args.start, lines)

    if args.list:
        sys.stdout.write(format_candidates(buffer, variant, build_primitives(buffer, viewport, [])))
        return

    raise SystemExit(run_interactive(buffer, variant, viewport, settings, args.no_color))


if __name__ == "__main__":
    main()
