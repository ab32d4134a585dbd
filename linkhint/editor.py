"""Editor launch helper for compilation-output jumps.

Runs ``$EDITOR +LINE FILE`` and returns an error message string instead of
raising, so the CLI can print it.
"""

from __future__ import annotations

import os
import shlex
import subprocess

from .surface.markup import SourceLocation


def launch_editor(location: SourceLocation) -> str | None:
    editor_env = os.environ.get("EDITOR", "").strip()
    if not editor_env:
        return "Cannot jump: $EDITOR is not set."
    cmd = shlex.split(editor_env)
    if not cmd:
        return "Cannot jump: $EDITOR is empty."

    try:
        subprocess.run([*cmd, f"+{location.line}", location.path], check=False)
    except Exception as exc:
        return f"Failed to launch editor: {exc}"
    return None
