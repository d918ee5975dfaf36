"""Low level pnpm invocation."""

from __future__ import annotations

import shlex
import subprocess
from pathlib import Path

from monobump.errors import CommandError


def format_command(args: list[str]) -> str:
    """Render a pnpm invocation the way it would be typed in a shell."""
    return shlex.join(["pnpm", *args])


def run_pnpm(
    args: list[str],
    cwd: Path | None = None,
    *,
    check: bool = True,
    capture: bool = False,
) -> subprocess.CompletedProcess[str]:
    """Run a pnpm command.

    Output is streamed to the terminal unless ``capture`` is set, since
    install and publish are long running and may prompt for an OTP.

    Args:
        args: pnpm arguments (without 'pnpm').
        cwd: Working directory.
        check: Raise on non-zero exit code.
        capture: Capture stdout/stderr instead of inheriting them.

    Returns:
        Completed process result.

    Raises:
        CommandError: If pnpm is missing, or fails and check is True.
    """
    cmd = ["pnpm", *args]

    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=capture,
            text=True,
            check=False,
        )
    except FileNotFoundError as e:
        raise CommandError("pnpm is not installed", command=format_command(args)) from e

    if check and result.returncode != 0:
        detail = (result.stderr or "").strip() if capture else ""
        raise CommandError(
            detail or f"Command failed with exit code {result.returncode}",
            command=format_command(args),
            exit_code=result.returncode,
        )
    return result
