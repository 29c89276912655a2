"""Components that read files, directories and command output."""

from __future__ import annotations

import os
import subprocess

from .util import BUFFER_SIZE, read_first_line, warn

_LINE_LIMIT = BUFFER_SIZE - 2


def cat(path: str) -> str | None:
    """Return the first line of a file, or None if it is empty."""
    try:
        line = read_first_line(path)
    except OSError as exc:
        warn(f"fopen '{path}':", exc)
        return None
    return line or None


def num_files(path: str) -> str | None:
    """Count the entries of a directory."""
    try:
        entries = os.listdir(path)
    except OSError as exc:
        warn(f"opendir '{path}':", exc)
        return None
    return str(len(entries))


def run_command(cmd: str) -> str | None:
    """Run a shell command and return the first line of its output."""
    try:
        with subprocess.Popen(
            cmd,
            shell=True,
            stdout=subprocess.PIPE,
            text=True,
            errors="replace",
        ) as proc:
            line = proc.stdout.readline(_LINE_LIMIT)
            proc.stdout.close()
            proc.wait()
    except OSError as exc:
        warn(f"popen '{cmd}':", exc)
        return None
    if line.endswith("\n"):
        line = line[:-1]
    return line or None