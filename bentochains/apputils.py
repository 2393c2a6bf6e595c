"""Small helpers for the command line application: shell execution and strings."""

from __future__ import annotations

import os
import stat
import string
import subprocess
from pathlib import Path
from typing import Sequence

DEFAULT_SEPARATOR = ","

_TRAILING_WHITESPACE = " \t\n\r\f\v"
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def execute_shell_command(command: str) -> str:
    """Run an executable script through the shell and return its standard output.

    Raises ValueError if the file does not exist and RuntimeError if it is not
    executable or exits with a non-zero status.
    """
    path = Path(command)
    if not path.exists():
        raise ValueError(f"Executable {command} not found")
    mode = path.stat().st_mode
    if not mode & (stat.S_IXUSR | stat.S_IXGRP):
        raise RuntimeError(f"Executable file {command} lacking executable flags")
    try:
        completed = subprocess.run(
            command, shell=True, stdout=subprocess.PIPE, check=False
        )
    except OSError as exc:
        raise RuntimeError("Failed to open pipe for command execution") from exc
    output = completed.stdout.decode(errors="replace")
    # A negative return code means the process was killed by a signal.
    exit_code = completed.returncode if completed.returncode >= 0 else -1
    if exit_code != 0:
        raise RuntimeError(
            f"Command script exited with {exit_code}\nScript output:\n{output}"
        )
    return output


def trim(text: str) -> str:
    """Remove trailing whitespace."""
    return text.rstrip(_TRAILING_WHITESPACE)


def split_by_linefeed(text: str) -> list[str]:
    """Split text into lines at each line feed."""
    return split_str(text, "\n")


def split_str(text: str, delim: str = DEFAULT_SEPARATOR) -> list[str]:
    """Split text at every occurrence of the delimiter."""
    return text.split(delim)


def key_script_in_bin_dir(argv0: str) -> str:
    """Default path of the API key script relative to the executable's directory."""
    bin_dir = os.path.dirname(argv0)
    return bin_dir + "/../scripts/getkey.sh"


def get_key_script(argv: Sequence[str]) -> str:
    """Key script from the first argument, or the default next to the executable."""
    if len(argv) > 1:
        return argv[1]
    return key_script_in_bin_dir(argv[0])


def executable_name(argv0: str) -> str:
    """File name part of the executable path."""
    return os.path.basename(argv0)


def to_lower(text: str) -> str:
    """Lower-case ASCII letters, leaving all other characters unchanged."""
    return text.translate(_TO_LOWER)


def to_upper(text: str) -> str:
    """Upper-case ASCII letters, leaving all other characters unchanged."""
    return text.translate(_TO_UPPER)