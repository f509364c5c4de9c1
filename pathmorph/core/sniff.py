"""
sniff.py - File Type Guessing

Asks the `file` program which extensions fit a file's contents.
"""

import logging
import subprocess
from pathlib import Path
from typing import Optional, Union, TYPE_CHECKING

from .errors import ExternalToolFailure

if TYPE_CHECKING:
    from .config import EngineConfig

logger = logging.getLogger(__name__)

NO_GUESS = "(null)"
UNKNOWN_GUESS = "???"


def parse_guess(output: str, path: str, fallback: str) -> str:
    """
    Parse `path: ext1/ext2/...` into the first extension with its dot

    Args:
        output: Program output
        path: Path the program was asked about
        fallback: Returned when the program answers "???"

    Returns:
        ".ext", "" for no extension, or fallback
    """
    line = output.strip().splitlines()[0] if output.strip() else ""
    prefix = f"{path}:"
    if line.startswith(prefix):
        answer = line[len(prefix):]
    else:
        answer = line.rpartition(": ")[2]
    first = answer.strip().split("/")[0].strip()

    if first == NO_GUESS or not first:
        return ""
    if first == UNKNOWN_GUESS:
        return fallback
    return "." + first


def guess_ext(path: Union[str, Path], config: Optional["EngineConfig"] = None) -> str:
    """Guess the extension of a file from its contents"""
    command = config.sniff_command if config is not None else "file"
    fallback = config.fallback_extension if config is not None else ".mp4"
    path = str(path)
    args = [command, "--extension", "--", path]

    try:
        out = subprocess.run(args, capture_output=True, text=True)
    except OSError as e:
        raise ExternalToolFailure(" ".join(args), -1, str(e)) from e

    if out.returncode != 0:
        raise ExternalToolFailure(" ".join(args), out.returncode, out.stderr)

    guess = parse_guess(out.stdout, path, fallback)
    logger.debug("Guessed extension for %s: %r", path, guess)
    return guess
