# utils/lec_reader.py
# This file is part of LEC - A Logical Expression Rewriting Engine
#
# Reader for .lec expression files

from pathlib import Path
from typing import Union

from utils.logger import get_logger


class LecFormatError(Exception):
    """Exception raised when an input file cannot be read as expressions."""

    pass


def read_lec_file(filepath: Union[str, Path]) -> str:
    """Read the expressions of a .lec file.

    The content is returned as-is for the batch evaluator, which handles
    line splitting, comments and assignments itself.

    Args:
        filepath: Path to the .lec file

    Returns:
        File content

    Raises:
        LecFormatError: If the file is missing, unreadable or holds no expression
    """
    logger = get_logger()
    path = Path(filepath)

    if not path.exists():
        raise LecFormatError(f"Input file not found: {filepath}")

    logger.debug(f"Reading expression file: {filepath}")

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LecFormatError(f"Error reading input file: {e}") from e

    if not content.strip():
        raise LecFormatError(f"Input file is empty: {filepath}")

    return content


def write_steps(filepath: Union[str, Path], lines) -> int:
    """Write one line per step to filepath, returning the number written."""
    count = 0
    with open(filepath, "w", encoding="utf-8") as f:
        for line in lines:
            f.write(f"{line}\n")
            count += 1
    return count
