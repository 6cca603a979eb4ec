"""Files written by antdroid carry a marker so they can be replaced or removed safely.

A file is considered generated when it contains ``MARKER``. Only generated
files are ever deleted; files written by hand are left alone.
"""
import os
from ..cli_logger import logger

MARKER = "YOUR CHANGES WILL BE ERASED!"
HEADER = (
    "# This file is automatically generated.\n"
    "# Do not modify this file -- " + MARKER + "\n"
)


def is_generated(path):
    """Return True when ``path`` is a file whose marker follows the header comment."""
    if not os.path.isfile(path):
        return False
    try:
        with open(path, "r", encoding="utf-8", errors="ignore") as f:
            # A marker at offset 0 is not preceded by the header, so it was not written by us.
            return f.read().find(MARKER) > 0
    except OSError as e:
        logger.warning(f"Could not inspect {path}: {e}")
        return False


def write_generated(path, body=""):
    """Overwrite ``path`` with the generated header followed by ``body``."""
    with open(path, "w", encoding="utf-8") as f:
        f.write(HEADER + body)
    logger.verbose(f"Wrote generated file {path}")


def write_if_absent(path, body=""):
    """Create a generated file only when nothing exists at ``path`` yet."""
    if os.path.exists(path):
        return False
    write_generated(path, body)
    return True


def remove_if_generated(path):
    """Delete ``path`` if it is a generated file. Returns True when removed."""
    if not is_generated(path):
        return False
    os.remove(path)
    logger.verbose(f"Removed generated file {path}")
    return True
