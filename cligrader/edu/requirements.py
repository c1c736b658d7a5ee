# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 João Tonini
"""
cligrader Edu — Lecture Requirement Loading

A requirement file lists the commands a lecture expects students to run,
each tagged with the slide that introduces it:

    [
      {"slide": 9, "command": "systemctl list-units --type=service --all"},
      {"slide": 14, "command": "uname -r"}
    ]

The file order matters: it decides which matched commands receive the
leftover points and the order of the missing-slide list.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from cligrader.errors import InvalidInputError

logger = logging.getLogger(__name__)

DEFAULT_SHARE_DIR = Path('/usr/local/share/cli_grader')


@dataclass(frozen=True)
class Requirement:
    """One command a student must show having run."""
    slide: int
    command: str


def resolve_requirements_path(
    name: str,
    share_dir: Path | str = DEFAULT_SHARE_DIR,
) -> Path:
    """Resolve a CLI argument to a requirement file.

    An existing path is used as-is. Anything else is treated as a lecture
    name inside the shared directory, e.g. ``01-Introduction-to-Linux``
    becomes ``<share_dir>/01-Introduction-to-Linux.json``.
    """
    path = Path(name)
    if not path.is_file():
        path = Path(share_dir) / f"{name}.json"
    if not path.is_file():
        raise InvalidInputError(f"File not found: {path}")
    return path


def _parse_slide(value) -> int | None:
    # bool is an int subclass; true/false are not slide numbers
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str) and value.strip().isdecimal():
        slide = int(value.strip())
        return slide if slide > 0 else None
    return None


def parse_requirements(text: str, source: str = "<string>") -> list[Requirement]:
    """
    Parse and validate requirement JSON.

    Args:
        text: JSON document
        source: Name used in error messages

    Returns:
        Requirements in file order

    Raises:
        InvalidInputError: if the document is not a non-empty array of
            {slide, command} objects. A single bad row rejects the file.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidInputError(f"{source} is not valid JSON: {e}") from e

    if not isinstance(data, list) or not data:
        raise InvalidInputError(
            "JSON must be a non-empty array of {slide, command} objects.")

    requirements = []
    for index, row in enumerate(data):
        if not isinstance(row, dict):
            raise InvalidInputError(
                f"Bad row in JSON (expected slide+command): {json.dumps(row)}")

        slide = _parse_slide(row.get('slide'))
        command = row.get('command')
        if slide is None or not isinstance(command, str) or not command.strip():
            raise InvalidInputError(
                f"Bad row in JSON (expected slide+command): {json.dumps(row)}")

        requirements.append(Requirement(slide=slide, command=command))

    logger.debug(f"Parsed {len(requirements)} requirements from {source}")
    return requirements


def load_requirements(path: Path | str) -> list[Requirement]:
    """Read and validate a requirement file."""
    path = Path(path)
    try:
        text = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidInputError(f"Cannot read {path}: {e}") from e
    return parse_requirements(text, source=str(path))
