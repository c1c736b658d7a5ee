# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 João Tonini
"""
Whitespace-tolerant command matching.

A required command is turned into a regular expression that accepts any
run of whitespace between its words and must stand alone as a token:
``ls`` matches ``cd /tmp; ls`` but not ``lscpu``.
"""

import logging
import re

logger = logging.getLogger(__name__)

# Start of text, ';' or whitespace on both sides
_LEFT_BOUNDARY = r'(?<![^;\s])'
_RIGHT_BOUNDARY = r'(?![^;\s])'


def fuzzy_pattern(command: str) -> re.Pattern:
    """Compile the token-bounded, whitespace-tolerant pattern for a command."""
    words = [re.escape(word) for word in command.split()]
    return re.compile(_LEFT_BOUNDARY + r'\s+'.join(words) + _RIGHT_BOUNDARY)


def command_found(command: str, corpus: str) -> bool:
    """Return True if ``command`` occurs anywhere in ``corpus``.

    Matching is case-sensitive and runs over the whole corpus, not line by
    line. A pattern that fails to compile counts as not found.
    """
    try:
        pattern = fuzzy_pattern(command)
    except re.error as e:
        logger.warning(f"Could not build pattern for {command!r}: {e}")
        return False
    return pattern.search(corpus) is not None


def match_commands(commands: list[str], corpus: str) -> list[bool]:
    """Test every command against one corpus, preserving order."""
    return [command_found(command, corpus) for command in commands]
