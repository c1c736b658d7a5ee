# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 João Tonini
"""
Shell history collection.

Reads ``~/.bash_history`` plus any rotated ``~/.bash_history.*`` siblings
and drops the ``#1700000000`` timestamp lines bash writes when
HISTTIMEFORMAT is set.
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_FILE = '.bash_history'

TIMESTAMP_LINE = re.compile(r'^#[0-9]{9,}$')


@dataclass
class HistoryCorpus:
    """Cleaned, concatenated history of one student."""
    files: list[Path] = field(default_factory=list)
    text: str = ""

    @property
    def empty(self) -> bool:
        return not self.files


def find_history_files(home: Path | str, history_name: str = DEFAULT_HISTORY_FILE) -> list[Path]:
    """Primary history file first, then rotated siblings in glob order."""
    home = Path(home)
    files = []

    primary = home / history_name
    try:
        if primary.is_file():
            files.append(primary)
        files.extend(
            p for p in sorted(home.glob(f'{history_name}.*'))
            if p.is_file()
        )
    except OSError as e:
        logger.warning(f"Could not list history in {home}: {e}")
    return files


def strip_timestamps(text: str) -> str:
    """Remove bash timestamp marker lines."""
    return '\n'.join(
        line for line in text.split('\n')
        if not TIMESTAMP_LINE.match(line)
    )


def read_history(home: Path | str, history_name: str = DEFAULT_HISTORY_FILE) -> HistoryCorpus:
    """
    Collect a student's command history.

    Unreadable files are logged and skipped. A home directory without any
    history file gives an empty corpus rather than an error.
    """
    corpus = HistoryCorpus(files=find_history_files(home, history_name))

    chunks = []
    for path in corpus.files:
        try:
            chunks.append(path.read_text(encoding='utf-8', errors='replace'))
        except OSError as e:
            logger.warning(f"Skipping unreadable history file {path}: {e}")

    corpus.text = strip_timestamps('\n'.join(chunks))
    logger.debug(f"Read {len(corpus.files)} history files from {home}")
    return corpus
