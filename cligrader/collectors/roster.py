# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 João Tonini
"""
cligrader Roster Collector

Builds the class roster from the account database. Students are the
local accounts whose UID falls in the configured range, minus service
accounts such as ec2-user and the bastion login.

Configuration (cligrader.toml):
    [roster]
    uid_min = 1000
    uid_max = 1099
    exclude = ["ec2-user", "bastion"]   # Regex patterns searched in the name
    passwd_file = ""                    # Parse this file instead of the
                                        # system database (testing, exports)
"""

from __future__ import annotations

import logging
import pwd
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Optional

from cligrader.errors import InvalidInputError, NoStudentsFoundError

logger = logging.getLogger(__name__)

DEFAULT_EXCLUDE = ("ec2-user", "bastion")


@dataclass
class Student:
    """A student account from the roster."""
    name: str
    uid: int
    home: Optional[str] = None


@dataclass
class PasswdEntry:
    """The fields of a passwd(5) line the roster needs."""
    name: str
    uid: int
    home: str


def parse_passwd(text: str) -> list[PasswdEntry]:
    """Parse passwd(5) text into entries.

    Each line has format: name:password:uid:gid:gecos:home:shell
    Blank, commented, short or non-numeric-uid lines are skipped.
    """
    entries = []
    for line in text.split('\n'):
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        parts = line.split(':')
        if len(parts) < 7:
            continue
        try:
            uid = int(parts[2])
        except ValueError:
            continue
        entries.append(PasswdEntry(name=parts[0], uid=uid, home=parts[5]))
    return entries


class Roster:
    """Enumerate students and resolve their home directories.

    Both operations go through the same source: either a passwd-format
    file, or the system database through the ``pwd`` module.
    """

    def __init__(
        self,
        uid_min: int = 1000,
        uid_max: int = 1099,
        exclude: Iterable[str] = DEFAULT_EXCLUDE,
        passwd_file: Path | str | None = None,
    ):
        self.uid_min = uid_min
        self.uid_max = uid_max
        self._exclude = [re.compile(p) for p in exclude]
        self.passwd_file = Path(passwd_file) if passwd_file else None

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> 'Roster':
        """Build a roster from the ``[roster]`` config section."""
        section = config.get('roster', {})
        return cls(
            uid_min=section.get('uid_min', 1000),
            uid_max=section.get('uid_max', 1099),
            exclude=section.get('exclude', DEFAULT_EXCLUDE),
            passwd_file=section.get('passwd_file') or None,
        )

    # ── Account source ───────────────────────────────────────────────

    def _entries(self) -> list[PasswdEntry]:
        if self.passwd_file is None:
            return [
                PasswdEntry(name=p.pw_name, uid=p.pw_uid, home=p.pw_dir)
                for p in pwd.getpwall()
            ]
        return parse_passwd(self.passwd_file.read_text(errors='replace'))

    def _lookup(self, name: str) -> Optional[PasswdEntry]:
        if self.passwd_file is None:
            try:
                p = pwd.getpwnam(name)
            except KeyError:
                return None
            return PasswdEntry(name=p.pw_name, uid=p.pw_uid, home=p.pw_dir)
        try:
            entries = self._entries()
        except OSError as e:
            logger.warning(f"Could not read {self.passwd_file}: {e}")
            return None
        return next((e for e in entries if e.name == name), None)

    # ── Filtering ────────────────────────────────────────────────────

    def is_student(self, entry: PasswdEntry) -> bool:
        """Check the UID range and the exclusion patterns."""
        if not self.uid_min <= entry.uid <= self.uid_max:
            return False
        return not any(p.search(entry.name) for p in self._exclude)

    def students(self) -> list[Student]:
        """
        List student accounts in database order.

        Raises:
            InvalidInputError: if the configured passwd file is unreadable
            NoStudentsFoundError: if no account passes the filter
        """
        try:
            entries = self._entries()
        except OSError as e:
            raise InvalidInputError(
                f"Cannot read {self.passwd_file}: {e}") from e

        students = [
            Student(name=e.name, uid=e.uid)
            for e in entries
            if self.is_student(e)
        ]
        if not students:
            source = self.passwd_file or 'the system account database'
            raise NoStudentsFoundError(
                f"No students matched UID {self.uid_min}-{self.uid_max}"
                f" in {source}.")
        logger.info(f"Roster has {len(students)} students")
        return students

    def lookup(self, name: str) -> Optional[PasswdEntry]:
        """Re-read a student's account entry, or None if it is gone."""
        entry = self._lookup(name)
        if entry is None:
            logger.warning(f"No passwd entry for {name}")
        return entry

    def home_for(self, name: str) -> Optional[str]:
        """Resolve a student's home directory, or None if the lookup fails."""
        entry = self.lookup(name)
        if entry is None:
            return None
        return entry.home or None
