# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 João Tonini
"""
cligrader Login Check

Reports whether each student has ever logged in, using ``lastlog``.
``lastlog -u <user>`` prints a header and one line per user; the last
line is kept as evidence.

Configuration (cligrader.toml):
    [logins]
    command = "lastlog"
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass
from typing import Optional

from cligrader.collectors.roster import Student
from cligrader.errors import ToolUnavailableError

logger = logging.getLogger(__name__)

NEVER_LOGGED_IN = "Never logged in"

YES = "YES"
NO = "NO"
UNKNOWN = "UNKNOWN"


@dataclass
class LoginStatus:
    """Login evidence for one student."""
    student: str
    state: str
    detail: str


def classify(student: str, line: str) -> LoginStatus:
    """Turn the last line of lastlog output into a login status."""
    if not line:
        return LoginStatus(student, UNKNOWN, "lastlog produced no output")
    if NEVER_LOGGED_IN in line:
        return LoginStatus(student, NO, "-")
    return LoginStatus(student, YES, line)


class LastlogChecker:
    """Query the last-login record for students."""

    def __init__(self, command: str = "lastlog", timeout: int = 10):
        self.command = command
        self.timeout = timeout

    def available(self) -> bool:
        return shutil.which(self.command) is not None

    def require(self) -> None:
        """Raise ToolUnavailableError if the lastlog command is missing."""
        if not self.available():
            raise ToolUnavailableError(
                f"{self.command} is required but not installed.")

    def _run_cmd(self, user: str) -> Optional[str]:
        """Run lastlog for one user. Returns stdout or None."""
        try:
            result = subprocess.run(
                [self.command, "-u", user],
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug(f"Command failed: {self.command} -u {user}: {e}")
            return None
        return result.stdout

    def check(self, student: Student) -> LoginStatus:
        output = self._run_cmd(student.name) or ""
        lines = [line for line in output.strip().split('\n') if line.strip()]
        return classify(student.name, lines[-1].strip() if lines else "")

    def check_all(self, students: list[Student]) -> list[LoginStatus]:
        return [self.check(s) for s in students]


def format_logins(statuses: list[LoginStatus]) -> str:
    """Render the login table."""
    lines = [
        "{:<18} {:>9}  {}".format("STUDENT", "LOGGED_IN", "DETAILS"),
        "{:<18} {:>9}  {}".format("-" * 18, "-" * 9, "-" * 46),
    ]
    for s in statuses:
        lines.append("{:<18} {:>9}  {}".format(s.student, s.state, s.detail))
    return '\n'.join(lines)
