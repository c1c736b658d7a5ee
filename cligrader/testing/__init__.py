# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 João Tonini
"""
cligrader Mock Classroom for Testing

Provides a simulated lab host for unit testing the roster, history
reader, grading pipeline and CLI without real student accounts.

Usage:
    from cligrader.testing import MockClassroom

    with MockClassroom() as room:
        # room.passwd_file is a passwd(5) file with the mock accounts
        # room.requirements_path is a lecture JSON file
        # room.config_path is a cligrader.toml pointing at both
        roster = Roster.from_config(room.config)
"""

from __future__ import annotations

import json
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Generator, Optional
from unittest.mock import MagicMock, patch


@dataclass
class MockAccount:
    """A simulated local account."""
    name: str
    uid: int
    history: Optional[list[str]] = None   # None: no history file at all
    rotated: list[list[str]] = field(default_factory=list)
    lastlog: str = ""                      # Last line lastlog prints

    def passwd_line(self, home: Path) -> str:
        return f"{self.name}:x:{self.uid}:{self.uid}::{home}:/bin/bash"


@dataclass
class MockClassroom:
    """
    A simulated classroom host for testing.

    Creates:
    - Temporary home directories with .bash_history files
    - A passwd file with students, service and system accounts
    - A lecture requirements JSON file
    - A cligrader.toml pointing at all of the above
    - Subprocess mocks for lastlog
    """
    requirements: list[dict[str, Any]] = field(default_factory=lambda: [
        {"slide": 1, "command": "ls"},
        {"slide": 2, "command": "pwd"},
        {"slide": 3, "command": "whoami"},
    ])
    accounts: list[MockAccount] = field(default_factory=lambda: [
        MockAccount("root", 0, history=["ls", "pwd", "whoami"]),
        MockAccount("ec2-user", 1000, history=["ls", "pwd", "whoami"],
                    lastlog="ec2-user pts/0 10.0.0.1 Mon Oct  5 09:12:44 +0000 2026"),
        MockAccount("alice", 1001, history=["#1700000000", "ls -la", "ls", "#1700000001", "pwd", "whoami"],
                    lastlog="alice    pts/1 10.0.0.7 Tue Oct  6 13:02:10 +0000 2026"),
        MockAccount("bob", 1002, history=["ls", "cat /etc/os-release"], rotated=[["whoami"]],
                    lastlog="bob                                        **Never logged in**"),
        MockAccount("carol", 1003, history=None),
        MockAccount("dave", 1004, history=["pwdx 1", "lscpu"]),
        MockAccount("bastion", 1050, history=["ls"]),
        MockAccount("guest", 2000, history=["ls"]),
    ])
    total_points: int = 25

    # Internal state
    _temp_dir: Optional[tempfile.TemporaryDirectory] = field(default=None, repr=False)

    def __enter__(self) -> 'MockClassroom':
        self._temp_dir = tempfile.TemporaryDirectory()
        self._setup_homes()
        self._write_passwd()
        self._write_requirements()
        self._write_config()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._temp_dir:
            self._temp_dir.cleanup()

    @property
    def root(self) -> Path:
        return Path(self._temp_dir.name)

    @property
    def passwd_file(self) -> Path:
        return self.root / "passwd"

    @property
    def share_dir(self) -> Path:
        return self.root / "share"

    @property
    def requirements_path(self) -> Path:
        return self.share_dir / "lecture.json"

    @property
    def config_path(self) -> Path:
        return self.root / "cligrader.toml"

    @property
    def config(self) -> dict[str, Any]:
        """Return a config dict suitable for cligrader components."""
        return {
            "grading": {
                "total_points": self.total_points,
                "share_dir": str(self.share_dir),
                "history_file": ".bash_history",
            },
            "roster": {
                "uid_min": 1000,
                "uid_max": 1099,
                "exclude": ["ec2-user", "bastion"],
                "passwd_file": str(self.passwd_file),
            },
            "logins": {"command": "lastlog"},
        }

    def home(self, name: str) -> Path:
        return self.root / "home" / name

    def _setup_homes(self):
        """Create home directories and history files."""
        for account in self.accounts:
            home = self.home(account.name)
            home.mkdir(parents=True)
            if account.history is not None:
                (home / ".bash_history").write_text("\n".join(account.history) + "\n")
            for n, lines in enumerate(account.rotated, start=1):
                (home / f".bash_history.{n}").write_text("\n".join(lines) + "\n")

    def _write_passwd(self):
        lines = [a.passwd_line(self.home(a.name)) for a in self.accounts]
        self.passwd_file.write_text("\n".join(lines) + "\n")

    def _write_requirements(self):
        self.share_dir.mkdir()
        self.requirements_path.write_text(json.dumps(self.requirements, indent=2))

    def _write_config(self):
        self.config_path.write_text(
            "[grading]\n"
            f"total_points = {self.total_points}\n"
            f'share_dir = "{self.share_dir}"\n'
            "\n[roster]\n"
            f'passwd_file = "{self.passwd_file}"\n'
        )

    def lastlog_output(self, name: str) -> str:
        """Generate lastlog -u output for one account."""
        account = next((a for a in self.accounts if a.name == name), None)
        if account is None or not account.lastlog:
            return ""
        return "Username         Port     From             Latest\n" + account.lastlog + "\n"

    @contextmanager
    def mock_lastlog(self) -> Generator[None, None, None]:
        """Context manager that mocks lastlog lookups and its PATH check."""
        def mock_run(cmd, *args, **kwargs):
            result = MagicMock()
            result.returncode = 0
            result.stdout = self.lastlog_output(cmd[-1])
            return result

        with patch("subprocess.run", side_effect=mock_run), \
                patch("shutil.which", return_value="/usr/bin/lastlog"):
            yield
