# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 João Tonini
"""
Score report formatting.

One row per student, in roster order:

    STUDENT              FOUND  POINTS  SLIDE FOR MISSING COMMAND
    ------------------   -----  ------  ------------------------------
    alice                  3/3      25  (none)
    bob                    2/3      17  slide 2
    carol                  0/3       0  no history files
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Optional

import click

REMINDER = (
    "Be sure to run the command below after each command line attempt:",
    "history -w",
)

ROW_FORMAT = "{:<18} {:>7} {:>7}  {}"


@dataclass
class ScoreRow:
    """Final grading result for one student."""
    student: str
    found: int
    total: int
    points: int
    missing_slides: list[int] = field(default_factory=list)
    reason: Optional[str] = None

    @property
    def ratio(self) -> str:
        return f"{self.found}/{self.total}"

    def missing_text(self) -> str:
        """Reason, missing slide list, or ``(none)``."""
        if self.reason:
            return self.reason
        if not self.missing_slides:
            return "(none)"
        return " | ".join(f"slide {n}" for n in self.missing_slides)

    def as_dict(self) -> dict:
        return {
            "student": self.student,
            "found": self.found,
            "total": self.total,
            "points": self.points,
            "missing_slides": self.missing_slides,
            "reason": self.reason,
        }


def format_row(row: ScoreRow) -> str:
    return ROW_FORMAT.format(row.student, row.ratio, row.points, row.missing_text())


def format_table(rows: list[ScoreRow], color: bool = False) -> str:
    """Render the header, separator and one line per student."""
    header = ROW_FORMAT.format("STUDENT", "FOUND", "POINTS", "SLIDE FOR MISSING COMMAND")
    rule = ROW_FORMAT.format("-" * 18, "-" * 5, "-" * 6, "-" * 30)
    if color:
        header = click.style(header, fg="bright_blue")
        rule = click.style(rule, fg="bright_blue")

    lines = [header, rule]
    lines.extend(format_row(row) for row in rows)
    return '\n'.join(lines)


def format_reminder(color: bool = False) -> str:
    lines = [click.style(line, italic=True) if color else line for line in REMINDER]
    return '\n' + '\n'.join(lines)


def rows_to_json(rows: list[ScoreRow]) -> str:
    return json.dumps([row.as_dict() for row in rows], indent=2)
