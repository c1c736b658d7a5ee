# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 João Tonini
"""
cligrader Edu — Grading Pipeline

Runs each student through history collection, command matching and point
allocation. A student that cannot be graded (no passwd entry, empty home
field, no history) still gets a row with zero points and a reason; only
the roster itself can fail the run.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from cligrader.collectors.history import DEFAULT_HISTORY_FILE, read_history
from cligrader.collectors.roster import Roster, Student
from cligrader.edu.matching import match_commands
from cligrader.edu.report import ScoreRow
from cligrader.edu.requirements import Requirement
from cligrader.edu.scoring import DEFAULT_TOTAL_POINTS, allocate_points

logger = logging.getLogger(__name__)

NO_PASSWD_ENTRY = "no passwd entry"
NO_HOME_DIRECTORY = "no home directory"
NO_HISTORY_FILES = "no history files"


def _zero_row(student: str, requirements: list[Requirement], reason: str) -> ScoreRow:
    return ScoreRow(
        student=student,
        found=0,
        total=len(requirements),
        points=0,
        reason=reason,
    )


def grade_corpus(
    student: str,
    requirements: list[Requirement],
    corpus: str,
    total_points: int = DEFAULT_TOTAL_POINTS,
) -> ScoreRow:
    """Score one student's cleaned history text."""
    flags = match_commands([r.command for r in requirements], corpus)
    return ScoreRow(
        student=student,
        found=sum(flags),
        total=len(requirements),
        points=allocate_points(flags, total_points),
        missing_slides=[r.slide for r, found in zip(requirements, flags) if not found],
    )


def grade_student(
    student: Student,
    requirements: list[Requirement],
    total_points: int = DEFAULT_TOTAL_POINTS,
    history_name: str = DEFAULT_HISTORY_FILE,
) -> ScoreRow:
    """Grade one resolved student."""
    if not student.home:
        return _zero_row(student.name, requirements, NO_HOME_DIRECTORY)

    corpus = read_history(student.home, history_name)
    if corpus.empty:
        logger.info(f"{student.name}: no history files in {student.home}")
        return _zero_row(student.name, requirements, NO_HISTORY_FILES)

    row = grade_corpus(student.name, requirements, corpus.text, total_points)
    logger.debug(f"{student.name}: {row.ratio} commands, {row.points} points")
    return row


def grade_roster(
    roster: Roster,
    requirements: list[Requirement],
    total_points: int = DEFAULT_TOTAL_POINTS,
    history_name: str = DEFAULT_HISTORY_FILE,
    students: Optional[list[Student]] = None,
) -> list[ScoreRow]:
    """
    Grade every student on the roster, in roster order.

    Args:
        roster: Account source used for enumeration and home lookup
        requirements: Validated, non-empty requirement list
        total_points: Budget a student earns by running every command
        history_name: Primary history file name inside each home
        students: Pre-enumerated students; enumerated from ``roster``
            when omitted

    Raises:
        NoStudentsFoundError: if the roster is empty
    """
    if students is None:
        students = roster.students()

    rows = []
    for student in students:
        entry = roster.lookup(student.name)
        if entry is None:
            rows.append(_zero_row(student.name, requirements, NO_PASSWD_ENTRY))
            continue
        resolved = replace(student, home=entry.home or None)
        rows.append(grade_student(resolved, requirements, total_points, history_name))
    return rows
