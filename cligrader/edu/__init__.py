# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 João Tonini
"""
cligrader Edu — Command History Grading

Scores students on whether their shell history shows the commands a
lecture asked them to run.
"""

from cligrader.edu.requirements import (
    Requirement,
    load_requirements,
    parse_requirements,
    resolve_requirements_path,
)
from cligrader.edu.matching import command_found, fuzzy_pattern
from cligrader.edu.scoring import allocate_points, split_points
from cligrader.edu.report import ScoreRow, format_table
from cligrader.edu.grader import grade_roster, grade_student

__all__ = [
    "Requirement",
    "load_requirements",
    "parse_requirements",
    "resolve_requirements_path",
    "command_found",
    "fuzzy_pattern",
    "allocate_points",
    "split_points",
    "ScoreRow",
    "format_table",
    "grade_roster",
    "grade_student",
]
