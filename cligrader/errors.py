# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 João Tonini
"""Run-level errors raised by cligrader components.

Only input validation and roster enumeration fail a whole run. Everything
else degrades to a per-student row in the report.
"""


class GraderError(Exception):
    """Base class for fatal cligrader errors."""

    exit_code = 2


class InvalidInputError(GraderError):
    """Requirement file is missing, unparseable or malformed."""

    exit_code = 2


class ToolUnavailableError(GraderError):
    """A required external command is not installed."""

    exit_code = 2


class NoStudentsFoundError(GraderError):
    """The roster filter matched no accounts."""

    exit_code = 1
