# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 João Tonini
"""
cligrader — Command-line history grading for Linux classrooms

Checks each student account's shell history for the commands shown in
lecture slides and reports a per-student score.
"""

__version__ = "0.2.0"
