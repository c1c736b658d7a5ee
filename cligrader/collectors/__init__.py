# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 João Tonini
"""
cligrader Collectors

Read-only access to the host: the account roster, shell history files
and last-login records.
"""

from .roster import Roster, Student, parse_passwd
from .history import HistoryCorpus, read_history
from .lastlog import LastlogChecker, LoginStatus, format_logins

__all__ = [
    'Roster', 'Student', 'parse_passwd',
    'HistoryCorpus', 'read_history',
    'LastlogChecker', 'LoginStatus', 'format_logins',
]
