# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 João Tonini
"""
cligrader Edu — Integer Point Allocation

Every lecture is worth the same budget (25 points) no matter how many
commands it requires. Each command is worth ``total // count`` points and
the leftover points go, one each, to the earliest commands the student
actually ran, in file order:

    3 commands, 25 points  ->  8 points each, 1 left over
    ran ls + whoami        ->  8 + 8 + 1 = 17
    ran pwd only           ->  8 + 1     = 9

A student who runs everything always gets exactly the budget.
"""

DEFAULT_TOTAL_POINTS = 25


def split_points(total: int, count: int) -> tuple[int, int]:
    """Return ``(base, remainder)`` for spreading ``total`` over ``count`` items."""
    if count < 1:
        raise ValueError("Cannot split points across zero requirements")
    base = total // count
    return base, total - base * count


def points_per_requirement(
    flags: list[bool],
    total: int = DEFAULT_TOTAL_POINTS,
) -> list[int]:
    """Points earned by each requirement, 0 for the ones not found."""
    base, remainder = split_points(total, len(flags))
    awarded = []
    extra = 0
    for found in flags:
        if not found:
            awarded.append(0)
            continue
        if extra < remainder:
            awarded.append(base + 1)
            extra += 1
        else:
            awarded.append(base)
    return awarded


def allocate_points(flags: list[bool], total: int = DEFAULT_TOTAL_POINTS) -> int:
    """Total integer score for one student's match flags."""
    return sum(points_per_requirement(flags, total))
