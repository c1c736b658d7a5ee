# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 João Tonini
"""
cligrader command line interface.

    cligrader grade <lecture|file.json> [--json] [--no-color]
    cligrader logins [--json]

Exit codes: 0 success, 1 no students matched the roster filter,
2 usage error, bad requirement file or missing external tool.
"""

import json
import logging
import os
from dataclasses import asdict

import click

from cligrader import __version__
from cligrader.collectors.lastlog import LastlogChecker, format_logins
from cligrader.collectors.roster import Roster
from cligrader.config import load_config
from cligrader.edu.grader import grade_roster
from cligrader.edu.report import format_reminder, format_table, rows_to_json
from cligrader.edu.requirements import (
    DEFAULT_SHARE_DIR,
    load_requirements,
    resolve_requirements_path,
)
from cligrader.errors import GraderError


def fail(error: GraderError):
    """Print a one-line diagnostic and exit with the error's code."""
    click.echo(f"ERROR: {error}", err=True)
    raise SystemExit(error.exit_code)


@click.group()
@click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False),
              help='Config file (default: ~/.config/cligrader/cligrader.toml)')
@click.option('-v', '--verbose', is_flag=True, help='Debug logging on stderr')
@click.version_option(__version__, prog_name='cligrader')
@click.pass_context
def cli(ctx, config_path, verbose):
    """Grade student shell history against lecture commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )
    ctx.ensure_object(dict)
    try:
        ctx.obj['config'] = load_config(config_path)
    except GraderError as e:
        fail(e)


@cli.command('grade')
@click.argument('requirements')
@click.option('--json', 'output_json', is_flag=True, help='Output as JSON')
@click.option('--no-color', is_flag=True, help='Disable colored output')
@click.pass_context
def grade(ctx, requirements, output_json, no_color):
    """Score every student against a lecture's required commands.

    \b
    REQUIREMENTS is a JSON file, or a lecture name looked up in the
    shared directory with .json appended:
      sudo cligrader grade 01-Introduction-to-Linux
      sudo cligrader grade ./lecture.json
    """
    config = ctx.obj['config']
    grading = config.get('grading', {})

    try:
        path = resolve_requirements_path(
            requirements, grading.get('share_dir', DEFAULT_SHARE_DIR))
        required = load_requirements(path)
        rows = grade_roster(
            Roster.from_config(config),
            required,
            total_points=grading.get('total_points', 25),
            history_name=grading.get('history_file', '.bash_history'),
        )
    except GraderError as e:
        fail(e)

    if output_json:
        click.echo(rows_to_json(rows))
        return

    color = not no_color and os.environ.get('NO_COLOR') != '1'
    click.echo(format_table(rows, color=color))
    click.echo(format_reminder(color=color))


@cli.command('logins')
@click.option('--json', 'output_json', is_flag=True, help='Output as JSON')
@click.pass_context
def logins(ctx, output_json):
    """Report whether each student has ever logged in."""
    config = ctx.obj['config']
    checker = LastlogChecker(command=config.get('logins', {}).get('command', 'lastlog'))

    try:
        checker.require()
        statuses = checker.check_all(Roster.from_config(config).students())
    except GraderError as e:
        fail(e)

    if output_json:
        click.echo(json.dumps([asdict(s) for s in statuses], indent=2))
        return

    click.echo(format_logins(statuses))


def main():
    cli(obj={})


if __name__ == '__main__':
    main()
