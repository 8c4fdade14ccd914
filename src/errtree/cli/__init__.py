# SPDX-FileCopyrightText: 2023-present Datadog, Inc. <dev@datadoghq.com>
#
# SPDX-License-Identifier: MIT
import os
import sys

import click

from errtree._version import __version__
from errtree.cli.config import config
from errtree.cli.convert import convert
from errtree.cli.render import render
from errtree.config.file import CONFIG_ENV_VAR


def _color_from_env() -> bool | None:
    # https://no-color.org
    if os.environ.get('NO_COLOR') == '1':
        return False
    elif os.environ.get('FORCE_COLOR') == '1':
        return True

    return None


@click.group(context_settings={'help_option_names': ['-h', '--help']}, invoke_without_command=True)
@click.option(
    '--color/--no-color',
    default=None,
    help='Whether or not to display colored output (default is auto-detection) [env vars: `FORCE_COLOR`/`NO_COLOR`]',
)
@click.option(
    '--config',
    'config_file_path',
    envvar=CONFIG_ENV_VAR,
    help=f'The path to a custom config file to use [env var: `{CONFIG_ENV_VAR}`]',
)
@click.version_option(version=__version__, prog_name='errtree')
@click.pass_context
def errtree(ctx: click.Context, color, config_file_path):
    """
    Render and convert serialized error trees.
    """
    from errtree.app.core import Application
    from errtree.config.file import ConfigFile
    from errtree.mishap import Mishap
    from errtree.utils.fs import Path

    config_file = ConfigFile(Path(config_file_path).resolve() if config_file_path else None)
    app = Application(config_file, _color_from_env() if color is None else color)

    if not ctx.invoked_subcommand:
        click.echo(ctx.get_help())
        return

    # Persist app for sub-commands
    ctx.obj = app

    # Only the default location is created on demand, a custom path must already exist
    try:
        config_file.load(create=not config_file_path)
    except Mishap as e:
        app.abort(e)


errtree.add_command(config)
errtree.add_command(convert)
errtree.add_command(render)


def main():  # no cov
    try:
        return errtree(prog_name='errtree', windows_expand_args=False)
    except Exception as e:
        from errtree.tree import ErrorTree

        if isinstance(e, ErrorTree):
            import logging

            from errtree.utils.log import log_error_tree

            log_error_tree(logging.getLogger('errtree'), e)
            return 1

        from rich.console import Console

        suppressed_modules = []
        if not getattr(sys, 'frozen', False):
            suppressed_modules.append(click)

        console = Console()
        console.print_exception(suppress=suppressed_modules)
        return 1
