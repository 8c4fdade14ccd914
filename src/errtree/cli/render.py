# SPDX-FileCopyrightText: 2023-present Datadog, Inc. <dev@datadoghq.com>
#
# SPDX-License-Identifier: MIT
from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

if TYPE_CHECKING:
    from errtree.app.core import Application


@click.command(short_help='Render a serialized error tree')
@click.argument('source', type=click.File('r', encoding='utf-8'), default='-')
@click.option(
    '--format',
    '-f',
    'output_format',
    type=click.Choice(['text', 'json', 'rich']),
    help='The output format, defaults to the `format` setting',
)
@click.pass_obj
def render(app: Application, source: IO[str], output_format: str | None):
    """
    Render a serialized error tree read from SOURCE, or from standard input
    when SOURCE is omitted or `-`.
    """
    app.initialize()
    tree = app.load_error_tree(source)

    output_format = output_format or app.config.app.format
    if output_format == 'text':
        app.print_error_tree(tree)
    elif output_format == 'json':
        app.print(tree.to_json(app.config.app.json_indent), soft_wrap=True)
    else:
        from errtree.utils.rich import error_tree

        app.print(error_tree(tree))
