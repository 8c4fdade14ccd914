# SPDX-FileCopyrightText: 2023-present Datadog, Inc. <dev@datadoghq.com>
#
# SPDX-License-Identifier: MIT
from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

if TYPE_CHECKING:
    from errtree.app.core import Application


@click.command(short_help='Normalize a serialized error tree')
@click.argument('source', type=click.File('r', encoding='utf-8'), default='-')
@click.option('--indent', '-i', type=click.IntRange(min=0), help='Defaults to the `json_indent` setting, 0 is compact')
@click.option('--output', '-o', 'output_path', help='Write to this file rather than standard output')
@click.pass_obj
def convert(app: Application, source: IO[str], indent: int | None, output_path: str | None):
    """Decode the error tree read from SOURCE and encode it again."""
    app.initialize()
    tree = app.load_error_tree(source)

    content = tree.to_json(app.config.app.json_indent if indent is None else indent)
    if output_path is None:
        app.print(content, soft_wrap=True)
    else:
        from errtree.mishap import Mishap, wrap_error
        from errtree.utils.fs import Path

        path = Path(output_path).resolve()
        try:
            with wrap_error(lambda: f'Unable to write `{path}`'):
                path.write_atomic(f'{content}\n')
        except Mishap as e:
            app.abort(e)
