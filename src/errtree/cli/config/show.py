# SPDX-FileCopyrightText: 2023-present Datadog, Inc. <dev@datadoghq.com>
#
# SPDX-License-Identifier: MIT
from __future__ import annotations

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from errtree.app.core import Application


@click.command(short_help='Show the contents of the config file')
@click.option('--effective', '-e', is_flag=True, help='Show the validated settings with defaults filled in instead')
@click.pass_obj
def show(app: Application, effective: bool):
    """Show the contents of the config file."""
    from rich.syntax import Syntax

    if effective:
        import tomli_w

        app.initialize()
        text = tomli_w.dumps(app.config.app.model_dump())
    else:
        text = app.config_file.read()

    app.print(Syntax(text.rstrip(), 'toml', background_color='default'))
