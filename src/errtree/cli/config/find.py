# SPDX-FileCopyrightText: 2023-present Datadog, Inc. <dev@datadoghq.com>
#
# SPDX-License-Identifier: MIT
from __future__ import annotations

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from errtree.app.core import Application


@click.command(short_help='Show the location of the config file')
@click.option('--directory', '-d', is_flag=True, help='Show the directory containing the config file instead')
@click.pass_obj
def find(app: Application, directory: bool):
    """Show the location of the config file."""
    path = app.config_file.path.parent if directory else app.config_file.path
    app.print(str(path), soft_wrap=True)
