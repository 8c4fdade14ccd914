# SPDX-FileCopyrightText: 2023-present Datadog, Inc. <dev@datadoghq.com>
#
# SPDX-License-Identifier: MIT
from __future__ import annotations

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from errtree.app.core import Application


@click.command('set', short_help='Assign values to config file entries')
@click.argument('key')
@click.argument('value', required=False)
@click.pass_obj
def set_value(app: Application, key: str, value: str | None):
    """
    Assign VALUE to the dotted KEY, prompting for it when omitted.

    The settings are validated before anything is saved, and known settings are
    stored with their validated type so that e.g. `json_indent` is written as a number.
    """
    from errtree.mishap import Mishap
    from errtree.models.config.app import AppConfig

    if value is None:
        value = click.prompt(f'Value for `{key}`')

    config = app.config_file.model
    config.set_field(key, value)

    if errors := app.config_errors():
        app.abort(Mishap.from_error_trees_and_msg(f'Unable to set `{key}`', [Mishap.from_msg(e) for e in errors]))

    if key in AppConfig.model_fields:
        config.set_field(key, getattr(config.app, key))

    app.config_file.save()
