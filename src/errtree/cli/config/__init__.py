# SPDX-FileCopyrightText: 2023-present Datadog, Inc. <dev@datadoghq.com>
#
# SPDX-License-Identifier: MIT
import click

from errtree.cli.config.find import find
from errtree.cli.config.restore import restore
from errtree.cli.config.set import set_value
from errtree.cli.config.show import show


@click.group(short_help='Manage the config file')
def config():
    pass


config.add_command(find)
config.add_command(restore)
config.add_command(set_value)
config.add_command(show)
