# SPDX-FileCopyrightText: 2023-present Datadog, Inc. <dev@datadoghq.com>
#
# SPDX-License-Identifier: MIT
from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING, NoReturn

import click
from rich.console import Console

if TYPE_CHECKING:
    from errtree.config.core import Config
    from errtree.config.file import ConfigFile
    from errtree.serde import SerdeErrorTree
    from errtree.tree import ErrorTree

logger = logging.getLogger(__name__)


class Application:
    def __init__(self, config_file: ConfigFile, color: bool | None = None):
        self.__console = Console(
            force_terminal=color,
            no_color=color is False,
            markup=False,
            emoji=False,
            highlight=False,
        )
        self.__error_console = Console(
            stderr=True,
            force_terminal=color,
            no_color=color is False,
            markup=False,
            emoji=False,
            highlight=False,
        )
        self.config_file = config_file

    @property
    def config(self) -> Config:
        return self.config_file.model

    @property
    def console(self) -> Console:
        return self.__console

    def print(self, *args, **kwargs) -> None:  # noqa: A003
        self.__console.print(*args, **kwargs)

    def print_error_tree(self, tree: ErrorTree) -> None:
        from errtree.display import display_tree

        self.__console.print(display_tree(tree).rstrip('\n'), soft_wrap=True)

    def abort(self, tree: ErrorTree | None = None, code: int = 1) -> NoReturn:
        if tree is not None:
            self.print_error_tree(tree)

        click.get_current_context().exit(code)

    def load_error_tree(self, source: IO[str]) -> SerdeErrorTree:
        from errtree.errors import DecodeError
        from errtree.serde import deserialize

        name = getattr(source, 'name', '<stream>')
        try:
            tree = deserialize(source.read())
        except DecodeError as e:
            from errtree.mishap import Mishap

            self.abort(
                Mishap.from_error_trees_and_msg(
                    f'Unable to decode error tree from `{name}`', [Mishap.from_msg(message) for message in e.messages]
                )
            )

        logger.debug('Decoded error tree from %s', name)
        return tree

    def config_errors(self) -> list[str]:
        from pydantic import ValidationError

        errors = []

        try:
            _ = self.config.app
        except ValidationError as e:
            for error in e.errors(include_url=False):
                errors.append(f'{" -> ".join(map(str, error["loc"]))}\n  {error["msg"]}')

        return errors

    def initialize(self) -> None:
        """Validate the configuration and set up logging, for commands that depend on it."""
        if errors := self.config_errors():
            from errtree.mishap import Mishap

            self.abort(
                Mishap.from_error_trees_and_msg('Configuration errors', [Mishap.from_msg(error) for error in errors])
            )

        from errtree.utils.log import configure_logging

        configure_logging(self.config.app.log_level, self.__error_console)
