# SPDX-FileCopyrightText: 2023-present Datadog, Inc. <dev@datadoghq.com>
#
# SPDX-License-Identifier: MIT
from __future__ import annotations

import tomllib
from typing import cast

from errtree.config.core import Config
from errtree.mishap import wrap_error
from errtree.utils.fs import Path

CONFIG_ENV_VAR = 'ERRTREE_CONFIG'


class ConfigFile:
    """
    The TOML file holding the settings of the command line interface.

    Failures to read or write the file are raised as `Mishap` error trees so
    that the CLI can render them like any other error.
    """

    def __init__(self, path: Path | None = None):
        self.path: Path = path or self.get_default_location()
        self.model = cast(Config, None)

    def save(self, content: str = '') -> None:
        import tomli_w

        if not content:
            content = tomli_w.dumps(self.model.data)

        with wrap_error(lambda: f'Unable to save config file `{self.path}`'):
            self.path.write_atomic(content)

    def load(self, *, create: bool = False) -> None:
        """Parse the file, first writing the default settings to it if `create` is set and it is missing."""
        if create and not self.path.is_file():
            self.restore()
            return

        with wrap_error(lambda: f'Unable to load config file `{self.path}`'):
            self.model = Config(tomllib.loads(self.read()))

    def read(self) -> str:
        return self.path.read_text(encoding='utf-8')

    def restore(self) -> None:
        from errtree.models.config.app import AppConfig

        self.model = Config(AppConfig().model_dump())
        self.save()

    @classmethod
    def get_default_location(cls) -> Path:
        from platformdirs import user_config_dir

        return Path(user_config_dir('errtree', appauthor=False)) / 'config.toml'
