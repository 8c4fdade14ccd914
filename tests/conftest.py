# SPDX-FileCopyrightText: 2023-present Datadog, Inc. <dev@datadoghq.com>
#
# SPDX-License-Identifier: MIT
from __future__ import annotations

from collections.abc import Generator
from tempfile import TemporaryDirectory

import pytest
from click.testing import CliRunner

from errtree.config.file import CONFIG_ENV_VAR, ConfigFile
from errtree.utils.fs import Path


class BoundCliRunner(CliRunner):
    def __init__(self, command):
        super().__init__()
        self.__command = command

    def __call__(self, *args, **kwargs):
        # Exceptions should always be handled
        kwargs.setdefault('catch_exceptions', False)

        return self.invoke(self.__command, args, **kwargs)


@pytest.fixture(scope='session')
def errtree():
    from errtree import cli

    return BoundCliRunner(cli.errtree)


@pytest.fixture(autouse=True)
def config_file(tmp_path, monkeypatch) -> ConfigFile:
    path = Path(tmp_path, 'config.toml')
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    config = ConfigFile(path)
    config.restore()
    config.load()
    return config


@pytest.fixture
def temp_dir(tmp_path) -> Path:
    path = Path(tmp_path, 'temp')
    path.mkdir()
    return path


@pytest.fixture(scope='session', autouse=True)
def isolation() -> Generator[Path, None, None]:
    with TemporaryDirectory() as d, pytest.MonkeyPatch.context() as monkeypatch:
        directory = Path(d).resolve()

        monkeypatch.setenv('NO_COLOR', '1')
        monkeypatch.delenv('FORCE_COLOR', raising=False)
        # 2.5x the default of 80x24
        monkeypatch.setenv('COLUMNS', '200')
        monkeypatch.setenv('LINES', '60')
        monkeypatch.chdir(directory)

        yield directory


@pytest.fixture(scope='session')
def helpers():
    # https://docs.pytest.org/en/latest/writing_plugins.html#assertion-rewriting
    pytest.register_assert_rewrite('tests.helpers.api')

    from .helpers import api

    return api


@pytest.fixture
def complex_tree():
    from .helpers.trees import complex_tree

    return complex_tree()


@pytest.fixture
def single_source_tree():
    from .helpers.trees import single_source_tree

    return single_source_tree()


@pytest.fixture
def jobs_tree():
    from .helpers.trees import jobs_tree

    return jobs_tree()
