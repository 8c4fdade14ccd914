# SPDX-FileCopyrightText: 2023-present Datadog, Inc. <dev@datadoghq.com>
#
# SPDX-License-Identifier: MIT
from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from errtree.models.config.app import AppConfig


class Config:
    def __init__(self, data: dict[str, Any]):
        self.__data = TypeResilientDict(data)

    @property
    def data(self) -> dict[str, Any]:
        return self.__data

    @cached_property
    def app(self) -> AppConfig:
        from errtree.models.config.app import AppConfig

        return AppConfig(**self.data)

    def set_field(self, key: str, value: Any) -> None:
        *parents, name = key.split('.')

        data = self.__data
        for parent in parents:
            if not isinstance(data.get(parent), dict):
                data[parent] = {}

            data = data[parent]

        data[name] = value

        if 'app' in self.__dict__:
            del self.app


class TypeResilientDict(dict):
    """A `dict` whose `get` method also returns the default value when the key is not
    hashable, intended to make it configs with invalid types easier to navigate.
    """

    def get(self, key: Any, default: Any = None) -> Any:
        try:
            value = super().get(key, default)
            if isinstance(value, dict):
                return TypeResilientDict(value)
            return value
        except TypeError:
            return default
