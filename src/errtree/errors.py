# SPDX-FileCopyrightText: 2023-present Datadog, Inc. <dev@datadoghq.com>
#
# SPDX-License-Identifier: MIT
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pydantic import ValidationError


class ErrTreeError(Exception):
    pass


class DecodeError(ErrTreeError):
    """Raised when serialized data does not describe a valid error tree."""

    def __init__(self, messages: list[str]):
        super().__init__('\n'.join(messages))
        self.messages = messages

    @classmethod
    def from_validation_error(cls, error: ValidationError) -> DecodeError:
        messages = []
        for details in error.errors(include_url=False):
            if location := details['loc']:
                messages.append(f'{" -> ".join(map(str, location))}: {details["msg"]}')
            else:
                messages.append(details['msg'])

        return cls(messages)
