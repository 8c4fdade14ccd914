# SPDX-FileCopyrightText: 2023-present Datadog, Inc. <dev@datadoghq.com>
#
# SPDX-License-Identifier: MIT
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from _typeshed import SupportsWrite


class IndentWriter:
    """
    A text sink adapter that prefixes every non-empty line with `indent`.

    The prefix is inserted lazily, right before the first character of a line,
    so blank lines are never indented and writers can be nested freely. With
    `skip_initial` the very first line is left alone, which is how a bullet
    glyph takes the place of the indentation on its own line.
    """

    def __init__(self, indent: str, writer: SupportsWrite[str], *, skip_initial: bool = False):
        self.__indent = indent
        self.__writer = writer
        self.__need_indent = not skip_initial

    @property
    def writer(self) -> SupportsWrite[str]:
        return self.__writer

    def write(self, text: str) -> int:
        remaining = text
        while remaining:
            if self.__need_indent:
                content = remaining.lstrip('\n')
                if not content:
                    self.__writer.write(remaining)
                    break

                if blank_lines := remaining[: len(remaining) - len(content)]:
                    self.__writer.write(blank_lines)

                self.__writer.write(self.__indent)
                self.__need_indent = False
                remaining = content
            else:
                end = remaining.find('\n')
                if end == -1:
                    self.__writer.write(remaining)
                    break

                self.__writer.write(remaining[: end + 1])
                self.__need_indent = True
                remaining = remaining[end + 1 :]

        return len(text)
