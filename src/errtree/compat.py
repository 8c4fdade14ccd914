# SPDX-FileCopyrightText: 2023-present Datadog, Inc. <dev@datadoghq.com>
#
# SPDX-License-Identifier: MIT
"""Adapters between error trees and the builtin exception types."""
from __future__ import annotations

from collections.abc import Iterator

from errtree.tree import ErrorTree, Source


class ErrorWrapper(ErrorTree):
    """Presents an exception and its chain of causes as an error tree."""

    __slots__ = ('__error',)

    def __init__(self, error: BaseException):
        self.__error = error

    def into_inner(self) -> BaseException:
        return self.__error

    def sources(self) -> Iterator[Source]:
        return Source.chain(self.__error).sources()

    def __str__(self) -> str:
        return str(self.__error)

    def __repr__(self) -> str:
        return f'ErrorWrapper({self.__error!r})'


class ErrorTreeError(Exception, ErrorTree):
    """Wraps an error tree so that it can be raised."""

    def __init__(self, tree: ErrorTree):
        super().__init__(str(tree))
        self.tree = tree

    def sources(self) -> Iterator[Source]:
        return iter(self.tree.sources())

    def __str__(self) -> str:
        return str(self.tree)

    def __reduce__(self):
        return (type(self), (self.tree,))


class ExceptionGroupTree(ErrorTree):
    """
    Presents an exception group as an error tree with one source per member.

    Nested groups become nested trees, any other member is the head of a chain.
    """

    __slots__ = ('__group',)

    def __init__(self, group: BaseExceptionGroup):
        self.__group = group

    @property
    def group(self) -> BaseExceptionGroup:
        return self.__group

    def sources(self) -> Iterator[Source]:
        for error in self.__group.exceptions:
            if isinstance(error, ErrorTree):
                yield Source.tree(error)
            elif isinstance(error, BaseExceptionGroup):
                yield Source.tree(ExceptionGroupTree(error))
            else:
                yield Source.chain(error)

    def __str__(self) -> str:
        return self.__group.message

    def __repr__(self) -> str:
        return f'ExceptionGroupTree({self.__group!r})'
