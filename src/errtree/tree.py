# SPDX-FileCopyrightText: 2023-present Datadog, Inc. <dev@datadoghq.com>
#
# SPDX-License-Identifier: MIT
"""
The error tree capability.

An error tree is like an exception chain, except that every node may have any
number of causes rather than zero or one. Each cause is a `Source`, which is
either a plain exception (the head of a conventional chain) or another error
tree.
"""
from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from errtree.display import SourceDisplay, TreeDisplay
    from errtree.serde import SerdeErrorTree


def error_cause(error: BaseException) -> BaseException | None:
    """Return the next link of an exception chain, following the same rules
    the interpreter uses when printing a traceback.
    """
    if error.__cause__ is not None:
        return error.__cause__

    if not error.__suppress_context__:
        return error.__context__

    return None


def iter_error_chain(error: BaseException) -> Iterator[BaseException]:
    """Lazily yield `error` followed by each of its causes."""
    # Re-raising inside an `except` block can make `__context__` point back
    # into the chain, so stop at the first link we have already seen.
    seen: set[int] = set()
    link: BaseException | None = error
    while link is not None and id(link) not in seen:
        seen.add(id(link))
        yield link
        link = error_cause(link)


class ErrorTree(ABC):
    """
    A node with a display message and zero or more ordered sources.

    The display message is whatever `str()` returns. Implementations must keep
    both the message and `sources` free of side effects: renderers are allowed
    to query them more than once.
    """

    @abstractmethod
    def sources(self) -> Iterator[Source]:
        """Return a fresh iterator over the direct causes of this node."""

    def display_tree(self) -> TreeDisplay:
        from errtree.display import TreeDisplay

        return TreeDisplay(self)

    def to_serde(self) -> SerdeErrorTree:
        from errtree.serde import SerdeErrorTree

        return SerdeErrorTree.from_tree(self)


class SourceKind(enum.Enum):
    CHAIN = 'chain'
    TREE = 'tree'


class Source:
    """A tagged reference to either an exception chain or an error tree."""

    __slots__ = ('__kind', '__value')

    def __init__(self, kind: SourceKind, value: BaseException | ErrorTree):
        self.__kind = kind
        self.__value = value

    @classmethod
    def chain(cls, error: BaseException) -> Source:
        return cls(SourceKind.CHAIN, error)

    @classmethod
    def tree(cls, tree: ErrorTree) -> Source:
        return cls(SourceKind.TREE, tree)

    @property
    def kind(self) -> SourceKind:
        return self.__kind

    @property
    def value(self) -> BaseException | ErrorTree:
        return self.__value

    @property
    def is_chain(self) -> bool:
        return self.__kind is SourceKind.CHAIN

    def sources(self) -> Iterator[Source]:
        if self.__kind is SourceKind.CHAIN:
            cause = error_cause(self.__value)  # type: ignore[arg-type]
            if cause is not None:
                yield Source.chain(cause)
        else:
            yield from self.__value.sources()  # type: ignore[union-attr]

    def display_tree(self) -> SourceDisplay:
        from errtree.display import SourceDisplay

        return SourceDisplay(self)

    def __str__(self) -> str:
        return str(self.__value)

    def __repr__(self) -> str:
        return f'Source.{self.__kind.value}({self.__value!r})'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Source):
            return NotImplemented

        return self.__kind is other.kind and self.__value is other.value

    def __hash__(self) -> int:
        return hash((self.__kind, id(self.__value)))


class TreeRef(ErrorTree):
    """Transparent wrapper that forwards everything to the wrapped tree."""

    __slots__ = ('__tree',)

    def __init__(self, tree: ErrorTree):
        self.__tree = tree

    @property
    def inner(self) -> ErrorTree:
        return self.__tree

    def sources(self) -> Iterator[Source]:
        return self.__tree.sources()

    def __str__(self) -> str:
        return str(self.__tree)

    def __repr__(self) -> str:
        return f'TreeRef({self.__tree!r})'
