# SPDX-FileCopyrightText: 2023-present Datadog, Inc. <dev@datadoghq.com>
#
# SPDX-License-Identifier: MIT
"""
A general purpose error tree that can be raised like any other exception.

A `Mishap` is either backed by a plain exception, in which case its sources are
that exception's chain of causes, or by a message wrapping any number of other
error trees. Use the `from_*` constructors to build one, or `wrap_error` to
convert exceptions raised by a block of code:

    with wrap_error('failed to read the book list'):
        data = Path('book-list.json').read_text()
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Generator, Iterable, Iterator, Sequence
from contextlib import contextmanager
from typing import Any

from errtree.compat import ExceptionGroupTree
from errtree.tree import ErrorTree, Source, iter_error_chain

logger = logging.getLogger(__name__)


class _MishapMessage(Exception):
    pass


class _WrappedTree(ErrorTree):
    def __init__(self, msg: Any, sources: Sequence[ErrorTree]):
        self.msg = msg
        self.children = tuple(sources)

    def sources(self) -> Iterator[Source]:
        for child in self.children:
            yield Source.tree(child)

    def __str__(self) -> str:
        return str(self.msg)

    def __reduce__(self):
        return (type(self), (str(self.msg), self.children))


def _chain(msg: Any, cause: BaseException | None = None) -> _MishapMessage:
    error = _MishapMessage(str(msg))
    if cause is not None:
        error.__cause__ = cause

    return error


class Mishap(Exception, ErrorTree):  # noqa: N818
    def __init__(self, kind: BaseException | ErrorTree):
        super().__init__(str(kind))
        self.__kind = kind

    @classmethod
    def from_msg(cls, msg: Any) -> Mishap:
        return cls(_chain(msg))

    @classmethod
    def from_error(cls, error: BaseException) -> Mishap:
        return cls(error)

    @classmethod
    def from_error_and_msg(cls, msg: Any, error: BaseException) -> Mishap:
        return cls(_chain(msg, error))

    @classmethod
    def from_errors_and_msg(cls, msg: Any, errors: Iterable[BaseException]) -> Mishap:
        return cls._new_wrapped_tree(msg, [cls.from_error(error) for error in errors])

    @classmethod
    def from_error_tree(cls, tree: ErrorTree) -> Mishap:
        return cls(tree)

    @classmethod
    def from_error_tree_and_msg(cls, msg: Any, tree: ErrorTree) -> Mishap:
        return cls._new_wrapped_tree(msg, [tree])

    @classmethod
    def from_error_trees_and_msg(cls, msg: Any, trees: Iterable[ErrorTree]) -> Mishap:
        return cls._new_wrapped_tree(msg, list(trees))

    @classmethod
    def from_exception(cls, error: BaseException) -> Mishap:
        """Convert any exception, keeping whatever tree structure it has."""
        if isinstance(error, Mishap):
            return error
        elif isinstance(error, ErrorTree):
            return cls.from_error_tree(error)
        elif isinstance(error, BaseExceptionGroup):
            return cls.from_error_tree(ExceptionGroupTree(error))

        return cls.from_error(error)

    @classmethod
    def from_borrowed_error(cls, error: BaseException) -> Mishap:
        """
        Copy an exception chain by stringifying every link.

        The returned value shares nothing with `error`, including tracebacks.
        """
        links = [str(link) for link in iter_error_chain(error)]
        return cls.from_msg_and_cause_chain(links[0], links[1:])

    @classmethod
    def from_borrowed_tree(cls, tree: ErrorTree) -> Mishap:
        """Copy an error tree by stringifying every node."""
        sources = []
        for source in tree.sources():
            if source.is_chain:
                sources.append(cls.from_borrowed_error(source.value))  # type: ignore[arg-type]
            else:
                sources.append(cls.from_borrowed_tree(source.value))  # type: ignore[arg-type]

        return cls._new_wrapped_tree(str(tree), sources)

    @classmethod
    def from_msg_and_cause_chain(cls, msg: Any, cause_chain: Sequence[Any]) -> Mishap:
        """The causes are ordered from the direct cause of `msg` to the root cause."""
        error = None
        for cause in [*reversed(cause_chain), msg]:
            error = _chain(cause, error)

        return cls(error)  # type: ignore[arg-type]

    @classmethod
    def _new_wrapped_tree(cls, msg: Any, sources: Sequence[ErrorTree]) -> Mishap:
        if not sources:
            logger.debug('Collapsing error tree without sources into a plain message: %s', msg)
            return cls.from_msg(msg)

        return cls(_WrappedTree(msg, sources))

    def wrap_single(self, msg: Any) -> Mishap:
        return self._new_wrapped_tree(msg, [self])

    @property
    def inner(self) -> BaseException | ErrorTree:
        return self.__kind

    def sources(self) -> Iterator[Source]:
        if isinstance(self.__kind, ErrorTree):
            return iter(self.__kind.sources())

        return Source.chain(self.__kind).sources()

    def __str__(self) -> str:
        return str(self.__kind)

    def __repr__(self) -> str:
        return f'Mishap(msg={str(self)!r}, sources={list(self.sources())!r})'

    def __reduce__(self):
        if isinstance(self.__kind, ErrorTree):
            return (type(self), (self.__kind,))

        # Exceptions are pickled without their causes, so keep the chain as messages
        links = [str(link) for link in iter_error_chain(self.__kind)]
        return (type(self).from_msg_and_cause_chain, (links[0], links[1:]))


def _evaluate(msg: Any | Callable[[], Any]) -> Any:
    return msg() if callable(msg) else msg


@contextmanager
def wrap_error(msg: Any | Callable[[], Any]) -> Generator[None, None, None]:
    """
    Re-raise any exception escaping the block as a `Mishap` wrapped with `msg`.

    Error trees become the single source of the new node, exception groups
    become one source per member and any other exception becomes a chain.
    If `msg` is callable it is only called once an error occurs.
    """
    try:
        yield
    except Exception as e:
        message = _evaluate(msg)
        if isinstance(e, ErrorTree):
            raise Mishap.from_error_tree_and_msg(message, e) from e
        elif isinstance(e, BaseExceptionGroup):
            raise _from_group(message, e) from e

        raise Mishap.from_error_and_msg(message, e) from e


@contextmanager
def wrap_error_tree(msg: Any | Callable[[], Any]) -> Generator[None, None, None]:
    """Like `wrap_error` but only error tree exceptions are wrapped, anything else propagates as is."""
    try:
        yield
    except Exception as e:
        if not isinstance(e, ErrorTree):
            raise

        raise Mishap.from_error_tree_and_msg(_evaluate(msg), e) from e


@contextmanager
def wrap_errors(msg: Any | Callable[[], Any]) -> Generator[None, None, None]:
    """Like `wrap_error` but only exception groups are wrapped, anything else propagates as is."""
    try:
        yield
    except ExceptionGroup as e:
        raise _from_group(_evaluate(msg), e) from e


def _from_group(msg: Any, group: BaseExceptionGroup) -> Mishap:
    return Mishap.from_error_trees_and_msg(msg, [Mishap.from_exception(member) for member in group.exceptions])
