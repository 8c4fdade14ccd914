# SPDX-FileCopyrightText: 2023-present Datadog, Inc. <dev@datadoghq.com>
#
# SPDX-License-Identifier: MIT
"""
Rendering of error trees as indented text.

A node with a single source is displayed like a conventional exception chain,
with every link at the same indentation. As soon as a node has more than one
source its children are indented one level deeper and marked with `+`, so the
points where the tree forks are visible from the indentation alone:

    top

    Caused by:

      + a
        - a1
        - a2
      + b
"""
from __future__ import annotations

import enum
from io import StringIO
from itertools import chain
from typing import TYPE_CHECKING

from errtree.tree import ErrorTree, Source, SourceKind, iter_error_chain
from errtree.utils.indent import IndentWriter

if TYPE_CHECKING:
    from _typeshed import SupportsWrite

INDENT = '  '
CAUSED_BY = '\n\nCaused by:\n'


class DisplayKind(enum.Enum):
    SINGLE = 'single'
    MULTI = 'multi'


class TreeDisplay:
    """Lazily renders an error tree when converted to a string."""

    def __init__(self, tree: ErrorTree):
        self.tree = tree

    def write_to(self, sink: SupportsWrite[str]) -> None:
        render(self.tree, sink)

    def __str__(self) -> str:
        return display_tree(self.tree)


class SourceDisplay:
    """Lazily renders a single source when converted to a string."""

    def __init__(self, source: Source):
        self.source = source

    def write_to(self, sink: SupportsWrite[str]) -> None:
        render_source(self.source, sink)

    def __str__(self) -> str:
        buffer = StringIO()
        render_source(self.source, buffer)
        return buffer.getvalue()


def display_tree(tree: ErrorTree) -> str:
    buffer = StringIO()
    render(tree, buffer)
    return buffer.getvalue()


def render(tree: ErrorTree, sink: SupportsWrite[str]) -> None:
    """
    Write the rendering of `tree` to `sink`.

    Anything `sink.write` raises propagates unchanged and whatever was already
    written stays written.
    """
    sink.write(str(tree))

    sources = iter(tree.sources())
    first_source = next(sources, None)
    if first_source is None:
        return

    sink.write(f'{CAUSED_BY}\n')

    indent = IndentWriter(INDENT, sink)
    second_source = next(sources, None)
    if second_source is None:
        _render_nested_source(indent, first_source, DisplayKind.SINGLE)
    else:
        for source in chain((first_source, second_source), sources):
            _render_nested_source(indent, source, DisplayKind.MULTI)


def render_source(source: Source, sink: SupportsWrite[str]) -> None:
    if source.kind is SourceKind.TREE:
        render(source.value, sink)  # type: ignore[arg-type]
    else:
        render_error(source.value, sink)  # type: ignore[arg-type]


def render_error(error: BaseException, sink: SupportsWrite[str]) -> None:
    """Write the rendering of a plain exception chain to `sink`."""
    sink.write(str(error))

    links = iter_error_chain(error)
    next(links)
    cause = next(links, None)
    if cause is None:
        return

    # Unlike trees, a bare chain has no blank line before its first cause.
    sink.write(CAUSED_BY)
    _render_nested_error(sink, cause, DisplayKind.SINGLE)


def _render_nested_source(sink: SupportsWrite[str], source: Source, parent_kind: DisplayKind) -> None:
    if source.kind is SourceKind.TREE:
        _render_nested_tree(sink, source.value, parent_kind)  # type: ignore[arg-type]
    else:
        _render_nested_error(sink, source.value, parent_kind)  # type: ignore[arg-type]


def _render_nested_tree(sink: SupportsWrite[str], tree: ErrorTree, parent_kind: DisplayKind) -> None:
    bullet = '-' if parent_kind is DisplayKind.SINGLE else '+'
    IndentWriter(INDENT, sink, skip_initial=True).write(f'{bullet} {tree}\n')

    sources = iter(tree.sources())
    first_source = next(sources, None)
    if first_source is None:
        return

    second_source = next(sources, None)
    if second_source is None:
        if parent_kind is DisplayKind.SINGLE:
            # A chain of single causes stays at the same indentation
            _render_nested_source(sink, first_source, DisplayKind.SINGLE)
        else:
            _render_nested_source(IndentWriter(INDENT, sink), first_source, DisplayKind.SINGLE)
    else:
        indent = IndentWriter(INDENT, sink)
        for source in chain((first_source, second_source), sources):
            _render_nested_source(indent, source, DisplayKind.MULTI)


def _render_nested_error(sink: SupportsWrite[str], error: BaseException, parent_kind: DisplayKind) -> None:
    links = iter_error_chain(error)
    if parent_kind is DisplayKind.SINGLE:
        for link in links:
            IndentWriter(INDENT, sink, skip_initial=True).write(f'- {link}\n')
    else:
        IndentWriter(INDENT, sink, skip_initial=True).write(f'+ {next(links)}\n')
        for link in links:
            IndentWriter(INDENT * 2, sink, skip_initial=True).write(f'{INDENT}- {link}\n')
