# SPDX-FileCopyrightText: 2023-present Datadog, Inc. <dev@datadoghq.com>
#
# SPDX-License-Identifier: MIT
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text
from rich.tree import Tree

from errtree.tree import iter_error_chain

if TYPE_CHECKING:
    from errtree.tree import ErrorTree, Source


def error_tree(tree: ErrorTree) -> Tree:
    root = Tree(Text(str(tree)))
    for source in tree.sources():
        _add_source(root, source)

    return root


def _add_source(parent: Tree, source: Source) -> None:
    if source.is_chain:
        # Each link hangs below the previous one, stopping at the first repeated link
        for link in iter_error_chain(source.value):  # type: ignore[arg-type]
            parent = parent.add(Text(str(link)))

        return

    node = parent.add(Text(str(source)))
    for child in source.sources():
        _add_source(node, child)
