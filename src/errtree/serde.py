# SPDX-FileCopyrightText: 2023-present Datadog, Inc. <dev@datadoghq.com>
#
# SPDX-License-Identifier: MIT
"""
A serializable snapshot of an error tree.

Every node is stored as an object with two fields, the displayed message and
the ordered list of its sources:

    {"msg": "top", "sources": [{"msg": "b", "sources": []}]}

Exception chains are flattened into nested nodes with exactly one source each.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from errtree.errors import DecodeError
from errtree.tree import ErrorTree, Source, iter_error_chain

logger = logging.getLogger(__name__)


class SerdeErrorTree(BaseModel, ErrorTree):
    """An error tree where every node is just a message and its sources."""

    model_config = ConfigDict(frozen=True)

    msg: str
    children: list[SerdeErrorTree] = Field(alias='sources')

    @classmethod
    def from_tree(cls, tree: ErrorTree | Source) -> SerdeErrorTree:
        """
        Deep copy an arbitrary error tree by stringifying it.

        Only the displayed messages survive, any other information carried by
        the original nodes is lost. The tree is walked without recursion so
        chains and trees of any depth can be converted.
        """
        messages: list[str] = []
        children: list[list[int]] = []

        def add(msg: str, parent: int | None) -> int:
            messages.append(msg)
            children.append([])
            index = len(messages) - 1
            if parent is not None:
                children[parent].append(index)

            return index

        stack: list[tuple[Source, int | None]] = [(tree if isinstance(tree, Source) else Source.tree(tree), None)]
        while stack:
            source, parent = stack.pop()
            if source.is_chain:
                for link in iter_error_chain(source.value):  # type: ignore[arg-type]
                    parent = add(str(link), parent)
            else:
                index = add(str(source), parent)
                stack.extend((child, index) for child in reversed(list(source.sources())))

        # Children are always added after their parent
        nodes: list[SerdeErrorTree] = [None] * len(messages)  # type: ignore[list-item]
        for index in reversed(range(len(messages))):
            nodes[index] = cls.from_msg_and_sources(messages[index], [nodes[child] for child in children[index]])

        return nodes[0]

    @classmethod
    def from_error(cls, error: BaseException) -> SerdeErrorTree:
        return cls.from_tree(Source.chain(error))

    @classmethod
    def from_msg_and_sources(cls, msg: str, sources: Iterable[SerdeErrorTree] = ()) -> SerdeErrorTree:
        return cls(msg=msg, sources=list(sources))

    @classmethod
    def from_data(cls, data: Any) -> SerdeErrorTree:
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            logger.debug('Unable to decode error tree: %s', e)
            raise DecodeError.from_validation_error(e) from e

    @classmethod
    def from_json(cls, text: str | bytes) -> SerdeErrorTree:
        try:
            return cls.model_validate_json(text)
        except ValidationError as e:
            logger.debug('Unable to decode error tree: %s', e)
            raise DecodeError.from_validation_error(e) from e

    def to_data(self) -> dict[str, Any]:
        root: dict[str, Any] = {}
        stack = [(self, root)]
        while stack:
            node, data = stack.pop()
            data['msg'] = node.msg
            data['sources'] = [{} for _ in node.children]
            stack.extend(zip(node.children, data['sources']))

        return root

    def to_json(self, indent: int | None = None) -> str:
        """
        Encode the tree as JSON, compact unless a positive `indent` is given.

        The output is identical to what `model_dump_json` would produce, but it is
        built with an explicit stack as the pydantic serializer gives up on deep trees.
        """
        return ''.join(_iter_json(self, indent or 0))

    def sources(self) -> Iterator[Source]:
        for child in self.children:
            yield Source.tree(child)

    def __str__(self) -> str:
        return self.msg


def _iter_json(tree: SerdeErrorTree, indent: int) -> Iterator[str]:
    def pad(depth: int) -> str:
        return f'\n{" " * indent * depth}' if indent else ''

    key_separator = ': ' if indent else ':'
    stack: list[str | tuple[SerdeErrorTree, int]] = [(tree, 0)]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            yield item
            continue

        node, depth = item
        yield (
            f'{{{pad(depth + 1)}"msg"{key_separator}{json.dumps(node.msg, ensure_ascii=False)},'
            f'{pad(depth + 1)}"sources"{key_separator}'
        )
        if not node.children:
            yield f'[]{pad(depth)}}}'
            continue

        yield '['
        stack.append(f'{pad(depth + 1)}]{pad(depth)}}}')
        for index in reversed(range(len(node.children))):
            stack.append((node.children[index], depth + 2))
            stack.append(pad(depth + 2) if index == 0 else f',{pad(depth + 2)}')


def serialize(tree: ErrorTree, indent: int | None = None) -> str:
    return SerdeErrorTree.from_tree(tree).to_json(indent)


def deserialize(text: str | bytes) -> SerdeErrorTree:
    return SerdeErrorTree.from_json(text)
