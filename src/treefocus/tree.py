# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tree - an unbounded-branching tree of labeled nodes.

Each Tree node carries an opaque label and owns an ordered list of child
nodes. Children can only be appended: the position a child gets when it is
created is its index for the rest of the tree's life.

Example:
    >>> tree = Tree(0)
    >>> tree.create_subtree(1)
    Tree(1, children=0)
    >>> tree.children_count()
    1
    >>> tree.child_at(0).label
    1
    >>> tree.child_at(1) is None
    True
"""

from __future__ import annotations

from typing import Any, Generic, Iterator, TypeVar

from .exceptions import MalformedDataError

T = TypeVar('T')


class Tree(Generic[T]):
    """A node with a label and an ordered sequence of owned subtrees.

    Attributes:
        label: The node's payload, never inspected by the tree itself.
    """

    __slots__ = ('_label', '_children')

    def __init__(self, label: T) -> None:
        """Initialize a leaf Tree.

        Args:
            label: The node's payload.
        """
        self._label = label
        self._children: list[Tree[T]] = []

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"Tree({self._label!r}, children={len(self._children)})"

    def __len__(self) -> int:
        """Return the number of direct children."""
        return len(self._children)

    def __iter__(self) -> Iterator[Tree[T]]:
        """Iterate over direct children in insertion order."""
        return iter(self._children)

    def __eq__(self, other: object) -> bool:
        """Structural equality: same labels, same children in the same order."""
        if not isinstance(other, Tree):
            return NotImplemented
        return self._label == other._label and self._children == other._children

    __hash__ = None  # type: ignore[assignment]

    # ==================== Core API ====================

    @property
    def label(self) -> T:
        """The node's label."""
        return self._label

    def children_count(self) -> int:
        """Return how many direct children this node has (0 for a leaf)."""
        return len(self._children)

    def child_at(self, index: int) -> Tree[T] | None:
        """Get the direct child at a position.

        Unlike list indexing, negative indices are out of range.

        Args:
            index: Position of the child, 0 being the first created.

        Returns:
            The child Tree, or None if index is out of range.
        """
        if 0 <= index < len(self._children):
            return self._children[index]
        return None

    # Children are live objects: changes made through the returned node
    # land in this tree.
    child_at_mut = child_at

    def create_subtree(self, label: T) -> Tree[T]:
        """Append a new leaf as the last child.

        The new child's index is children_count() - 1 after the call.

        Args:
            label: Label of the new leaf.

        Returns:
            The newly created child.
        """
        child: Tree[T] = Tree(label)
        self._children.append(child)
        return child

    # ==================== Conversion ====================

    def as_dict(self) -> dict[str, Any]:
        """Convert to a plain record (recursive).

        Returns:
            {'label': label, 'children': [child records in order]}
        """
        return {
            'label': self._label,
            'children': [child.as_dict() for child in self._children],
        }

    @classmethod
    def from_dict(cls, data: Any) -> Tree[Any]:
        """Build a Tree from a record produced by as_dict().

        A record without 'children' is read as a leaf.

        Args:
            data: Mapping with a 'label' key and an optional 'children' list.

        Raises:
            MalformedDataError: If a record is not a mapping, lacks a label,
                or its children are not a list.
        """
        if not isinstance(data, dict):
            raise MalformedDataError(
                f"tree record must be a dict, not {type(data).__name__}"
            )
        if 'label' not in data:
            raise MalformedDataError("tree record has no 'label'")
        children = data.get('children', [])
        if not isinstance(children, list):
            raise MalformedDataError(
                f"'children' must be a list, not {type(children).__name__}"
            )
        tree = cls(data['label'])
        for child in children:
            tree._children.append(cls.from_dict(child))
        return tree
