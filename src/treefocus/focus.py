# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Focus - a cursor for navigating and building a Tree.

A Focus owns a Tree and a path: the child indices that lead from the root
to the focused node. The path addresses an existing node after every
public operation. Movements that cannot be carried out (Up from the root,
Down from a leaf, Lateral from the root) leave the focus where it is, and
Lateral offsets that overshoot the sibling list stop at its first or last
sibling.

Example:
    >>> focus = Focus(0)
    >>> _ = focus.create_subtree(1)
    >>> focus.focused().label
    1
    >>> focus.jump(Jump.UP)
    >>> _ = focus.create_subtree(2)
    >>> focus.jump(Jump.lateral(-1))
    >>> focus.focused().label
    1
    >>> _ = focus.create_subtree(3)
    >>> focus.labels()
    [0, 1, 3]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Generic, Sequence, TypeVar, cast

from .exceptions import InvalidPathError, MalformedDataError
from .tree import Tree

logger = logging.getLogger(__name__)

T = TypeVar('T')

Path = tuple[int, ...]


def _is_index(value: Any) -> bool:
    """True for a plain non-negative int (bool excluded)."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


class JumpKind(Enum):
    """Direction of a Jump."""

    UP = 'up'
    DOWN = 'down'
    LATERAL = 'lateral'


@dataclass(frozen=True)
class Jump:
    """A movement of a Focus relative to its current node.

    - Jump.UP: to the parent of the focused node
    - Jump.DOWN: to the first child of the focused node
    - Jump.lateral(n): to the sibling n positions away (n may be negative)
    """

    kind: JumpKind
    offset: int = 0

    UP: ClassVar[Jump]
    DOWN: ClassVar[Jump]

    @classmethod
    def lateral(cls, offset: int) -> Jump:
        """Return a sideways movement by offset sibling positions."""
        return cls(JumpKind.LATERAL, offset)


Jump.UP = Jump(JumpKind.UP)
Jump.DOWN = Jump(JumpKind.DOWN)


class Focus(Generic[T]):
    """A Tree together with the path of its currently focused node.

    Build a Focus on a fresh single-node tree with Focus(label), or on an
    existing tree with Focus.from_tree(tree, path).
    """

    __slots__ = ('_tree', '_path')

    def __init__(self, label: T) -> None:
        """Initialize a Focus on a new tree made of a single root.

        Args:
            label: Label of the root node.
        """
        self._tree: Tree[T] = Tree(label)
        self._path: list[int] = []

    @classmethod
    def from_tree(
        cls, tree: Tree[T], path: Sequence[int] | None = None
    ) -> Focus[T] | None:
        """Build a Focus on an existing tree.

        The Focus takes ownership of tree: callers should not keep modifying
        it directly afterwards.

        Args:
            tree: The tree to navigate.
            path: Child indices from the root to the node to focus.
                None focuses the root.

        Returns:
            The Focus, or None if path does not address a node of tree
                or holds anything other than non-negative ints.

        Example:
            >>> tree = Tree(0)
            >>> _ = tree.create_subtree(1)
            >>> Focus.from_tree(tree, [0, 1]) is None
            True
            >>> Focus.from_tree(tree, [0]).focused().label
            1
        """
        focus = cls.__new__(cls)
        focus._tree = tree
        focus._path = list(path) if path is not None else []
        if not all(_is_index(index) for index in focus._path) or (
            focus._at_path(focus._path) is None
        ):
            logger.debug("Rejected focus path %s", focus._path)
            return None
        return focus

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"Focus({self._tree!r}, path={self._path})"

    def __eq__(self, other: object) -> bool:
        """Structural equality: equal trees and equal paths."""
        if not isinstance(other, Focus):
            return NotImplemented
        return self._path == other._path and self._tree == other._tree

    __hash__ = None  # type: ignore[assignment]

    # ==================== Accessors ====================

    @property
    def tree(self) -> Tree[T]:
        """The whole tree, from its root."""
        return self._tree

    @property
    def path(self) -> Path:
        """Child indices from the root to the focused node (empty at root)."""
        return tuple(self._path)

    def _at_path(self, path: Sequence[int]) -> Tree[T] | None:
        node: Tree[T] | None = self._tree
        for index in path:
            node = node.child_at(index)
            if node is None:
                return None
        return node

    def focused(self) -> Tree[T]:
        """Return the node addressed by the current path."""
        return cast(Tree[T], self._at_path(self._path))

    def labels(self) -> list[T]:
        """Return the labels from the root down to the focused node.

        The result always has len(path) + 1 items.
        """
        node = self._tree
        labels = [node.label]
        for index in self._path:
            node = node.child_at(index)
            labels.append(node.label)
        return labels

    # ==================== Navigation ====================

    def jump(self, jump: Jump) -> None:
        """Move the focus.

        Jumps never fail:
        - UP at the root does nothing
        - DOWN on a leaf does nothing
        - lateral(n) at the root does nothing; otherwise the target sibling
          index is clamped to the parent's children

        Args:
            jump: The movement to apply.
        """
        if jump.kind is JumpKind.UP:
            if self._path:
                self._path.pop()
        elif jump.kind is JumpKind.DOWN:
            if self.focused().children_count() > 0:
                self._path.append(0)
        elif jump.kind is JumpKind.LATERAL:
            if self._path:
                parent = self._at_path(self._path[:-1])
                upper = parent.children_count() - 1
                self._path[-1] = max(0, min(upper, self._path[-1] + jump.offset))

    def up(self) -> None:
        """Shortcut for jump(Jump.UP)."""
        self.jump(Jump.UP)

    def down(self) -> None:
        """Shortcut for jump(Jump.DOWN)."""
        self.jump(Jump.DOWN)

    def lateral(self, offset: int) -> None:
        """Shortcut for jump(Jump.lateral(offset))."""
        self.jump(Jump.lateral(offset))

    # ==================== Building ====================

    def create_subtree(self, label: T) -> Tree[T]:
        """Append a new leaf to the focused node and focus it.

        Args:
            label: Label of the new leaf.

        Returns:
            The new node, which is now focused.
        """
        parent = self.focused()
        child = parent.create_subtree(label)
        self._path.append(parent.children_count() - 1)
        return child

    # ==================== Conversion ====================

    def as_dict(self) -> dict[str, Any]:
        """Convert to a plain record: {'tree': tree record, 'path': [indices]}."""
        return {'tree': self._tree.as_dict(), 'path': list(self._path)}

    @classmethod
    def from_dict(cls, data: Any) -> Focus[Any]:
        """Build a Focus from a record produced by as_dict().

        Raises:
            MalformedDataError: If the record or its tree is malformed, or
                the path is not a list of non-negative integers.
            InvalidPathError: If the path does not address a node.
        """
        if not isinstance(data, dict):
            raise MalformedDataError(
                f"focus record must be a dict, not {type(data).__name__}"
            )
        if 'tree' not in data:
            raise MalformedDataError("focus record has no 'tree'")
        path = data.get('path', [])
        if not isinstance(path, list) or not all(_is_index(index) for index in path):
            raise MalformedDataError(
                f"'path' must be a list of non-negative integers, got {path!r}"
            )
        focus = cls.from_tree(Tree.from_dict(data['tree']), path)
        if focus is None:
            raise InvalidPathError(path)
        return focus
