# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""JSON encoding of Tree and Focus.

The encoding is the record form of as_dict():

    tree:  {"label": ..., "children": [tree, ...]}
    focus: {"tree": tree, "path": [int, ...]}

Child order and path order are preserved, so loads(dumps(x)) == x for any
Tree or Focus whose labels are JSON values.

Example:
    >>> focus = Focus('root')
    >>> _ = focus.create_subtree('a')
    >>> text = dumps(focus)
    >>> loads(text) == focus
    True
"""

from __future__ import annotations

import json
import logging
from typing import Any

from .exceptions import MalformedDataError
from .focus import Focus
from .tree import Tree

logger = logging.getLogger(__name__)


def dumps(obj: Tree[Any] | Focus[Any], **kwargs: Any) -> str:
    """Encode a Tree or Focus as JSON.

    Args:
        obj: The Tree or Focus to encode.
        **kwargs: Passed to json.dumps (e.g. indent=2).

    Raises:
        TypeError: If obj is neither a Tree nor a Focus, or a label is not
            JSON serializable.
    """
    if not isinstance(obj, (Tree, Focus)):
        raise TypeError(
            f"obj must be Tree or Focus, not {type(obj).__name__}"
        )
    return json.dumps(obj.as_dict(), **kwargs)


def _decode(text: str | bytes) -> Any:
    try:
        return json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
        raise MalformedDataError(f"invalid JSON: {e}") from e


def loads_tree(text: str | bytes) -> Tree[Any]:
    """Decode a Tree from JSON produced by dumps()."""
    return Tree.from_dict(_decode(text))


def loads_focus(text: str | bytes) -> Focus[Any]:
    """Decode a Focus from JSON produced by dumps()."""
    return Focus.from_dict(_decode(text))


def loads(text: str | bytes) -> Tree[Any] | Focus[Any]:
    """Decode a Tree or Focus, depending on the record found.

    A record with a 'tree' key is a focus, a record with a 'label' key is
    a tree.

    Raises:
        MalformedDataError: If text is not JSON or not a Tree/Focus record.
        InvalidPathError: If a focus path does not address a node.
    """
    data = _decode(text)
    if isinstance(data, dict):
        if 'tree' in data:
            logger.debug("Decoding focus record")
            return Focus.from_dict(data)
        if 'label' in data:
            logger.debug("Decoding tree record")
            return Tree.from_dict(data)
    raise MalformedDataError("JSON document is neither a tree nor a focus record")
