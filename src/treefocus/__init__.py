# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeFocus - Generic trees with a cursor for navigating and building them.

A lightweight, zero-dependency library providing an append-only labeled
tree and a Focus cursor that moves over it and grows it in place.
"""

__version__ = "0.1.0"

from .exceptions import InvalidPathError, MalformedDataError, TreeFocusError
from .focus import Focus, Jump, JumpKind, Path
from .serialization import dumps, loads, loads_focus, loads_tree
from .tree import Tree

__all__ = [
    # Core classes
    "Tree",
    "Focus",
    "Jump",
    "JumpKind",
    "Path",
    # Serialization
    "dumps",
    "loads",
    "loads_tree",
    "loads_focus",
    # Exceptions
    "TreeFocusError",
    "MalformedDataError",
    "InvalidPathError",
]
