# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeFocus exceptions.

Navigation and construction never raise: out-of-range lookups and invalid
focus paths come back as None. These exceptions are only raised when
rebuilding a Tree or Focus from serialized data.
"""

from __future__ import annotations


class TreeFocusError(Exception):
    """Base exception for TreeFocus errors."""

    pass


class MalformedDataError(TreeFocusError, ValueError):
    """Raised when serialized data does not have the shape of a Tree or Focus."""

    pass


class InvalidPathError(TreeFocusError, ValueError):
    """Raised when a deserialized focus path does not address a node."""

    def __init__(self, path: list[int] | tuple[int, ...]) -> None:
        self.path = tuple(path)
        super().__init__(f"Path {list(self.path)} does not address a node")
