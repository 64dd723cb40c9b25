# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""PathStore exceptions."""

from __future__ import annotations

from typing import Any


class PathStoreError(Exception):
    """Base exception for PathStore errors."""

    pass


class InvalidPathError(PathStoreError, ValueError):
    """Raised when a path given to the store is not absolute.

    The store is never mutated when this is raised.

    Attributes:
        path: The offending path, as received.
    """

    def __init__(self, path: Any, message: str | None = None) -> None:
        self.path = path
        if message is None:
            message = f"Path must be absolute: {str(path)!r}"
        super().__init__(message)
