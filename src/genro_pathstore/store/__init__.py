# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""PathStore package - Tree index of absolute paths.

The package is organized into:
- core: Main PathStore class with insertion, lookup and walk
- paths: Coercion of caller paths into segments

Example:
    >>> from genro_pathstore import PathStore
    >>> store = PathStore()
    >>> store.insert('/f/FDrive/files', 'docs')
    True
    >>> store.size
    3
"""

from ..node import PathNode
from .core import PathStore

__all__ = ["PathStore", "PathNode"]
