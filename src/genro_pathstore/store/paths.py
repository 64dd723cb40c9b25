# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Path coercion helpers for PathStore.

The store does not parse paths itself: splitting into segments and the
absolute/relative distinction are delegated to ``pathlib`` pure paths.
No ``.``/``..`` resolution is performed.
"""

from __future__ import annotations

import logging
import os
from pathlib import PurePath
from typing import Any

from ..exceptions import InvalidPathError
from ..node import ROOT_NAME

logger = logging.getLogger(__name__)


def coerce_path(path: Any, path_class: type[PurePath]) -> PurePath:
    """Convert `path` to a pure path.

    PurePath instances are kept as they are; strings and os.PathLike
    objects are parsed with `path_class`.

    Raises:
        TypeError: If path is not a str, os.PathLike or PurePath.
    """
    if isinstance(path, PurePath):
        return path
    if isinstance(path, (str, os.PathLike)):
        return path_class(path)
    raise TypeError(
        f"path must be str, os.PathLike or PurePath, not {type(path).__name__}"
    )


def store_anchor(anchor: str | None, path_class: type[PurePath]) -> str:
    """Return the normalized anchor a store is rooted at.

    Args:
        anchor: Requested anchor, or None for ROOT_NAME.
        path_class: Pure path class of the store.

    Raises:
        ValueError: If anchor is not a bare absolute anchor for path_class
            (e.g. '\\' for PureWindowsPath, which needs a drive).
    """
    root = path_class(ROOT_NAME if anchor is None else anchor)
    if not root.is_absolute() or root.parts != (root.anchor,):
        raise ValueError(
            f"{str(root)!r} is not an absolute anchor for {path_class.__name__}"
        )
    return root.anchor


def split_absolute(
    path: Any, path_class: type[PurePath], anchor: str = ROOT_NAME
) -> tuple[str, ...]:
    """Return the segments of an absolute path, anchor excluded.

    Args:
        path: The path to split.
        path_class: Pure path class used to parse non-PurePath inputs.
        anchor: The store anchor; paths under another anchor (another
            drive, a UNC share) are rejected.

    Returns:
        Tuple of segment names below the anchor (empty for the root).

    Raises:
        InvalidPathError: If the path is not absolute or not under anchor.
        TypeError: If the path has an unsupported type.
    """
    pure = coerce_path(path, path_class)
    if not pure.is_absolute():
        logger.debug("Rejecting relative path %r", str(pure))
        raise InvalidPathError(path)
    if path_class(pure.anchor) != path_class(anchor):
        logger.debug("Rejecting path %r outside anchor %r", str(pure), anchor)
        raise InvalidPathError(
            path, f"Path must be absolute under {anchor!r}: {str(path)!r}"
        )
    return pure.parts[1:]
