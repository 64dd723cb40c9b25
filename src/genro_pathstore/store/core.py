# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""PathStore - A tree index of absolute paths.

This module provides the PathStore class, which indexes absolute paths
into a tree of PathNode instances. Paths sharing a prefix share the
nodes of that prefix, so insertion is O(depth) and the node count is
deduplicated.

Key Features:
    - **Autocreate**: Missing intermediate segments are created on insert
    - **Payloads**: Any node, interior or leaf, may carry data
    - **Leaf enumeration**: walk() lists the full path of every leaf
    - **Coarse locking**: One lock serializes check-then-create sequences

Path Syntax:
    Paths are ``pathlib`` pure paths (PurePosixPath by default). They
    must be absolute and share the store anchor ('/' unless given), which
    names the root node; every following part is one segment.

Example:
    Basic usage::

        store = PathStore()
        store.insert('/f', 'first')             # True, new node
        store.insert('/f/FDrive/files')         # True, two new nodes
        store.insert('/f', 'again')             # False, data overwritten
        store.size                              # 3
        set(store.walk())                       # {PurePosixPath('/f/FDrive/files')}
        store['/f']                             # 'again'
"""

from __future__ import annotations

import logging
import threading
from pathlib import PurePath, PurePosixPath
from typing import Any, Iterator

from ..exceptions import InvalidPathError
from ..node import PathNode
from .paths import split_absolute, store_anchor

logger = logging.getLogger(__name__)


class PathStore:
    """A tree of absolute paths with optional data on every node.

    PathStore provides:
    - insert(path, data): Create/update the node at path with autocreate
    - walk(): Full paths of all leaf nodes
    - size: Number of nodes created by insertion (root excluded)
    - get_node(path) / get_data(path) / store[path]: Lookups
    - iter_data(): (path, data) for every node carrying data

    Nodes are never removed or renamed, so size only grows.

    Attributes:
        root: The root PathNode, present for the whole store lifetime.

    Example:
        >>> store = PathStore()
        >>> store.insert('/usr/local/bin', 'binaries')
        True
        >>> store.size
        3
    """

    __slots__ = ('_root', '_size', '_path_class', '_anchor', '_lock')

    def __init__(
        self,
        data: Any = None,
        path_class: type[PurePath] = PurePosixPath,
        anchor: str | None = None,
    ) -> None:
        """Initialize a PathStore.

        Args:
            data: Optional payload for the root node.
            path_class: Pure path class used to parse str/PathLike inputs
                and to build the paths returned by walk() and iteration.
            anchor: The single anchor every path must start with, which
                names the root node. Defaults to ROOT_NAME; flavours with
                drives need one, e.g. PathStore(path_class=PureWindowsPath,
                anchor='C:\\').

        Raises:
            ValueError: If anchor is not an absolute anchor for path_class.
        """
        self._anchor = store_anchor(anchor, path_class)
        self._root = PathNode.root(data, name=self._anchor)
        self._size = 0
        self._path_class = path_class
        self._lock = threading.RLock()

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"PathStore(size={self._size})"

    def __len__(self) -> int:
        """Return the number of non-root nodes."""
        return self._size

    def __contains__(self, path: Any) -> bool:
        """Check if path exists structurally in the store.

        Relative paths and non-path objects are never contained.
        """
        try:
            self.get_node(path)
            return True
        except (KeyError, InvalidPathError, TypeError):
            return False

    def __getitem__(self, path: Any) -> Any:
        """Get the data at path.

        Raises:
            KeyError: If path not found.
            InvalidPathError: If path is not absolute.
        """
        return self.get_node(path).data

    def __setitem__(self, path: Any, data: Any) -> None:
        """Set data at path, creating missing segments (see insert)."""
        self.insert(path, data)

    # ==================== Properties ====================

    @property
    def root(self) -> PathNode:
        """The root node."""
        return self._root

    @property
    def size(self) -> int:
        """Number of nodes created by insertion, root excluded."""
        return self._size

    @property
    def path_class(self) -> type[PurePath]:
        """Pure path class used for parsing and for returned paths."""
        return self._path_class

    @property
    def anchor(self) -> str:
        """The anchor all stored paths share."""
        return self._anchor

    # ==================== Core API ====================

    def insert(self, path: Any, data: Any = None) -> bool:
        """Insert path, creating missing segments, and set its data.

        The data of the final node is overwritten on every call, whether
        or not the path already existed.

        Args:
            path: Absolute path (str, os.PathLike or PurePath).
            data: Payload for the node at path.

        Returns:
            True if at least one node was created, False if the whole
            path already existed.

        Raises:
            InvalidPathError: If path is not absolute or has another
                anchor than the store. The store is left unchanged.

        Example:
            >>> store.insert('/f')
            True
            >>> store.insert('/f', 'data')
            False
        """
        segments = split_absolute(path, self._path_class, self._anchor)

        with self._lock:
            current = self._root
            changed = False
            for depth, name in enumerate(segments, 1):
                current, created = current.add_child(name)
                if created:
                    self._size += 1
                    changed = True
                    logger.debug("Created node %r at depth %d", name, depth)
            current.set_data(data)
        return changed

    def get_node(self, path: Any) -> PathNode:
        """Get the node at path.

        Args:
            path: Absolute path to the node.

        Returns:
            PathNode at the path.

        Raises:
            KeyError: If any segment is missing.
            InvalidPathError: If path is not absolute.
        """
        segments = split_absolute(path, self._path_class, self._anchor)

        with self._lock:
            current = self._root
            for name in segments:
                child = current.get_child(name)
                if child is None:
                    raise KeyError(f"Path segment '{name}' not found in '{path}'")
                current = child
        return current

    def get_data(self, path: Any, default: Any = None) -> Any:
        """Get the data at path.

        Args:
            path: Absolute path to the node.
            default: Value returned if path not found.

        Returns:
            The node data, or default.

        Raises:
            InvalidPathError: If path is not absolute.
        """
        try:
            return self.get_node(path).data
        except KeyError:
            return default

    # ==================== Walk ====================

    def iter_nodes(self) -> Iterator[tuple[PurePath, PathNode]]:
        """Yield (path, node) for every node, root included, depth first.

        Sibling order is unspecified. The store lock is not held across
        yields; use the list-returning methods when other threads insert.
        """
        def _walk_gen(
            node: PathNode, parts: list[str]
        ) -> Iterator[tuple[PurePath, PathNode]]:
            parts.append(node.name)
            yield self._path_class(*parts), node
            for child in list(node.children.values()):
                yield from _walk_gen(child, parts)
            parts.pop()

        return _walk_gen(self._root, [])

    def iter_walk(self) -> Iterator[PurePath]:
        """Yield the full path of every leaf node (see walk)."""
        for path, node in self.iter_nodes():
            if node.is_leaf:
                yield path

    def walk(self) -> list[PurePath]:
        """Return the full paths of all leaf nodes.

        Only nodes without children are reported: an interior node is
        left out even if it carries data (see items() for those). The
        order is unspecified, treat the result as a set. On an empty
        store the root itself is the only leaf.

        Example:
            >>> store.insert('/f')
            True
            >>> store.insert('/f/FDrive/files')
            True
            >>> store.walk()
            [PurePosixPath('/f/FDrive/files')]
        """
        with self._lock:
            return list(self.iter_walk())

    def iter_data(self) -> Iterator[tuple[PurePath, Any]]:
        """Yield (path, data) for every node whose data is not None."""
        for path, node in self.iter_nodes():
            if node.data is not None:
                yield path, node.data

    def items(self) -> list[tuple[PurePath, Any]]:
        """Return (path, data) pairs for every node carrying data.

        Unlike walk(), interior nodes are included.
        """
        with self._lock:
            return list(self.iter_data())
