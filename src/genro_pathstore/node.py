# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""PathStore node class."""

from __future__ import annotations

import weakref
from typing import Any, Iterator

ROOT_NAME = '/'


class PathNode:
    """A node in a PathStore tree.

    Each node has:
    - name: The path segment this node represents (the anchor for the root)
    - data: Optional payload attached at this exact path
    - children: Dict mapping segment name to child PathNode
    - parent: Weak reference back to the parent node (None for the root)

    A node is a leaf when it has no children, whatever its data.

    Example:
        >>> root = PathNode.root()
        >>> child, created = root.add_child('etc')
        >>> child.parent is root
        True
        >>> child.segments
        ('etc',)
    """

    __slots__ = ('name', 'data', 'children', '_parent', '_is_root', '__weakref__')

    def __init__(
        self,
        name: str,
        data: Any = None,
        parent: PathNode | None = None,
    ) -> None:
        """Initialize a PathNode.

        Args:
            name: The segment name of this node.
            data: Optional payload.
            parent: The parent node. Only a weak reference is kept,
                so a child never keeps its parent alive.
        """
        self.name = name
        self.data = data
        self.children: dict[str, PathNode] = {}
        self._parent = weakref.ref(parent) if parent is not None else None
        self._is_root = False

    @classmethod
    def root(cls, data: Any = None, name: str = ROOT_NAME) -> PathNode:
        """Create a root node (named after the store anchor, without parent)."""
        node = cls(name, data)
        node._is_root = True
        return node

    def __repr__(self) -> str:
        return (
            f"PathNode({self.name!r}, data={self.data!r}, "
            f"children={len(self.children)})"
        )

    def __len__(self) -> int:
        """Return the number of direct children."""
        return len(self.children)

    def __iter__(self) -> Iterator[PathNode]:
        """Iterate over direct children. Order is not significant."""
        return iter(self.children.values())

    def __contains__(self, name: str) -> bool:
        return name in self.children

    @property
    def parent(self) -> PathNode | None:
        """The parent node, or None for the root."""
        if self._parent is None:
            return None
        return self._parent()

    @property
    def is_root(self) -> bool:
        """True only for nodes built with PathNode.root()."""
        return self._is_root

    @property
    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return not self.children

    @property
    def is_branch(self) -> bool:
        """True if this node has at least one child."""
        return bool(self.children)

    @property
    def segments(self) -> tuple[str, ...]:
        """Segment names from below the root down to this node.

        For a node not attached to a root (built without parent, or whose
        parent was garbage collected) the names start at its topmost
        reachable ancestor.
        """
        names: list[str] = []
        node: PathNode | None = self
        while node is not None and not node.is_root:
            names.append(node.name)
            node = node.parent
        return tuple(reversed(names))

    @property
    def depth(self) -> int:
        """Depth of this node in the tree (root=0)."""
        return len(self.segments)

    def set_data(self, data: Any) -> None:
        """Replace the payload. Last write wins, no merge."""
        self.data = data

    def get_child(self, name: str, default: Any = None) -> PathNode | None:
        """Get a direct child by segment name, with default."""
        return self.children.get(name, default)

    def add_child(self, name: str, data: Any = None) -> tuple[PathNode, bool]:
        """Get the child named `name`, creating it if missing.

        The existing child is returned untouched (data included) when
        present, so a name is never registered twice.

        Args:
            name: Segment name of the child.
            data: Payload for a newly created child.

        Returns:
            Tuple of (child, created).
        """
        child = self.children.get(name)
        if child is not None:
            return child, False
        child = PathNode(name, data, parent=self)
        self.children[name] = child
        return child, True
