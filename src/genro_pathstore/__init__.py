# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-PathStore - A tree index of absolute paths with per-node payloads.

A lightweight, zero-dependency library that stores paths sharing common
prefixes as a single tree, for the Genro ecosystem (Genro Kyō).
"""

import logging

__version__ = "0.1.0"

from .exceptions import InvalidPathError, PathStoreError
from .node import ROOT_NAME, PathNode
from .store import PathStore

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core classes
    "PathStore",
    "PathNode",
    "ROOT_NAME",
    # Exceptions
    "PathStoreError",
    "InvalidPathError",
]
