"""Recursive store of leaves and nested levels addressable by path.

The package is organized into:
- entry: the ``Leaf`` and ``Node`` variants stored at each level
- building: conversion from and to plain nested mappings
- walking: pre-order flattening into ``(path, value)`` pairs
- reconstruct: conflict-checked rebuilding from ``(path, value)`` pairs
- core: the ``DeepMap`` facade
"""

from .core import DeepMap
from .entry import Entry, Leaf, Node


__all__ = ["DeepMap", "Entry", "Leaf", "Node"]
