"""Partitioning of a sorted file listing at marker boundaries."""

from __future__ import annotations

from typing import Iterable


def partition(all_files: Iterable[str], markers: Iterable[str]) -> list[list[str]]:
    """Group ``all_files`` into consecutive partitions, starting a new one at each marker.

    Both inputs are expected to be sorted already; the order of
    ``all_files`` is kept as-is. Markers that are not in ``all_files`` have
    no effect. Files before the first marker form a partition of their own.

    >>> partition(["one", "two", "three"], ["two"])
    [['one'], ['two', 'three']]
    """
    marker_set = set(markers)
    partitions: list[list[str]] = []
    current: list[str] = []

    for name in all_files:
        if name in marker_set:
            if current:
                partitions.append(current)
            current = [name]
        else:
            current.append(name)

    if current:
        partitions.append(current)
    return partitions
