"""Sign-terminated face index runs.

A mesh stores its polygons as one flat run of corner values. A value >= 0 is
a 0-based vertex reference inside a polygon; a negative value ``f`` is the
polygon's last corner and references vertex ``-f - 1``:

    [0, 1, -3, 2, 1, -4]  ->  (0, 1, 2), (2, 1, 3)

Nothing outside this module looks at the sign bit.
"""

from __future__ import annotations

from typing import Iterable, NamedTuple, Sequence

import numpy as np


class Corner(NamedTuple):
    """One decoded corner of a polygon.

    ``position`` is the corner's slot in the flattened run and keys the
    per-corner attributes (normals, uvs). ``vertex_index`` is the decoded
    0-based vertex reference and keys the positions.
    """

    position: int
    vertex_index: int
    is_last: bool


def decode_index(value: int) -> tuple[int, bool]:
    """Decode one run entry into ``(vertex_index, is_last)``."""
    value = int(value)
    if value < 0:
        return -value - 1, True
    return value, False


def decode_corners(face_indices: Iterable[int]) -> list[Corner]:
    """Decode a whole run, keeping each corner's position in the run."""
    corners = []
    for position, value in enumerate(face_indices):
        vertex_index, is_last = decode_index(value)
        corners.append(Corner(position, vertex_index, is_last))
    return corners


def split_polygons(face_indices: Iterable[int]) -> list[list[Corner]]:
    """Group a run into polygons.

    A new polygon starts right after a terminating corner. A trailing run
    with no terminator is returned as a final polygon, unchanged.
    """
    polygons: list[list[Corner]] = []
    current: list[Corner] = []
    for corner in decode_corners(face_indices):
        current.append(corner)
        if corner.is_last:
            polygons.append(current)
            current = []
    if current:
        polygons.append(current)
    return polygons


def is_terminated(face_indices: Sequence[int]) -> bool:
    """True if the run is empty or its last entry closes a polygon."""
    return len(face_indices) == 0 or int(face_indices[-1]) < 0


def count_polygons(face_indices: Sequence[int]) -> int:
    """Number of polygons in a run, counting an unterminated tail as one."""
    arr = np.asarray(face_indices, dtype=np.int64)
    n = int(np.count_nonzero(arr < 0))
    if not is_terminated(arr):
        n += 1
    return n


def encode_polygons(polygons: Iterable[Sequence[int]]) -> np.ndarray:
    """Flatten polygons of 0-based vertex indices into a sign-terminated run.

    Raises:
        ValueError: if a polygon is empty or holds a negative or non-integer
            index.
    """
    run: list[int] = []
    for polygon in polygons:
        if len(polygon) == 0:
            raise ValueError("Cannot encode an empty polygon")
        for i, value in enumerate(polygon):
            vertex_index = int(value)
            if vertex_index != value:
                raise ValueError(f"Non-integer vertex index in polygon: {value!r}")
            if vertex_index < 0:
                raise ValueError(f"Negative vertex index in polygon: {vertex_index}")
            run.append(-vertex_index - 1 if i == len(polygon) - 1 else vertex_index)
    return np.asarray(run, dtype=np.int64)
