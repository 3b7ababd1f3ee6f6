"""In-memory scene model consumed by the exporter.

A Scene is an ordered list of Meshes; each Mesh owns one Geometry. Positions
are per vertex, while normals and uvs are per corner of the face run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

import numpy as np

from objx.utils.face_encoding import decode_index, is_terminated


def _as_array(values, dtype, width: Optional[int] = None) -> np.ndarray:
    raw = np.asarray(values if values is not None else [])
    if np.issubdtype(dtype, np.integer) and raw.size and not np.issubdtype(raw.dtype, np.integer):
        as_float = raw.astype(np.float64)
        if not np.all(np.isfinite(as_float)) or np.any(as_float != np.trunc(as_float)):
            raise ValueError(f"Expected integer indices, got non-integer values: {raw.tolist()}")
    arr = raw.astype(dtype)
    if width is None:
        return arr.reshape(-1)
    if arr.size == 0:
        return arr.reshape(0, width)
    if arr.ndim != 2 or arr.shape[1] != width:
        raise ValueError(f"Expected (N, {width}) array, got shape {arr.shape}")
    return arr


@dataclass
class Geometry:
    """Vertex buffer, optional per-corner attributes and the face run."""

    vertices: np.ndarray  # (N, 3) float64
    face_indices: np.ndarray  # (C,) int64, sign-terminated
    normals: Optional[np.ndarray] = None  # (C, 3) float64
    uvs: Optional[np.ndarray] = None  # (C, 2) float64

    def __post_init__(self) -> None:
        self.vertices = _as_array(self.vertices, np.float64, 3)
        self.face_indices = _as_array(self.face_indices, np.int64)
        if self.normals is not None:
            self.normals = _as_array(self.normals, np.float64, 3)
        if self.uvs is not None:
            self.uvs = _as_array(self.uvs, np.float64, 2)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def index_count(self) -> int:
        return len(self.face_indices)

    @property
    def has_normals(self) -> bool:
        return self.normals is not None

    @property
    def has_uvs(self) -> bool:
        return self.uvs is not None

    def validate(self) -> list[str]:
        """Describe every way this geometry breaks the face-run conventions.

        The exporter does not call this; an empty list means the geometry is
        safe to export.
        """
        problems = []
        if self.normals is not None and len(self.normals) != self.index_count:
            problems.append(
                f"normals has {len(self.normals)} entries, expected {self.index_count} (one per corner)"
            )
        if self.uvs is not None and len(self.uvs) != self.index_count:
            problems.append(
                f"uvs has {len(self.uvs)} entries, expected {self.index_count} (one per corner)"
            )
        for position, value in enumerate(self.face_indices):
            vertex_index, _ = decode_index(value)
            if vertex_index >= self.vertex_count:
                problems.append(
                    f"corner {position} references vertex {vertex_index}, "
                    f"only {self.vertex_count} vertices"
                )
        if not is_terminated(self.face_indices):
            problems.append("face run does not end with a terminating (negative) corner")
        return problems


@dataclass
class Mesh:
    name: str
    geometry: Geometry


@dataclass
class Scene:
    """Ordered, read-only collection of meshes."""

    meshes: list[Mesh] = field(default_factory=list)

    @property
    def mesh_count(self) -> int:
        return len(self.meshes)

    def get_mesh(self, index: int) -> Mesh:
        return self.meshes[index]

    def __len__(self) -> int:
        return len(self.meshes)

    def __iter__(self) -> Iterator[Mesh]:
        return iter(self.meshes)
