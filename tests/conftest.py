"""Shared pytest fixtures for objx tests."""

import json
from pathlib import Path

import numpy as np
import pytest

from objx.core.scene import Geometry, Mesh, Scene


@pytest.fixture
def data_root(tmp_path: Path) -> Path:
    """Create a temporary data root with standard directory structure."""
    for subdir in ["raw", "interim/s00_load_scene", "processed"]:
        (tmp_path / subdir).mkdir(parents=True, exist_ok=True)
    return tmp_path


@pytest.fixture
def triangle_mesh() -> Mesh:
    """Single triangle, no normals/uvs: run [0, 1, -3]."""
    return Mesh(
        name="Triangle",
        geometry=Geometry(
            vertices=[[0, 0, 0], [1, 0, 0], [0, 1, 0]],
            face_indices=[0, 1, -3],
        ),
    )


@pytest.fixture
def quad_mesh() -> Mesh:
    """Unit quad split into two triangles sharing vertices 0 and 2, with normals and uvs."""
    return Mesh(
        name="Quad",
        geometry=Geometry(
            vertices=[[0, 0, 0], [1, 0, 0], [1, 1, 0], [0, 1, 0]],
            face_indices=[0, 1, -3, 0, 2, -4],
            normals=[[0, 0, 1]] * 6,
            uvs=[[0, 0], [1, 0], [1, 1], [0, 0], [1, 1], [0, 1]],
        ),
    )


@pytest.fixture
def two_mesh_scene(quad_mesh: Mesh, triangle_mesh: Mesh) -> Scene:
    """Quad (4 vertices, 6 corners) followed by a triangle (3 vertices, 3 corners)."""
    return Scene(meshes=[quad_mesh, triangle_mesh])


@pytest.fixture
def sample_scene_json(data_root: Path) -> Path:
    """Write a two-mesh scene document (quad with attributes + bare triangle)."""
    scene = {
        "meshes": [
            {
                "name": "Quad",
                "vertices": [[0, 0, 0], [1, 0, 0], [1, 1, 0], [0, 1, 0]],
                "face_indices": [0, 1, -3, 0, 2, -4],
                "normals": [[0, 0, 1]] * 6,
                "uvs": [[0, 0], [1, 0], [1, 1], [0, 0], [1, 1], [0, 1]],
            },
            {
                "name": "Triangle",
                "vertices": [[0, 0, 0], [1, 0, 0], [0, 1, 0]],
                "polygons": [[0, 1, 2]],
            },
        ]
    }
    scene_file = data_root / "raw" / "scene.json"
    with open(scene_file, "w") as f:
        json.dump(scene, f)
    return scene_file


@pytest.fixture
def broken_scene_json(data_root: Path) -> Path:
    """Scene whose normals are per vertex and whose run is unterminated."""
    scene = {
        "meshes": [
            {
                "name": "Broken",
                "vertices": [[0, 0, 0], [1, 0, 0], [0, 1, 0]],
                "face_indices": [0, 1, 2],
                "normals": np.zeros((2, 3)).tolist(),
            }
        ]
    }
    scene_file = data_root / "raw" / "broken.json"
    with open(scene_file, "w") as f:
        json.dump(scene, f)
    return scene_file
