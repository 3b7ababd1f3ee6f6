"""I/O utilities: JSON scene documents."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from objx.core.scene import Geometry, Mesh, Scene
from objx.utils.face_encoding import count_polygons, encode_polygons

logger = logging.getLogger(__name__)


# ── Scene documents ──────────────────────────────────────────────────
#
# {"meshes": [{"name": "Cube",
#              "vertices": [[x, y, z], ...],
#              "face_indices": [0, 1, -3, ...],   # or "polygons": [[0, 1, 2], ...]
#              "normals": [[x, y, z], ...],       # optional, one per corner
#              "uvs": [[u, v], ...]}]}            # optional, one per corner

def _mesh_from_dict(entry: dict, index: int) -> Mesh:
    if not isinstance(entry, dict):
        raise ValueError(f"Mesh {index} must be an object, got {type(entry).__name__}")
    if "vertices" not in entry:
        raise ValueError(f"Mesh {index} has no 'vertices'")
    for key in ("vertices", "face_indices", "polygons", "normals", "uvs"):
        if entry.get(key) is not None and not isinstance(entry[key], list):
            raise ValueError(f"Mesh {index} '{key}' must be a list, got {type(entry[key]).__name__}")

    polygons = entry.get("polygons")
    if polygons is not None and not all(isinstance(p, list) for p in polygons):
        raise ValueError(f"Mesh {index} 'polygons' must be a list of index lists")

    try:
        if "face_indices" in entry:
            face_indices = entry["face_indices"]
        elif polygons is not None:
            face_indices = encode_polygons(polygons)
        else:
            face_indices = []
        geometry = Geometry(
            vertices=entry["vertices"],
            face_indices=face_indices,
            normals=entry.get("normals"),
            uvs=entry.get("uvs"),
        )
    except (TypeError, ValueError) as e:
        raise ValueError(f"Mesh {index}: {e}") from e
    return Mesh(name=entry.get("name") or f"mesh_{index}", geometry=geometry)


def load_scene(path: Path) -> Scene:
    """Read a JSON scene document into a Scene.

    Raises:
        FileNotFoundError: if ``path`` does not exist.
        ValueError: if the document is not valid JSON or is missing fields.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Scene document not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid scene document {path}: {e}") from e

    if not isinstance(raw, dict) or not isinstance(raw.get("meshes", []), list):
        raise ValueError(f"Scene document {path} must be an object with a 'meshes' list")

    meshes = [_mesh_from_dict(entry, i) for i, entry in enumerate(raw.get("meshes", []))]
    logger.info(f"Loaded {len(meshes)} meshes from {path.name}")
    return Scene(meshes=meshes)


def _mesh_to_dict(mesh: Mesh) -> dict:
    geom = mesh.geometry
    entry = {
        "name": mesh.name,
        "vertices": geom.vertices.tolist(),
        "face_indices": geom.face_indices.tolist(),
    }
    if geom.normals is not None:
        entry["normals"] = geom.normals.tolist()
    if geom.uvs is not None:
        entry["uvs"] = geom.uvs.tolist()
    return entry


def save_scene(scene: Scene, path: Path) -> Path:
    """Write a Scene as a JSON scene document."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump({"meshes": [_mesh_to_dict(m) for m in scene]}, f, indent=2)
    return path


def scene_summary(scene: Scene) -> list[dict]:
    """Per-mesh counts used by the loader metadata and the CLI."""
    rows = []
    for i, mesh in enumerate(scene):
        geom = mesh.geometry
        rows.append({
            "index": i,
            "name": mesh.name,
            "num_vertices": geom.vertex_count,
            "num_corners": geom.index_count,
            "num_polygons": count_polygons(geom.face_indices),
            "has_normals": geom.has_normals,
            "has_uvs": geom.has_uvs,
            "bbox_min": geom.vertices.min(axis=0).tolist() if geom.vertex_count else None,
            "bbox_max": geom.vertices.max(axis=0).tolist() if geom.vertex_count else None,
        })
    return rows
