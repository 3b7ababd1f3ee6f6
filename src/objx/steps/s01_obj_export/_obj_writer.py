"""OBJ writer — serialize a Scene to Wavefront OBJ text.

Positions, normals and texcoords live in three file-wide index spaces, while
each mesh numbers its own from zero. The writer folds an ExportCursor over
the meshes so every face of mesh N+1 lands after everything emitted for
meshes 0..N:

    o obj0 / g grp0 / v... / vn... / vt... / f v/vt/vn ...
    o obj1 / g grp1 / ...

Positions are indexed per vertex; normals and texcoords are indexed per
corner (the corner's position in the face run), one slot per corner with no
deduplication.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple, TextIO, Union

from objx.core.scene import Geometry, Mesh, Scene
from objx.utils.face_encoding import Corner, count_polygons, split_polygons

logger = logging.getLogger(__name__)

Destination = Union[str, os.PathLike, TextIO]


class ExportCursor(NamedTuple):
    """Running offsets into the file-wide index spaces.

    ``corner_offset`` serves both normals and texcoords, since both are
    stored one per corner.
    """

    vertex_offset: int = 0
    corner_offset: int = 0

    def advance(self, geometry: Geometry) -> ExportCursor:
        return ExportCursor(
            self.vertex_offset + geometry.vertex_count,
            self.corner_offset + geometry.index_count,
        )


@dataclass
class ExportStats:
    num_meshes: int = 0
    num_vertices: int = 0
    num_normals: int = 0
    num_uvs: int = 0
    num_faces: int = 0


def format_corner(
    corner: Corner,
    cursor: ExportCursor,
    *,
    has_uvs: bool,
    has_normals: bool,
) -> str:
    """Format one face corner as ``v/vt/vn`` with empty slots kept."""
    v = cursor.vertex_offset + corner.vertex_index + 1
    attr = cursor.corner_offset + corner.position + 1
    vt = str(attr) if has_uvs else ""
    vn = str(attr) if has_normals else ""
    return f"{v}/{vt}/{vn}"


def format_face(
    polygon: list[Corner],
    cursor: ExportCursor,
    *,
    has_uvs: bool,
    has_normals: bool,
) -> str:
    corners = " ".join(
        format_corner(c, cursor, has_uvs=has_uvs, has_normals=has_normals) for c in polygon
    )
    return f"f {corners}\n"


def write_mesh(
    stream: TextIO,
    mesh: Mesh,
    index: int,
    cursor: ExportCursor,
    *,
    precision: int = 6,
    object_prefix: str = "obj",
    group_prefix: str = "grp",
    write_normals: bool = True,
    write_uvs: bool = True,
) -> ExportCursor:
    """Write one mesh block and return the cursor advanced past it."""
    geom = mesh.geometry
    has_normals = write_normals and geom.has_normals
    has_uvs = write_uvs and geom.has_uvs
    num = f"{{:.{precision}f}}"

    stream.write(f"o {object_prefix}{index}\ng {group_prefix}{index}\n")

    v_line = f"v {num} {num} {num}\n"
    for x, y, z in geom.vertices:
        stream.write(v_line.format(x, y, z))

    if has_normals:
        vn_line = f"vn {num} {num} {num}\n"
        for x, y, z in geom.normals:
            stream.write(vn_line.format(x, y, z))

    if has_uvs:
        vt_line = f"vt {num} {num}\n"
        for u, v in geom.uvs:
            stream.write(vt_line.format(u, v))

    polygons = split_polygons(geom.face_indices)
    if polygons and not polygons[-1][-1].is_last:
        logger.warning(
            f"Mesh '{mesh.name}' face run ends without a terminating corner; "
            f"writing the last {len(polygons[-1])} corners as one face"
        )
    for polygon in polygons:
        stream.write(format_face(polygon, cursor, has_uvs=has_uvs, has_normals=has_normals))

    logger.debug(
        f"Wrote {object_prefix}{index} '{mesh.name}': {geom.vertex_count} vertices, "
        f"{geom.index_count} corners, {len(polygons)} faces"
    )
    return cursor.advance(geom)


def write_scene(stream: TextIO, scene: Scene, **options) -> ExportCursor:
    """Write every mesh of ``scene`` in order. Returns the final cursor."""
    cursor = ExportCursor()
    for index, mesh in enumerate(scene):
        cursor = write_mesh(stream, mesh, index, cursor, **options)
    return cursor


def export_stats(scene: Scene, *, write_normals: bool = True, write_uvs: bool = True) -> ExportStats:
    """Count the records ``write_scene`` emits for ``scene``."""
    stats = ExportStats(num_meshes=scene.mesh_count)
    for mesh in scene:
        geom = mesh.geometry
        stats.num_vertices += geom.vertex_count
        if write_normals and geom.has_normals:
            stats.num_normals += len(geom.normals)
        if write_uvs and geom.has_uvs:
            stats.num_uvs += len(geom.uvs)
        stats.num_faces += count_polygons(geom.face_indices)
    return stats


def export_obj(scene: Scene, destination: Destination, **options) -> bool:
    """Export ``scene`` as OBJ text to a path or an open text stream.

    A path is opened for writing and closed on every exit path; a stream is
    flushed but left open for the caller. Returns False when the destination
    cannot be opened or a write fails. Lines flushed before the failure stay
    in the destination.

    Keyword options are passed to write_mesh (precision, object_prefix,
    group_prefix, write_normals, write_uvs).
    """
    if isinstance(destination, (str, os.PathLike)):
        path = Path(destination)
        try:
            with open(path, "w", encoding="utf-8", newline="\n") as f:
                cursor = write_scene(f, scene, **options)
        except OSError as e:
            logger.error(f"OBJ export to {path} failed: {e}")
            return False
        target = str(path)
    else:
        try:
            cursor = write_scene(destination, scene, **options)
            destination.flush()
        except OSError as e:
            logger.error(f"OBJ export to stream failed: {e}")
            return False
        target = getattr(destination, "name", "<stream>")

    logger.info(
        f"OBJ exported: {target} ({scene.mesh_count} meshes, "
        f"{cursor.vertex_offset} vertices, {cursor.corner_offset} corners)"
    )
    return True

