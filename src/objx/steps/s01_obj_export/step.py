"""Step 01: OBJ export — scene document → Wavefront OBJ text.

Every mesh becomes an ``o``/``g`` block with its own ``v``/``vn``/``vt``
records; face indices are shifted into the file-wide index spaces.
"""

from __future__ import annotations

import logging
from typing import ClassVar

from objx.core.step_base import BaseStep
from .config import ObjExportConfig
from .contracts import ObjExportInput, ObjExportOutput

logger = logging.getLogger(__name__)


class ObjExportStep(BaseStep[ObjExportInput, ObjExportOutput, ObjExportConfig]):
    name: ClassVar[str] = "obj_export"
    input_type: ClassVar = ObjExportInput
    output_type: ClassVar = ObjExportOutput
    config_type: ClassVar = ObjExportConfig

    def validate_inputs(self, inputs: ObjExportInput) -> bool:
        if not inputs.scene_path.exists():
            logger.error(f"Scene document not found: {inputs.scene_path}")
            return False
        if inputs.output_path is not None and inputs.output_path.suffix.lower() != ".obj":
            logger.error(f"Expected .obj output path, got: {inputs.output_path.suffix}")
            return False
        return True

    def run(self, inputs: ObjExportInput) -> ObjExportOutput:
        from objx.utils.io import load_scene
        from ._obj_writer import export_obj, export_stats

        if inputs.output_path is not None:
            obj_path = inputs.output_path
        else:
            output_dir = self.data_root / "processed"
            output_dir.mkdir(parents=True, exist_ok=True)
            obj_path = output_dir / f"{inputs.scene_path.stem}.obj"

        scene = load_scene(inputs.scene_path)
        if scene.mesh_count == 0:
            logger.warning("Scene has no meshes, writing an empty OBJ file")

        options = self.config.model_dump()
        if not export_obj(scene, obj_path, **options):
            raise RuntimeError(f"OBJ export failed: cannot write {obj_path}")

        stats = export_stats(
            scene,
            write_normals=self.config.write_normals,
            write_uvs=self.config.write_uvs,
        )
        logger.info(
            f"Exported {stats.num_meshes} meshes "
            f"({stats.num_vertices} v, {stats.num_normals} vn, "
            f"{stats.num_uvs} vt, {stats.num_faces} f) -> {obj_path}"
        )

        return ObjExportOutput(
            obj_path=obj_path,
            num_meshes=stats.num_meshes,
            num_vertices=stats.num_vertices,
            num_normals=stats.num_normals,
            num_uvs=stats.num_uvs,
            num_faces=stats.num_faces,
        )
