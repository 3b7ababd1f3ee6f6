"""Step 00: Load a JSON scene document and check its face runs."""

from __future__ import annotations

import json
import logging
from typing import ClassVar

from objx.core.step_base import BaseStep
from .config import LoadSceneConfig
from .contracts import LoadSceneInput, LoadSceneOutput

logger = logging.getLogger(__name__)


class LoadSceneStep(BaseStep[LoadSceneInput, LoadSceneOutput, LoadSceneConfig]):
    """Materialize a scene document and report its shape.

    The exporter trusts its input, so this is where malformed face runs and
    attribute/corner count mismatches get reported.
    """

    name: ClassVar[str] = "load_scene"
    input_type: ClassVar = LoadSceneInput
    output_type: ClassVar = LoadSceneOutput
    config_type: ClassVar = LoadSceneConfig

    def validate_inputs(self, inputs: LoadSceneInput) -> bool:
        if not inputs.scene_path.exists():
            logger.error(f"Scene document not found: {inputs.scene_path}")
            return False
        if inputs.scene_path.suffix.lower() != ".json":
            logger.error(f"Expected .json scene document, got: {inputs.scene_path.suffix}")
            return False
        return True

    def run(self, inputs: LoadSceneInput) -> LoadSceneOutput:
        from objx.utils.io import load_scene, scene_summary

        scene = load_scene(inputs.scene_path)

        # --- 1. Check every geometry ---
        num_problems = 0
        for mesh in scene:
            for problem in mesh.geometry.validate():
                num_problems += 1
                logger.warning(f"Mesh '{mesh.name}': {problem}")
        if num_problems and self.config.strict:
            raise ValueError(
                f"Scene {inputs.scene_path.name} has {num_problems} problem(s); see log"
            )

        # --- 2. Summarize ---
        rows = scene_summary(scene)
        num_vertices = sum(r["num_vertices"] for r in rows)
        num_corners = sum(r["num_corners"] for r in rows)
        num_polygons = sum(r["num_polygons"] for r in rows)
        logger.info(
            f"Scene has {len(rows)} meshes "
            f"({num_vertices} vertices, {num_corners} corners, {num_polygons} polygons)"
        )

        # --- 3. Save metadata ---
        metadata_path = None
        if self.config.write_metadata:
            output_dir = self.data_root / "interim" / "s00_load_scene"
            output_dir.mkdir(parents=True, exist_ok=True)
            metadata_path = output_dir / "metadata.json"
            metadata = {
                "source": str(inputs.scene_path),
                "num_problems": num_problems,
                "meshes": rows,
            }
            with open(metadata_path, "w") as f:
                json.dump(metadata, f, indent=2)

        return LoadSceneOutput(
            scene_path=inputs.scene_path,
            metadata_path=metadata_path,
            num_meshes=len(rows),
            num_vertices=num_vertices,
            num_corners=num_corners,
            num_polygons=num_polygons,
        )
