"""I/O contracts for Step 00: Load scene document."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field


class LoadSceneInput(BaseModel):
    scene_path: Path = Field(..., description="Path to the JSON scene document")


class LoadSceneOutput(BaseModel):
    scene_path: Path = Field(..., description="Path to the checked scene document (s01 compatible)")
    metadata_path: Optional[Path] = Field(None, description="Path to metadata.json with per-mesh counts")
    num_meshes: int = Field(0, description="Number of meshes in the scene")
    num_vertices: int = Field(0, description="Total vertex count across all meshes")
    num_corners: int = Field(0, description="Total face-run length across all meshes")
    num_polygons: int = Field(0, description="Total polygon count across all meshes")
