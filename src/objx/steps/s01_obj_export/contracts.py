"""I/O contracts for Step 01: OBJ export (scene → .obj)."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field


class ObjExportInput(BaseModel):
    scene_path: Path = Field(..., description="Path to the JSON scene document")
    output_path: Optional[Path] = Field(
        None, description="Destination .obj file (default: processed/<scene stem>.obj)"
    )


class ObjExportOutput(BaseModel):
    obj_path: Path = Field(..., description="Path to the written .obj file")
    num_meshes: int = Field(0, description="Number of meshes written")
    num_vertices: int = Field(0, description="Number of 'v' records")
    num_normals: int = Field(0, description="Number of 'vn' records (one per corner)")
    num_uvs: int = Field(0, description="Number of 'vt' records (one per corner)")
    num_faces: int = Field(0, description="Number of 'f' records")
