"""Configuration for Step 01: OBJ export."""

from pydantic import BaseModel, Field


class ObjExportConfig(BaseModel):
    precision: int = Field(6, ge=0, le=17, description="Decimals written for every float field")
    object_prefix: str = Field("obj", description="Label prefix of 'o' lines (followed by mesh order)")
    group_prefix: str = Field("grp", description="Label prefix of 'g' lines (followed by mesh order)")
    write_normals: bool = Field(True, description="Write 'vn' blocks and normal face slots when present")
    write_uvs: bool = Field(True, description="Write 'vt' blocks and texcoord face slots when present")
