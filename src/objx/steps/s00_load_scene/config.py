"""Configuration for Step 00: Load scene document."""

from pydantic import BaseModel, Field


class LoadSceneConfig(BaseModel):
    strict: bool = Field(
        False, description="Fail on face-run or attribute problems instead of logging warnings"
    )
    write_metadata: bool = Field(True, description="Write per-mesh counts to metadata.json")
