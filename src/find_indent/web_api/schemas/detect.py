"""
Detect Schemas
==============
Request and response models for the detect endpoint.
"""
from pydantic import BaseModel, ConfigDict, Field


class DetectRequest(BaseModel):
    """Request to detect the indentation style of a text"""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "text": "sub foo {\n    return 1;\n}\n",
                "skip_doc_comments": False,
            }
        }
    )

    text: str = Field(..., description="Source text, starting at a line boundary")
    skip_doc_comments: bool = Field(default=False, description="Ignore POD blocks")


class DetectResponse(BaseModel):
    """Detected indentation style"""

    signature: str = Field(..., description="Short form: s<N>, t<N>, m<N> or u")
    style: str = Field(..., description="spaces, tabs, mixed or unknown")
    width: int = Field(..., description="Columns per level (0 when unknown)")
