"""
Response artifact model - one synthesized document descriptor.
"""

from pydantic import BaseModel, Field


class ResponseArtifact(BaseModel):
    """Immutable descriptor of a mock document returned to the caller."""

    success: bool = Field(..., description="Whether the artifact represents a success")
    filename: str = Field(..., description="Deterministic artifact filename")
    content: str = Field(..., description="Artifact body")
    mime_type: str = Field(..., alias="mimeType", description="MIME type of the body")
    message: str = Field(..., description="Human-readable status message")

    class Config:
        frozen = True
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "success": True,
                "filename": "ORDER_LTL_ACK_abc123.edi",
                "content": "ISA*00*          *00*          *ZZ*SENDER~",
                "mimeType": "application/edi-x12",
                "message": "File processed successfully",
            }
        }
