"""
EDI response models - ordered artifact lists.
"""

from typing import List

from pydantic import BaseModel, Field

from edi_core.models.artifact import ResponseArtifact


class EdiResponse(BaseModel):
    """Ordered, non-empty list of artifacts; acknowledgments come first."""

    response: List[ResponseArtifact] = Field(
        ..., description="Artifacts in delivery order", min_length=1
    )

    class Config:
        json_schema_extra = {
            "example": {
                "response": [
                    {
                        "success": True,
                        "filename": "ASN_ACK_x1.txt",
                        "content": "ASN acknowledged: ACCEPTED, receipt to follow",
                        "mimeType": "plain/text",
                        "message": "File processed successfully",
                    },
                    {
                        "success": True,
                        "filename": "ASN_RECEIPT_x1.txt",
                        "content": "ASN received: receipt RCV0001 for shipment SHP0001",
                        "mimeType": "plain/text",
                        "message": "File processed successfully",
                    },
                ]
            }
        }

    def to_payload(self) -> dict:
        """Serialize with wire field names (``mimeType``)."""
        return self.model_dump(mode="json", by_alias=True)
