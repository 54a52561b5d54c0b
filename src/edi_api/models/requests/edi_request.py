"""
EDI request envelope - binds the wire format and its field-name variants.
"""

from typing import Optional

from pydantic import AliasChoices, BaseModel, Field

from edi_core.models.transaction import TransactionDetails, TransactionRequest


class RequestDetails(BaseModel):
    """Classification fields of an EDI request."""

    transaction_type: Optional[str] = Field(
        None,
        validation_alias=AliasChoices(
            "TRANSACTION TYPE",
            "TRANSACTION_TYPE",
            "TRANSACTIONTYPE",
            "transactionType",
            "transaction_type",
        ),
        serialization_alias="TRANSACTION TYPE",
        description="GETSCHEMA, ORDER, ASN, ITEM, ERRORRESPONSE or ERRORTIMEOUT",
    )
    order_type: Optional[str] = Field(
        None,
        validation_alias=AliasChoices(
            "ORDER TYPE", "ORDER_TYPE", "ORDERTYPE", "orderType", "order_type"
        ),
        serialization_alias="ORDER TYPE",
        description="LTL or PARCEL, required for ORDER",
    )
    format: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("FORMAT", "format", "Format"),
        serialization_alias="FORMAT",
        description="EDI or JSON; plain text when omitted",
    )
    response_type: Optional[str] = Field(
        None,
        validation_alias=AliasChoices(
            "RESPONSE TYPE",
            "RESPONSE_TYPE",
            "RESPONSETYPE",
            "responseType",
            "response_type",
        ),
        serialization_alias="RESPONSE TYPE",
        description="Artifact selector, allowed values depend on the transaction type",
    )
    input_file: Optional[str] = Field(
        None,
        validation_alias=AliasChoices(
            "Input File", "INPUT_FILE", "inputFile", "InputFile", "input_file"
        ),
        serialization_alias="Input File",
        description="Inbound document; accepted but not interpreted",
    )

    class Config:
        populate_by_name = True

    def to_details(self) -> TransactionDetails:
        return TransactionDetails(
            transaction_type=self.transaction_type,
            order_type=self.order_type,
            format=self.format,
            response_type=self.response_type,
        )


class EdiRequest(BaseModel):
    """Request model for the EDI process endpoint - binding only."""

    uuid: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("UUID", "uuid", "Uuid"),
        serialization_alias="UUID",
        description="Caller-supplied identifier echoed into every filename",
    )
    request: Optional[RequestDetails] = Field(
        None,
        validation_alias=AliasChoices("Request", "request", "REQUEST"),
        serialization_alias="Request",
        description="Transaction classification fields",
    )

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "UUID": "abc123",
                "Request": {
                    "TRANSACTION TYPE": "ORDER",
                    "ORDER TYPE": "LTL",
                    "FORMAT": "EDI",
                    "RESPONSE TYPE": "ACK",
                },
            }
        }

    def to_transaction_request(self) -> TransactionRequest:
        return TransactionRequest(
            uuid=self.uuid,
            details=self.request.to_details() if self.request is not None else None,
        )
