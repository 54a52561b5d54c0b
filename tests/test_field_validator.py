"""
Test suite for classification field validation.
"""

import pytest

from edi_core.services.validation import FieldValidator, ValidationOutcome

TRANSACTION_TYPES = "[GETSCHEMA, ORDER, ASN, ITEM, ERRORRESPONSE, ERRORTIMEOUT]"


@pytest.fixture
def validator():
    return FieldValidator()


class TestTransactionAndFormat:
    """Test the first two checks, which apply to every transaction."""

    def test_unknown_transaction_type(self, validator):
        """Test an unknown transaction type is reported with the valid list."""
        outcome = validator.validate("INVOICE", None, None, "ACK")

        assert outcome == ValidationOutcome.invalid(
            f"Invalid TRANSACTION TYPE: 'INVOICE'. Valid values are: {TRANSACTION_TYPES}"
        )

    def test_transaction_type_is_case_insensitive(self, validator):
        """Test lower-case values are accepted."""
        assert validator.validate("asn", None, "json", "receipt").is_valid

    def test_unknown_format(self, validator):
        """Test an unknown format is rejected."""
        outcome = validator.validate("ASN", None, "XML", "ACK")

        assert not outcome.is_valid
        assert outcome.message == "Invalid FORMAT: 'XML'. Valid values are: [EDI, JSON]"

    def test_absent_format_is_valid(self, validator):
        """Test a missing or blank format never fails."""
        assert validator.validate("ITEM", None, None, "ACK").is_valid
        assert validator.validate("ITEM", None, "", "ACK").is_valid

    def test_transaction_type_reported_before_format(self, validator):
        """Test the first failing check wins when several fields are bad."""
        outcome = validator.validate("BOGUS", None, "XML", None)

        assert outcome.message.startswith("Invalid TRANSACTION TYPE: 'BOGUS'")


class TestErrorSimulations:
    """Test ERRORRESPONSE and ERRORTIMEOUT skip the remaining checks."""

    @pytest.mark.parametrize("transaction_type", ["ERRORRESPONSE", "errortimeout"])
    def test_response_and_order_type_not_checked(self, validator, transaction_type):
        """Test missing or odd response/order types are accepted."""
        assert validator.validate(transaction_type, None, None, None).is_valid
        assert validator.validate(transaction_type, "BOAT", "EDI", "NONSENSE").is_valid

    def test_format_still_checked(self, validator):
        """Test format validation runs before the error-simulation shortcut."""
        outcome = validator.validate("ERRORRESPONSE", None, "PDF", None)

        assert outcome.message == "Invalid FORMAT: 'PDF'. Valid values are: [EDI, JSON]"


class TestResponseType:
    """Test response type presence and per-transaction domains."""

    def test_response_type_required(self, validator):
        """Test a missing response type."""
        outcome = validator.validate("ORDER", "LTL", "EDI", None)

        assert outcome.message == "RESPONSE TYPE is required."

    def test_blank_response_type_required(self, validator):
        """Test a blank response type counts as missing."""
        assert validator.validate("ASN", None, None, "  ").message == (
            "RESPONSE TYPE is required."
        )

    @pytest.mark.parametrize(
        "transaction_type,response_type,allowed",
        [
            ("GETSCHEMA", "ACK", "[ASN, ITEM, ORDER, SHIPCONFIRM, RECEIPT]"),
            ("ORDER", "RECEIPT", "[ACK, SHIPCONFIRM]"),
            ("ASN", "SHIPCONFIRM", "[ACK, RECEIPT]"),
            ("ITEM", "RECEIPT", "[ACK]"),
        ],
    )
    def test_response_type_outside_transaction_domain(
        self, validator, transaction_type, response_type, allowed
    ):
        """Test the message names the transaction-specific allowed set."""
        outcome = validator.validate(transaction_type, "LTL", None, response_type)

        assert outcome.message == (
            f"Invalid RESPONSE TYPE: '{response_type}' for TRANSACTION TYPE "
            f"'{transaction_type}'. Valid values are: {allowed}"
        )

    @pytest.mark.parametrize(
        "transaction_type,response_type",
        [
            ("GETSCHEMA", "ASN"),
            ("GETSCHEMA", "ITEM"),
            ("GETSCHEMA", "ORDER"),
            ("GETSCHEMA", "SHIPCONFIRM"),
            ("GETSCHEMA", "RECEIPT"),
            ("ASN", "ACK"),
            ("ASN", "RECEIPT"),
            ("ITEM", "ACK"),
        ],
    )
    def test_allowed_combinations(self, validator, transaction_type, response_type):
        """Test every allowed non-ORDER combination validates."""
        assert validator.validate(transaction_type, None, None, response_type).is_valid


class TestOrderType:
    """Test order type checks, which apply to ORDER only."""

    def test_order_type_required_for_order(self, validator):
        """Test a missing order type on ORDER."""
        outcome = validator.validate("ORDER", None, "EDI", "ACK")

        assert outcome.message == (
            "ORDER TYPE is required when TRANSACTION TYPE is 'ORDER'. "
            "Valid values are: [LTL, PARCEL]"
        )

    def test_unknown_order_type(self, validator):
        """Test an unknown order type on ORDER."""
        outcome = validator.validate("ORDER", "TRUCKLOAD", "EDI", "ACK")

        assert outcome.message == (
            "Invalid ORDER TYPE: 'TRUCKLOAD'. Valid values are: [LTL, PARCEL]"
        )

    def test_response_type_checked_before_order_type(self, validator):
        """Test check 5 runs before check 6."""
        outcome = validator.validate("ORDER", None, None, "RECEIPT")

        assert outcome.message.startswith("Invalid RESPONSE TYPE: 'RECEIPT'")

    @pytest.mark.parametrize("order_type", ["LTL", "parcel"])
    @pytest.mark.parametrize("response_type", ["ACK", "shipconfirm"])
    def test_valid_orders(self, validator, order_type, response_type):
        """Test ORDER with a known order and response type."""
        assert validator.validate("ORDER", order_type, "JSON", response_type).is_valid

    def test_order_type_ignored_outside_order(self, validator):
        """Test other transactions do not validate the order type."""
        assert validator.validate("GETSCHEMA", "ANYTHING", None, "ORDER").is_valid
