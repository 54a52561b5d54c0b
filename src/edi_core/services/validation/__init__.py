from edi_core.services.validation.field_validator import FieldValidator, ValidationOutcome

__all__ = ["FieldValidator", "ValidationOutcome"]
