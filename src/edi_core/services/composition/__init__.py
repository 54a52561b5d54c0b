from edi_core.services.composition.response_composer import ResponseComposer

__all__ = ["ResponseComposer"]
