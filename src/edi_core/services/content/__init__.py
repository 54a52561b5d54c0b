from edi_core.services.content.content_resolver import ContentResolver

__all__ = ["ContentResolver"]
