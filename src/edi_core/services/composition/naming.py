"""
Filename, extension, MIME type and content-key derivation for artifacts.
"""

import uuid as uuid_lib
from typing import Optional, Tuple

MIME_TYPE_EDI = "application/edi-x12"
MIME_TYPE_JSON = "application/json"
MIME_TYPE_TEXT = "plain/text"

UNKNOWN_SEGMENT = "UNKNOWN"
ERROR_MARKER = "ERROR"
VALIDATION_ERROR_MARKER = "VALIDATION_ERROR"


def _present(value: Optional[str]) -> bool:
    return value is not None and value.strip() != ""


def segment(value: Optional[str], fallback: Optional[str] = None) -> Optional[str]:
    """Canonical filename/key segment: trimmed and upper-cased."""
    if not _present(value):
        return fallback
    return value.strip().upper()


def determine_mime_type(format: Optional[str]) -> str:
    fmt = segment(format)
    if fmt == "EDI":
        return MIME_TYPE_EDI
    if fmt == "JSON":
        return MIME_TYPE_JSON
    return MIME_TYPE_TEXT


def determine_file_extension(format: Optional[str]) -> str:
    """``edi``/``json`` for known formats, the lower-cased literal otherwise, ``txt`` when absent."""
    if not _present(format):
        return "txt"
    return format.strip().lower()


def build_filename(uuid: str, extension: str, *segments: Optional[str]) -> str:
    """
    Join classification segments, the caller's uuid and the extension.

    Absent segments are skipped; the uuid is used verbatim.
    """
    parts = [part for part in segments if part]
    parts.append(uuid)
    return "_".join(parts) + "." + extension


def build_error_filename(
    transaction_type: Optional[str],
    response_type: Optional[str],
    uuid: Optional[str],
    format: Optional[str],
) -> str:
    return build_filename(
        uuid if _present(uuid) else generate_opaque_id(),
        determine_file_extension(format),
        segment(transaction_type, UNKNOWN_SEGMENT),
        segment(response_type, UNKNOWN_SEGMENT),
        ERROR_MARKER,
    )


def build_validation_error_filename(
    transaction_type: Optional[str],
    response_type: Optional[str],
    uuid: str,
    format: Optional[str],
) -> str:
    return build_filename(
        uuid,
        determine_file_extension(format),
        segment(transaction_type, UNKNOWN_SEGMENT),
        segment(response_type, UNKNOWN_SEGMENT),
        VALIDATION_ERROR_MARKER,
    )


def content_keys(format: Optional[str], *segments: Optional[str]) -> Tuple[str, ...]:
    """
    Candidate content keys, most specific first.

    ``content_keys("edi", "ORDER", "LTL", "ACK")`` yields
    ``("ORDER.LTL.ACK.EDI", "ORDER.LTL.ACK")``.
    """
    base = ".".join(part for part in segments if part)
    fmt = segment(format)
    if fmt:
        return (f"{base}.{fmt}", base)
    return (base,)


def generate_opaque_id() -> str:
    """Short random identifier used when the caller's uuid is unavailable."""
    return str(uuid_lib.uuid4())[:8]
