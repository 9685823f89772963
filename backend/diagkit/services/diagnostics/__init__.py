from __future__ import annotations

"""
Diagnostic payload preparation.

This package provides:
- key_humanizer: flatten nested payloads into "Start Case" keyed mappings
- path_redactor: replace absolute filesystem paths with their basename

and prepare_diagnostic_payload, which applies both (redaction first) to a
payload before it is logged or sent with a telemetry event.
"""

from diagkit.json_types import UNDEFINED, JSONValue

from .key_humanizer import (  # noqa: F401
    KEY_RULES,
    ROOT_VALUE_KEY,
    humanize_key,
    is_constant_key,
    is_start_case,
    make_flat_start_case_object,
    start_case,
)
from .path_redactor import (  # noqa: F401
    PathConvention,
    default_path_convention,
    hide_absolute_paths_in_object,
    is_absolute_path,
    is_device_path,
    redact_path,
)


def prepare_diagnostic_payload(
    value: object = UNDEFINED,
    *,
    convention: PathConvention | str | None = None,
) -> JSONValue:
    """Redact absolute paths in `value`, then flatten it with Start Case keys."""
    redacted = hide_absolute_paths_in_object(value, convention=convention)
    return make_flat_start_case_object(redacted)
