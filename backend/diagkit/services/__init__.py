# backend/diagkit/services/__init__.py
from __future__ import annotations

"""
Services package.

- information: release type classification and the running version
- diagnostics: payload flattening and path redaction
- statsig_client: telemetry events carrying sanitized metadata
"""
