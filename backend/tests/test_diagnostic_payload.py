from __future__ import annotations

from diagkit.json_types import UNDEFINED
from diagkit.services.diagnostics import PathConvention, prepare_diagnostic_payload


def test_paths_are_redacted_before_keys_are_flattened() -> None:
    payload = {
        "image": {"sourcePath": "/home/john/rpi.img", "sizeBytes": 1024},
        "drive": {"devicePath": "/dev/sdb"},
        "env": {"ETCHER_DISABLE_UPDATES": "1"},
        "flashedPaths": ["/home/john/a.img", "relative/b.img"],
    }

    assert prepare_diagnostic_payload(payload, convention=PathConvention.POSIX) == {
        "Image Source Path": "rpi.img",
        "Image Size Bytes": 1024,
        "Drive Device Path": "/dev/sdb",
        "Env ETCHER_DISABLE_UPDATES": "1",
        "Flashed Paths": ["a.img", "relative/b.img"],
    }


def test_scalar_payloads_are_wrapped() -> None:
    assert prepare_diagnostic_payload("C:\\Users\\John\\rpi.img", convention="windows") == {
        "Value": "rpi.img"
    }
    assert prepare_diagnostic_payload(None) == {"Value": None}


def test_undefined_payload_stays_undefined() -> None:
    assert prepare_diagnostic_payload() is UNDEFINED
