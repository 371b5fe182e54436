"""JSON decoding that matches what a browser's JSON.parse accepts."""

import json
from typing import Any


def _reject_constant(name: str) -> Any:
    # json.loads lets NaN/Infinity through; responses carrying them cannot be re-serialized
    raise ValueError(f"Out of range float value {name} is not valid JSON")


def loads_strict(data: str | bytes) -> Any:
    return json.loads(data, parse_constant=_reject_constant)
