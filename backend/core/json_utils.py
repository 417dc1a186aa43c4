"""JSON utilities with orjson optimization.

`json_dumps` / `json_loads` use orjson when available, falling back to stdlib
json. Game data payloads are pushed on every export, so the faster encoder is
worth having.

Usage:
    from backend.core.json_utils import json_dumps, json_loads

    raw = json_loads(path.read_bytes())
    payload = json_dumps(game_data, indent=2)
"""

from __future__ import annotations

from typing import Any

try:
    import orjson

    def json_dumps(obj: Any, *, indent: int | None = None) -> str:
        """Serialize obj to a compact JSON string using orjson.

        Args:
            obj: Object to serialize
            indent: If set, pretty-print with a 2-space indent (orjson only
                supports 2).
        """
        option = 0
        if indent:
            option |= orjson.OPT_INDENT_2
        return orjson.dumps(obj, option=option).decode("utf-8")

    def json_loads(data: str | bytes) -> Any:
        return orjson.loads(data)

except ImportError:
    import json

    def json_dumps(obj: Any, *, indent: int | None = None) -> str:
        """Serialize obj to a JSON string using stdlib json.

        Fallback when orjson is not available.
        """
        if indent:
            return json.dumps(obj, indent=2, ensure_ascii=False)
        return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)

    def json_loads(data: str | bytes) -> Any:
        return json.loads(data)
