import json

from typing import Any

from .extractor import Result


def toDict(result: Result) -> dict[str, Any]:
    return {
        "extracted": {key: list(values) for key, values in result.extracted.items()},
        "trailing": list(result.trailing),
    }


def toJson(result: Result, indent: int = 2) -> str:
    """Serializes `result` as pretty-printed JSON, keys in extraction order."""
    return json.dumps(toDict(result), indent=indent, ensure_ascii=False)
