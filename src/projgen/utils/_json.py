from typing import cast

import orjson

_DUMP_OPTIONS = orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS | orjson.OPT_APPEND_NEWLINE


def load_json_object(data: bytes | str) -> dict[str, object]:
    """Parse JSON data that must contain an object at the top level.

    Args:
        data: The raw JSON document.

    Returns:
        The decoded object.

    Raises:
        ValueError: If the data is not valid JSON or not an object.
    """
    try:
        decoded = orjson.loads(data)
    except orjson.JSONDecodeError as e:
        msg = f"Invalid JSON: {e}"
        raise ValueError(msg) from e

    if not isinstance(decoded, dict):
        msg = f"Expected a JSON object, got {type(decoded).__name__}"
        raise ValueError(msg)  # noqa: TRY004
    return cast("dict[str, object]", decoded)


def dump_json_pretty(value: dict[str, object]) -> bytes:
    """Encode a mapping as pretty-printed JSON with sorted keys.

    Output is byte-identical for equal inputs and ends with a newline.

    Raises:
        TypeError: If the value contains data that cannot be encoded.
    """
    return orjson.dumps(value, option=_DUMP_OPTIONS)
