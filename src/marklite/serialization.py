"""Token serialization: JSON round-trip for marklite token sequences.

Converts tokens to/from JSON-compatible dicts. Useful for:
- Caching lexed documents to disk
- Debugging and inspecting what the lexer produced
- Rendering a token stream in a different process

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from marklite import tokenize
    from marklite.serialization import to_json, from_json

    tokens = tokenize("# Hello **World**")
    json_str = to_json(tokens)
    restored = from_json(json_str)
    assert tokens == restored

Thread Safety:
    All functions are pure: safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from marklite.errors import SerializationError
from marklite.tokens import Token, TokenType


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    The token type is stored by name. Source coordinates are stored under
    ``location`` in the same shape as SourceLocation.

    Args:
        token: Any marklite token, EOF included.

    Returns:
        Dict with ``type``, ``value``, ``level``, ``url`` and ``location``.

    """
    loc = token.location
    return {
        "type": token.type.name,
        "value": token.value,
        "level": token.level,
        "url": token.url,
        "location": {
            "lineno": loc.lineno,
            "col_offset": loc.col_offset,
            "offset": loc.offset,
            "end_offset": loc.end_offset,
        },
    }


def from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a token from a dict.

    Args:
        data: Dict as produced by to_dict. ``level``, ``url`` and
            ``location`` are optional.

    Returns:
        Token (frozen dataclass).

    Raises:
        SerializationError: If ``type`` is missing or unknown, or ``value``
            is missing.

    """
    type_name = data.get("type")
    if type_name is None:
        msg = "Missing 'type' field in serialized token"
        raise SerializationError(msg)

    try:
        token_type = TokenType[type_name]
    except KeyError:
        msg = f"Unknown token type: {type_name!r}"
        raise SerializationError(msg) from None

    if "value" not in data:
        msg = f"Missing 'value' field in serialized {type_name} token"
        raise SerializationError(msg)

    loc = data.get("location") or {}
    return Token(
        type=token_type,
        value=data["value"],
        level=data.get("level", 0),
        url=data.get("url"),
        _lineno=loc.get("lineno", 1),
        _col=loc.get("col_offset", 1),
        _start_offset=loc.get("offset", 0),
        _end_offset=loc.get("end_offset", 0),
    )


def to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize a token sequence to a JSON string.

    Output is deterministic (sorted keys) for cache-key stability.

    Args:
        tokens: Token sequence to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string holding a list of token dicts.

    """
    return json.dumps([to_dict(t) for t in tokens], sort_keys=True, indent=indent)


def from_json(data: str) -> list[Token]:
    """Deserialize a token sequence from a JSON string.

    Args:
        data: JSON string (as produced by to_json).

    Returns:
        List of tokens in their original order.

    Raises:
        SerializationError: If the JSON is malformed or isn't a list of
            token dicts.

    """
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as e:
        msg = f"Invalid token JSON: {e}"
        raise SerializationError(msg) from e

    if not isinstance(raw, list):
        msg = f"Expected a list of tokens, got {type(raw).__name__}"
        raise SerializationError(msg)

    tokens: list[Token] = []
    for item in raw:
        if not isinstance(item, dict):
            msg = f"Expected a token dict, got {type(item).__name__}"
            raise SerializationError(msg)
        tokens.append(from_dict(item))
    return tokens
