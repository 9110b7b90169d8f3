"""
editscript.formats — Input adapters and the external form of edit scripts.

Supported conversions:
    • Text → list of codepoints, any other iterable → list of elements
    • EditOp ↔ tagged record (dict) ↔ JSON
    • EditOp → compact tagged tuple
"""

import json
from typing import Any, Iterable, Mapping, Union

from .ops import (
    Delete, EditKind, EditOp, EditScript, Insert, Move, Substitute,
)


# ═══════════════════════════════════════════════════════════════════
#  INPUT ADAPTERS
# ═══════════════════════════════════════════════════════════════════

def to_units(value: Union[str, Iterable[Any]]) -> list:
    """
    Decompose an input into the list of units the evaluator compares.

    Strings are split into codepoints; normalization (NFC/NFD, grapheme
    clusters) is up to the caller.  Any other iterable is materialized
    as-is, so bytes become a list of ints.
    """
    try:
        return list(value)
    except TypeError:
        raise TypeError(
            f"expected a string or an iterable, got {type(value).__name__}"
        ) from None


# ═══════════════════════════════════════════════════════════════════
#  TAGGED RECORDS ↔ EDIT OPERATIONS
# ═══════════════════════════════════════════════════════════════════

_INDEXED = {
    EditKind.INSERT: Insert,
    EditKind.DELETE: Delete,
    EditKind.SUBSTITUTE: Substitute,
}


def op_to_dict(op: EditOp) -> dict:
    """
    Convert an edit operation to its tagged-record form.

        Insert("g", 0)       → {"kind": "insert", "value": "g", "index": 0}
        Move("r", 3, 2)      → {"kind": "move", "value": "r",
                                "from_index": 3, "to_index": 2}
    """
    if isinstance(op, Move):
        return {
            "kind": op.kind.value,
            "value": op.value,
            "from_index": op.from_index,
            "to_index": op.to_index,
        }
    if isinstance(op, (Insert, Delete, Substitute)):
        return {"kind": op.kind.value, "value": op.value, "index": op.index}
    raise TypeError(f"Unknown edit operation: {op!r}")


def op_from_dict(record: Mapping[str, Any]) -> EditOp:
    """Inverse of op_to_dict."""
    try:
        kind = EditKind(record["kind"])
    except KeyError:
        raise ValueError(f"Edit record has no 'kind': {record!r}") from None
    except ValueError:
        raise ValueError(f"Unknown edit kind: {record['kind']!r}") from None

    try:
        if kind is EditKind.MOVE:
            return Move(record["value"], record["from_index"], record["to_index"])
        return _INDEXED[kind](record["value"], record["index"])
    except KeyError as exc:
        raise ValueError(
            f"Edit record of kind {kind.value!r} is missing field {exc.args[0]!r}"
        ) from None


def script_to_dicts(script: EditScript) -> list[dict]:
    return [op_to_dict(op) for op in script]


def script_from_dicts(records: Iterable[Mapping[str, Any]]) -> EditScript:
    return [op_from_dict(record) for record in records]


# ═══════════════════════════════════════════════════════════════════
#  JSON
# ═══════════════════════════════════════════════════════════════════

def script_to_json(script: EditScript, **kwargs) -> str:
    """Serialize an edit script to a JSON array of tagged records."""
    return json.dumps(script_to_dicts(script), **kwargs)


def script_from_json(text: str) -> EditScript:
    """Parse a JSON array of tagged records into an edit script."""
    records = json.loads(text)
    if not isinstance(records, list):
        raise ValueError("Edit script JSON must be an array of records")
    return script_from_dicts(records)


# ═══════════════════════════════════════════════════════════════════
#  TAGGED TUPLES
# ═══════════════════════════════════════════════════════════════════

def script_to_tuples(script: EditScript) -> list[tuple]:
    """
    Compact tuple form, handy for assertions and logs:

        [("insert", "g", 0), ("move", "r", 3, 2)]
    """
    return [tuple(op_to_dict(op).values()) for op in script]
