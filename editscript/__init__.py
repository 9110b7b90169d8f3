"""
editscript
==========

Minimal edit scripts and edit distances between sequences.

    edits([22, 15, "X"], [22, 7, 15, 186, 33])
        → [Insert(7, 1), Substitute(186, 3), Insert(33, 4)]
    edits("avery", "garvey")
        → [Insert("g", 0), Move("r", 3, 2)]
    levenshtein("kitten", "sitting")   → 3

Scripts are built by a memoized dynamic program over suffix pairs with
a caller-supplied cost per insertion, deletion and substitution, then
post-processed so that a deletion and an insertion of the same value
become a single move.  Elements can be anything comparable with `==`;
strings are compared codepoint by codepoint.
"""

from editscript.ops import (
    # Types
    EditKind,
    EditOp,
    Insert,
    Delete,
    Substitute,
    Move,
    # Costs
    DEFAULT_COST,
    unit_cost,
)
from editscript.core import (
    edits,
    edit_distance,
    levenshtein,
    normalized_levenshtein,
    patch,
)
from editscript.moves import reduce_moves
from editscript.formats import (
    to_units,
    op_to_dict, op_from_dict,
    script_to_dicts, script_from_dicts,
    script_to_json, script_from_json,
    script_to_tuples,
)

__version__ = "0.1.0"
__all__ = [
    "EditKind", "EditOp", "Insert", "Delete", "Substitute", "Move",
    "DEFAULT_COST", "unit_cost",
    "edits", "edit_distance", "levenshtein", "normalized_levenshtein", "patch",
    "reduce_moves",
    "to_units", "op_to_dict", "op_from_dict",
    "script_to_dicts", "script_from_dicts",
    "script_to_json", "script_from_json",
    "script_to_tuples",
]
