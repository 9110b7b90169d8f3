"""
editscript.moves — Collapse delete/insert pairs into moves.

A deletion of some value followed (or preceded) elsewhere by an
insertion of an equal value is nothing more than moving that value.
This pass rewrites such pairs into a single Move after the evaluator
has finished, so cost functions never see a Move.

PAIRING IS FIRST-MATCH
──────────────────────
For every Insert the whole script is scanned for the first Delete with
an equal value, and vice versa.  When several deletions and insertions
share a value, the pairing follows scan order, not index distance:

    [Delete("x", 0), Delete("x", 4), Insert("x", 2)]
        → [Move("x", 0, 2), Move("x", 4, 2)]

Both halves of a matched pair produce the same Move, which is then
de-duplicated; output keeps input order.
"""

from typing import Optional

from .ops import Delete, EditOp, EditScript, Insert, Move


def reduce_moves(script: EditScript) -> EditScript:
    """
    Rewrite matching Insert/Delete pairs of `script` into Move operations.

    Substitutions and unmatched insertions/deletions are kept as they
    are.  Duplicate entries are dropped, keeping the first occurrence.
    """
    reduced: EditScript = []
    for step in script:
        move = _move_for(script, step)
        candidate = move if move is not None else step
        # Equality scan rather than a set: values need not be hashable.
        if candidate not in reduced:
            reduced.append(candidate)
    return reduced


def _move_for(script: EditScript, step: EditOp) -> Optional[Move]:
    """Return the Move that `step` takes part in, or None."""
    if isinstance(step, Insert):
        other = _find(script, Delete, step.value)
        if other is not None:
            return Move(step.value, other.index, step.index)
    elif isinstance(step, Delete):
        other = _find(script, Insert, step.value)
        if other is not None:
            return Move(step.value, step.index, other.index)
    return None


def _find(script: EditScript, op_type: type, value) -> Optional[EditOp]:
    for op in script:
        if type(op) is op_type and op.value == value:
            return op
    return None
