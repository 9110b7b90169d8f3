"""
editscript.ops — Edit operations and cost functions.

An edit script is a list of operations drawn from a closed set of four
variants:

    Insert(value, index)              index into the FINAL target
    Delete(value, index)              index into the ORIGINAL source
    Substitute(value, index)          value is the replacement, index
                                      is its position in the target
    Move(value, from_index, to_index) a Delete/Insert pair of equal
                                      value, synthesized after costing

Cost functions receive ``(kind, value, index)`` for the three primitive
operations only.  A Move is never costed: it is built from operations
whose costs were already committed.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, ClassVar, Union


class EditKind(str, Enum):
    """Tag of an edit operation.  Compares equal to its plain name."""
    INSERT = "insert"
    DELETE = "delete"
    SUBSTITUTE = "substitute"
    MOVE = "move"


class EditOp:
    """Base class for edit operations.  Not instantiated directly."""
    __slots__ = ()

    kind: ClassVar[EditKind]


@dataclass(frozen=True, slots=True)
class Insert(EditOp):
    """Insert `value` so that it ends up at `index` in the target."""
    kind: ClassVar[EditKind] = EditKind.INSERT

    value: Any
    index: int


@dataclass(frozen=True, slots=True)
class Delete(EditOp):
    """Remove the element at `index` of the source."""
    kind: ClassVar[EditKind] = EditKind.DELETE

    value: Any
    index: int


@dataclass(frozen=True, slots=True)
class Substitute(EditOp):
    """
    Replace a source element by `value`.

    `index` is the position of the replacement in the target, which is
    what the evaluator knows at the moment it decides on a substitution.
    """
    kind: ClassVar[EditKind] = EditKind.SUBSTITUTE

    value: Any
    index: int


@dataclass(frozen=True, slots=True)
class Move(EditOp):
    """A deletion at `from_index` and an insertion at `to_index` of the same value."""
    kind: ClassVar[EditKind] = EditKind.MOVE

    value: Any
    from_index: int
    to_index: int


PrimitiveOp = Union[Insert, Delete, Substitute]
EditScript = list[EditOp]
CostFunction = Callable[[EditKind, Any, int], float]


# Cost of every primitive operation under the unit cost function.
DEFAULT_COST = 1


def unit_cost(kind: EditKind, value: Any, index: int) -> int:
    """Default cost function: every insertion, deletion and substitution costs 1."""
    return DEFAULT_COST


def op_cost(op: PrimitiveOp, cost: CostFunction) -> float:
    """Apply `cost` to a primitive operation."""
    return cost(op.kind, op.value, op.index)
