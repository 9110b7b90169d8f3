"""
editscript.core — Minimal edit scripts by memoized dynamic programming
=====================================================================

§1  THE PROBLEM
───────────────

Given a source and a target sequence of comparable elements, find the
cheapest list of insertions, deletions and substitutions that turns the
source into the target, under a cost function chosen by the caller:

    cost(kind, value, index) → number

With the unit cost function every primitive operation costs 1 and the
minimal total is the Levenshtein distance.  Other cost functions bias
the shape of the script; making substitutions cost 3, for instance,
makes an insert+delete pair (cost 2) the cheaper way to change one
element into another.


§2  THE RECURRENCE
──────────────────

Both inputs are read back to front.  A state is a pair of remaining
suffixes of the REVERSED inputs, identified by their lengths (i, j).
The head of the remaining source is source[i-1]; the number of elements
behind it, i-1, is exactly its index in the forward source.  The same
holds for the target.  This is what makes the indices in the script
refer to forward positions without any bookkeeping.

    E(0, 0) = ([], 0)
    E(i, 0) = Delete(source[i-1], i-1) : E(i-1, 0)
    E(0, j) = Insert(target[j-1], j-1) : E(0, j-1)

    E(i, j) = E(i-1, j-1)                    if source[i-1] == target[j-1]
            = min over, in this order:
                Delete(source[i-1], i-1)     : E(i-1, j)
                Insert(target[j-1], j-1)     : E(i, j-1)
                Substitute(target[j-1], j-1) : E(i-1, j-1)

where `op : E` prepends op to the script of E and adds cost(op) to its
cost.  Ties go to the first candidate in the order above.  Matching
heads never appear in the script and cost nothing.

The script of E(len(source), len(target)) starts with the operations on
the LAST elements, so it is reversed once at the end to obtain forward
(source-traversal) order.


§3  EVALUATION
──────────────

Every state is evaluated at most once per call and kept in a memo that
belongs to that call alone, giving O(|source|·|target|) states.
Scripts are stored as cons chains `(op, rest)`, so prepending is O(1)
and memo entries share their tails instead of copying them.

The recursion is driven by an explicit work stack in dependency order:
the same states are evaluated, with the same candidates and the same
tie-breaking, as with plain recursion, but the input length is not
limited by the interpreter's recursion limit.

The cost-only `levenshtein` does not need scripts and uses a two-row
table instead.


§4  MOVES
─────────

After the script is in forward order, editscript.moves collapses each
Delete/Insert pair of equal value into a Move.  Costs are committed
before that point, so a cost function never sees a Move.
"""

import logging
from operator import itemgetter
from typing import Any, Iterable, Optional, Union

from .formats import to_units
from .moves import reduce_moves
from .ops import (
    CostFunction, Delete, EditScript, Insert, Move, PrimitiveOp, Substitute,
    op_cost, unit_cost,
)

logger = logging.getLogger(__name__)


Input = Union[str, Iterable[Any]]

# (i, j): lengths of the remaining source and target suffixes.
_State = tuple[int, int]
# A script under construction: nested (op, rest) cells ending in None.
_Chain = Optional[tuple]
_Result = tuple[_Chain, float]


# ═══════════════════════════════════════════════════════════════════
#  MEMOIZED EVALUATOR
# ═══════════════════════════════════════════════════════════════════

class _ScriptSolver:
    """
    Evaluates E(i, j) for one (source, target, cost) triple.

    One instance per top-level call; the memo is discarded with it.
    """

    def __init__(self, source: list, target: list, cost: CostFunction):
        self.source = source
        self.target = target
        self.cost = cost
        self.memo: dict[_State, _Result] = {}

    def solve(self) -> _Result:
        """Return (chain, cost) for the full inputs."""
        root = (len(self.source), len(self.target))
        memo = self.memo
        stack = [root]
        while stack:
            state = stack[-1]
            if state in memo:
                stack.pop()
                continue
            pending = [dep for dep in self._dependencies(*state) if dep not in memo]
            if pending:
                # First dependency on top, so states resolve in candidate order.
                stack.extend(reversed(pending))
                continue
            memo[state] = self._evaluate(*state)
            stack.pop()
        return memo[root]

    def _dependencies(self, i: int, j: int) -> tuple[_State, ...]:
        if i == 0 and j == 0:
            return ()
        if j == 0:
            return ((i - 1, 0),)
        if i == 0:
            return ((0, j - 1),)
        if self.source[i - 1] == self.target[j - 1]:
            return ((i - 1, j - 1),)
        return ((i - 1, j), (i, j - 1), (i - 1, j - 1))

    def _evaluate(self, i: int, j: int) -> _Result:
        """Evaluate one state; all of its dependencies are memoized."""
        memo = self.memo

        if i == 0 and j == 0:
            return None, 0
        if j == 0:
            return self._prepend(Delete(self.source[i - 1], i - 1), memo[i - 1, 0])
        if i == 0:
            return self._prepend(Insert(self.target[j - 1], j - 1), memo[0, j - 1])

        src_hd = self.source[i - 1]
        tgt_hd = self.target[j - 1]
        if src_hd == tgt_hd:
            return memo[i - 1, j - 1]

        candidates = (
            self._prepend(Delete(src_hd, i - 1), memo[i - 1, j]),
            self._prepend(Insert(tgt_hd, j - 1), memo[i, j - 1]),
            self._prepend(Substitute(tgt_hd, j - 1), memo[i - 1, j - 1]),
        )
        # min() returns the first of equal minima.
        return min(candidates, key=itemgetter(1))

    def _prepend(self, op: PrimitiveOp, result: _Result) -> _Result:
        chain, cost = result
        return (op, chain), cost + op_cost(op, self.cost)


def _unroll(chain: _Chain) -> EditScript:
    ops: EditScript = []
    while chain is not None:
        op, chain = chain
        ops.append(op)
    return ops


def _check_cost(cost: CostFunction) -> None:
    if not callable(cost):
        raise TypeError(f"cost must be callable, got {type(cost).__name__}")


def _solve(source: Input, target: Input, cost: CostFunction) -> tuple[EditScript, float]:
    """Run the evaluator and return the forward-ordered script and its cost."""
    _check_cost(cost)
    src = to_units(source)
    tgt = to_units(target)

    solver = _ScriptSolver(src, tgt, cost)
    chain, total = solver.solve()
    logger.debug(
        "Evaluated %d suffix pairs for %d x %d elements, cost %s",
        len(solver.memo), len(src), len(tgt), total,
    )

    script = _unroll(chain)
    script.reverse()
    return script, total


# ═══════════════════════════════════════════════════════════════════
#  PUBLIC ENTRY POINTS
# ═══════════════════════════════════════════════════════════════════

def edits(source: Input, target: Input, cost: CostFunction = unit_cost) -> EditScript:
    """
    Minimal edit script turning `source` into `target`.

    `source` and `target` are sequences of elements compared with `==`,
    or strings, which are compared codepoint by codepoint.  `cost` is
    called as ``cost(kind, value, index)`` for every candidate
    insertion, deletion and substitution; any exception it raises
    aborts the call.

    Returns the operations in source-traversal order, with Delete/Insert
    pairs of equal value collapsed into Move operations.

        >>> edits([22, 15, "X"], [22, 7, 15, 186, 33])
        [Insert(value=7, index=1), Substitute(value=186, index=3), Insert(value=33, index=4)]
        >>> edits("avery", "garvey")
        [Insert(value='g', index=0), Move(value='r', from_index=3, to_index=2)]
    """
    script, _ = _solve(source, target, cost)
    return reduce_moves(script)


def edit_distance(source: Input, target: Input, cost: CostFunction = unit_cost) -> float:
    """Minimal total cost of turning `source` into `target` under `cost`."""
    _, total = _solve(source, target, cost)
    return total


def levenshtein(source: Input, target: Input) -> int:
    """
    Levenshtein distance: the minimal number of insertions, deletions
    and substitutions needed to turn `source` into `target`.

    Same result as ``edit_distance(source, target)`` with unit costs,
    computed without building scripts.  This is the classic two-row
    string table, generalized to elements of any type compared with `==`.
    """
    s = to_units(source)
    t = to_units(target)
    m, n = len(s), len(t)
    if m == 0:
        return n
    if n == 0:
        return m

    # Space-optimized DP (two rows)
    prev = list(range(n + 1))
    curr = [0] * (n + 1)

    for i in range(1, m + 1):
        curr[0] = i
        for j in range(1, n + 1):
            cost = 0 if s[i - 1] == t[j - 1] else 1
            curr[j] = min(
                prev[j] + 1,         # deletion
                curr[j - 1] + 1,     # insertion
                prev[j - 1] + cost,  # substitution
            )
        prev, curr = curr, prev

    return prev[n]


def normalized_levenshtein(source: Input, target: Input) -> float:
    """
    Levenshtein distance scaled to [0, 1] by the longer input's length.

    0.0 = identical (including two empty inputs)
    1.0 = nothing in common position-wise
    """
    s = to_units(source)
    t = to_units(target)
    longest = max(len(s), len(t))
    if longest == 0:
        return 0.0
    return levenshtein(s, t) / longest


# ═══════════════════════════════════════════════════════════════════
#  PATCH (apply edit script)
# ═══════════════════════════════════════════════════════════════════

def patch(source: Input, script: EditScript) -> list:
    """
    Apply an edit script to `source` and return the target as a list.

    This is the inverse of edits:
        patch(a, edits(a, b)) == list(b)        (b as units)

    Deletions (and move origins) name positions in the source;
    insertions, substitutions (and move destinations) name positions in
    the target.  Every other target position is filled, in order, by
    the source elements that are neither deleted nor substituted.

    Raises ValueError if the script does not fit `source`.
    """
    items = to_units(source)
    deleted: set[int] = set()
    inserted: dict[int, Any] = {}
    substituted: dict[int, Any] = {}

    for op in script:
        if isinstance(op, Delete):
            _check_origin(items, op.index, op.value)
            if op.index in deleted:
                raise ValueError(f"Source index {op.index} deleted twice")
            deleted.add(op.index)
        elif isinstance(op, Insert):
            _place(inserted, op.index, op.value)
        elif isinstance(op, Substitute):
            _place(substituted, op.index, op.value)
        elif isinstance(op, Move):
            # First-match pairing may repeat an origin or a destination.
            _check_origin(items, op.from_index, op.value)
            deleted.add(op.from_index)
            _place(inserted, op.to_index, op.value)
        else:
            raise TypeError(f"Unknown edit operation: {op!r}")

    size = len(items) - len(deleted) + len(inserted)
    for index in list(inserted) + list(substituted):
        if not 0 <= index < size:
            raise ValueError(f"Target index {index} out of range for length {size}")
    clash = inserted.keys() & substituted.keys()
    if clash:
        raise ValueError(f"Target positions both inserted and substituted: {sorted(clash)}")

    kept = (item for k, item in enumerate(items) if k not in deleted)
    result = []
    for index in range(size):
        if index in inserted:
            result.append(inserted[index])
            continue
        original = next(kept)
        result.append(substituted[index] if index in substituted else original)
    return result


def _place(positions: dict[int, Any], index: int, value: Any) -> None:
    """Record `value` at target `index`; a position holds one value."""
    if index in positions and positions[index] != value:
        raise ValueError(
            f"Target index {index} given two values: {positions[index]!r} and {value!r}"
        )
    positions[index] = value


def _check_origin(items: list, index: int, value: Any) -> None:
    if not 0 <= index < len(items):
        raise ValueError(f"Source index {index} out of range for length {len(items)}")
    if items[index] != value:
        raise ValueError(
            f"Mismatch at source index {index}: {items[index]!r} != {value!r}"
        )
