"""
Stress tests / adversarial evaluation of editscript.

This script attempts to BREAK the claimed properties:
  1. Script cost == Levenshtein distance under unit costs
  2. Optimality against brute-force enumeration of alignments
  3. Metric properties (symmetry, triangle inequality)
  4. Patch round-trip, including ambiguous move pairings
  5. Substitution-price monotonicity
  6. Inputs deeper than the interpreter recursion limit
"""

import sys, os, random, time, itertools
from functools import lru_cache
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from editscript.core import edits, edit_distance, levenshtein, patch
from editscript.ops import EditKind, Substitute


def test(name, condition, detail=""):
    status = "PASS" if condition else "FAIL"
    print(f"  [{status}] {name}" + (f"  ({detail})" if detail else ""))
    return condition


def strings(alphabet, max_len):
    out = [""]
    for length in range(1, max_len + 1):
        out.extend("".join(p) for p in itertools.product(alphabet, repeat=length))
    return out


def substitution_cost(price):
    def cost(kind, value, index):
        return price if kind == EditKind.SUBSTITUTE else 1
    return cost


# ═══════════════════════════════════════════════════════════════
#  §1  SCRIPT COST vs LEVENSHTEIN — exhaustive small cases
# ═══════════════════════════════════════════════════════════════

print("=" * 70)
print("  §1  SCRIPT COST vs LEVENSHTEIN — exhaustive check")
print("=" * 70)

all_strings = strings("abc", 4)

random.seed(42)
sample_pairs = random.sample(
    [(s1, s2) for s1 in all_strings for s2 in all_strings],
    min(2000, len(all_strings) ** 2)
)

mismatches = 0
for s1, s2 in sample_pairs:
    expected = levenshtein(s1, s2)
    got = edit_distance(s1, s2)
    if got != expected:
        mismatches += 1
        if mismatches <= 5:
            print(f"    MISMATCH: cost(\"{s1}\", \"{s2}\") = {got}, Levenshtein = {expected}")

test("Script cost == Levenshtein (2000 random pairs, len≤4)",
     mismatches == 0,
     f"{mismatches} mismatches")


# ═══════════════════════════════════════════════════════════════
#  §2  OPTIMALITY vs BRUTE FORCE — weighted costs
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §2  OPTIMALITY vs BRUTE FORCE")
print("=" * 70)


def brute_force(a, b, cost):
    """Cheapest alignment by plain (cache-only) recursion from the front."""
    @lru_cache(maxsize=None)
    def best(i, j):
        if i == len(a):
            return sum(cost(EditKind.INSERT, b[k], k) for k in range(j, len(b)))
        if j == len(b):
            return sum(cost(EditKind.DELETE, a[k], k) for k in range(i, len(a)))
        options = [
            best(i + 1, j) + cost(EditKind.DELETE, a[i], i),
            best(i, j + 1) + cost(EditKind.INSERT, b[j], j),
        ]
        if a[i] == b[j]:
            options.append(best(i + 1, j + 1))
        else:
            options.append(best(i + 1, j + 1) + cost(EditKind.SUBSTITUTE, b[j], j))
        return min(options)
    return best(0, 0)


def weird_cost(kind, value, index):
    base = {EditKind.INSERT: 2, EditKind.DELETE: 1, EditKind.SUBSTITUTE: 2.5}[kind]
    return base + (0.5 if value == "a" else 0)


opt_failures = 0
random.seed(99)
for _ in range(300):
    a = "".join(random.choice("abc") for _ in range(random.randint(0, 6)))
    b = "".join(random.choice("abc") for _ in range(random.randint(0, 6)))
    got = edit_distance(a, b, weird_cost)
    expected = brute_force(a, b, weird_cost)
    if abs(got - expected) > 1e-9:
        opt_failures += 1
        if opt_failures <= 3:
            print(f"    NOT OPTIMAL: {a!r} → {b!r}: {got} vs {expected}")

test("Weighted cost optimal (300 random pairs)",
     opt_failures == 0,
     f"{opt_failures} failures")


# ═══════════════════════════════════════════════════════════════
#  §3  METRIC PROPERTIES
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §3  METRIC PROPERTIES")
print("=" * 70)

random.seed(123)
values = [
    [random.choice([1, 2, 3, "a", None]) for _ in range(random.randint(0, 5))]
    for _ in range(25)
]

tri_violations = 0
tri_checks = 0
for x in values:
    for y in values:
        for z in values:
            tri_checks += 1
            if levenshtein(x, z) > levenshtein(x, y) + levenshtein(y, z):
                tri_violations += 1

test(f"Triangle inequality ({tri_checks} triples)",
     tri_violations == 0,
     f"{tri_violations} violations")

sym_violations = sum(
    1 for x, y in itertools.combinations(values, 2)
    if levenshtein(x, y) != levenshtein(y, x)
)
test(f"Symmetry ({len(values) * (len(values) - 1) // 2} pairs)",
     sym_violations == 0,
     f"{sym_violations} violations")

test(f"Identity edits(x, x) == [] ({len(values)} values)",
     all(edits(v, v) == [] for v in values))


# ═══════════════════════════════════════════════════════════════
#  §4  PATCH ROUND-TRIP — repeated values
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §4  PATCH ROUND-TRIP")
print("=" * 70)

random.seed(456)
roundtrip_failures = 0
for _ in range(500):
    a = "".join(random.choice("aab") for _ in range(random.randint(0, 8)))
    b = "".join(random.choice("abb") for _ in range(random.randint(0, 8)))
    for cost in (substitution_cost(1), substitution_cost(3)):
        script = edits(a, b, cost)
        if patch(a, script) != list(b):
            roundtrip_failures += 1
            if roundtrip_failures <= 3:
                print(f"    FAIL: {a!r} → {b!r} via {script!r}")

test("patch(a, edits(a, b)) == b (500 pairs × 2 cost functions)",
     roundtrip_failures == 0,
     f"{roundtrip_failures} failures")


# ═══════════════════════════════════════════════════════════════
#  §5  SUBSTITUTION PRICE MONOTONICITY
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §5  SUBSTITUTION PRICE MONOTONICITY")
print("=" * 70)

random.seed(789)
mono_violations = 0
for _ in range(200):
    a = "".join(random.choice("abcd") for _ in range(random.randint(0, 7)))
    b = "".join(random.choice("abcd") for _ in range(random.randint(0, 7)))
    counts = [
        sum(1 for op in edits(a, b, substitution_cost(p)) if isinstance(op, Substitute))
        for p in (0.5, 1, 1.5, 2, 2.5, 4)
    ]
    if counts != sorted(counts, reverse=True):
        mono_violations += 1

test("Substitutions never increase with their price (200 pairs)",
     mono_violations == 0,
     f"{mono_violations} violations")


# ═══════════════════════════════════════════════════════════════
#  §6  PERFORMANCE / DEPTH
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §6  PERFORMANCE (wall-clock)")
print("=" * 70)

# Full O(m*n) state space
for n in [50, 100, 200, 400]:
    a = list(range(n))
    b = list(range(1, n + 1))
    t0 = time.perf_counter()
    script = edits(a, b)
    dt = time.perf_counter() - t0
    print(f"  edits({n}) vs ({n}) shifted: {dt*1000:.1f}ms  ops={len(script)}")

# Diagonal only, far beyond the recursion limit
depth = sys.getrecursionlimit() * 10
a = list(range(depth))
t0 = time.perf_counter()
script = edits(a, ["head"] + a)
dt = time.perf_counter() - t0
test(f"Depth {depth} (recursion limit {sys.getrecursionlimit()})",
     len(script) == 1,
     f"{dt*1000:.1f}ms")


# ═══════════════════════════════════════════════════════════════
#  SUMMARY
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  STRESS TEST SUMMARY")
print("=" * 70)
print("  If you see FAIL above, there's a bug.")
print("  If everything is PASS, the implementation is correct")
print("  for the tested cases (not a proof, but high confidence).")
