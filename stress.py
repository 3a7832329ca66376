"""
Stress tests / adversarial evaluation of semedit.

This script tries to BREAK the claimed properties on random data:
  1. Identity law  e(identity)(w) == w
  2. Composition equals hand-nesting
  3. Associativity of >>
  4. Purity (inputs never modified)
  5. Round-trip of the built-in views
  6. Failures only where promised (IndexOutOfRange, InvalidStride)
"""

import copy
import random
import sys, os
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from semedit import (
    IDENTITY, identity, index, each, first, last, on_every, on_matching, on_value,
    as_code, as_chars, as_reversed, as_bits,
    identity_law, composition_law, associativity_law, round_trip_law,
    IndexOutOfRange, InvalidStride,
)


def test(name, condition, detail=""):
    status = "PASS" if condition else "FAIL"
    print(f"  [{status}] {name}" + (f"  ({detail})" if detail else ""))
    return condition


def random_nested(depth=0, max_depth=3):
    """A random list of lists of ints."""
    if depth >= max_depth:
        return random.randint(-50, 50)
    n = random.randint(0, 5)
    return [random_nested(depth + 1, max_depth) for _ in range(n)]


def random_editor():
    """A random editor that is valid on any list."""
    return random.choice([
        IDENTITY, first, last, on_every(random.randint(1, 4)),
        on_matching(lambda x: isinstance(x, list) and len(x) % 2 == 0),
    ])


def add1(x):
    return x + 1 if isinstance(x, int) else x


random.seed(7)
wholes = [random_nested() for _ in range(200)]


# ═══════════════════════════════════════════════════════════════
#  §1  IDENTITY LAW
# ═══════════════════════════════════════════════════════════════

print("=" * 70)
print("  §1  IDENTITY LAW — random editors × random lists")
print("=" * 70)

id_violations = 0
for w in wholes:
    e = random_editor() >> random_editor()
    if not identity_law(e, w):
        id_violations += 1
test(f"e(identity)(w) == w ({len(wholes)} cases)",
     id_violations == 0,
     f"{id_violations} violations")


# ═══════════════════════════════════════════════════════════════
#  §2  COMPOSITION & ASSOCIATIVITY
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §2  COMPOSITION & ASSOCIATIVITY")
print("=" * 70)

comp_violations = 0
assoc_violations = 0
for w in wholes:
    e1, e2, e3 = random_editor(), random_editor(), random_editor()
    if not composition_law(e1, e2, add1, w):
        comp_violations += 1
    if not associativity_law(e1, e2, e3, add1, w):
        assoc_violations += 1
test("(e1 >> e2)(f) == e1(e2(f))", comp_violations == 0, f"{comp_violations} violations")
test("(e1 >> e2) >> e3 ≡ e1 >> (e2 >> e3)", assoc_violations == 0, f"{assoc_violations} violations")


# ═══════════════════════════════════════════════════════════════
#  §3  PURITY
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §3  PURITY — inputs must not change")
print("=" * 70)

mutations = 0
for w in wholes:
    before = copy.deepcopy(w)
    each(add1)(w)
    if w != before:
        mutations += 1
test("each leaves input intact", mutations == 0, f"{mutations} mutated")

d = {"a": 1, "b": [1, 2]}
(on_value("b") >> index(0))(add1)(d)
test("nested mapping edit leaves input intact", d == {"a": 1, "b": [1, 2]})


# ═══════════════════════════════════════════════════════════════
#  §4  VIEW ROUND-TRIPS
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §4  VIEW ROUND-TRIPS")
print("=" * 70)

test("as_code over the BMP (excluding surrogates)",
     round_trip_law(as_code, (chr(c) for c in range(0x10000) if not 0xD800 <= c < 0xE000)))
for width in (1, 4, 8, 16):
    test(f"as_bits({width}) over 0 .. 2**{width}-1",
         round_trip_law(as_bits(width), range(2 ** width)))
test("as_chars on random strings",
     round_trip_law(as_chars, ("".join(random.choice("abc xyz") for _ in range(n)) for n in range(50))))
test("as_reversed on random lists", round_trip_law(as_reversed, wholes))
test("'hello world' shifted by one",
     (each >> as_code)(lambda c: c + 1)("hello world") == "ifmmp!xpsme")


# ═══════════════════════════════════════════════════════════════
#  §5  FAILURES ONLY WHERE PROMISED
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §5  ERRORS")
print("=" * 70)

out_of_range_ok = 0
for w in wholes:
    n = len(w) if isinstance(w, list) else 0
    i = random.randint(-3, 8)
    try:
        index(i)(identity)(w)
        ok = 0 <= i < n
    except IndexOutOfRange:
        ok = not (0 <= i < n)
    except TypeError:
        ok = not isinstance(w, list)
    out_of_range_ok += ok
test("index raises IndexOutOfRange exactly when out of bounds",
     out_of_range_ok == len(wholes),
     f"{len(wholes) - out_of_range_ok} wrong")

bad_strides = 0
for n in range(-5, 1):
    try:
        on_every(n)
    except InvalidStride:
        bad_strides += 1
test("on_every rejects every stride <= 0", bad_strides == 6)

empties_ok = all(e(add1)([]) == [] for e in (first, last, each, on_every(2)))
test("absence is a no-op on []", empties_ok)
test("missing key is a no-op", on_value("nope")(add1)({"a": 1}) == {"a": 1})


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
