"""
semedit.views — Editing through virtual values
===============================================

Some parts are not stored anywhere.  A character's code point, the bits
of an integer, the reverse of a list: each is a VIEW of the stored value,
reached through a pair of conversions

    to_view   : T → V
    from_view : V → T

and an editor on T is obtained from an edit on V:

    as_view(to_view, from_view)(f)  =  from_view ∘ f ∘ to_view

    as_code(lambda c: c + 1)("h")                  → "i"
    (each >> as_code)(lambda c: c + 1)("hello")     → "ifmmp"

PRECONDITION: the conversions must round-trip on the values you edit,

    from_view(to_view(x)) == x

otherwise even the identity edit changes the value.  This is NOT
checked when editing; use `semedit.laws.round_trip_law` in tests.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from .core import Editor, Transform

# Width used by `as_bits` when none is given.
DEFAULT_BIT_WIDTH = 8


@dataclass(frozen=True, slots=True, kw_only=True)
class View(Editor):
    """An editor that goes through a pair of inverse conversions."""
    to_view: Callable[[Any], Any]
    from_view: Callable[[Any], Any]

    def __repr__(self) -> str:
        return f"View({self.name})"


def as_view(
    to_view: Callable[[Any], Any],
    from_view: Callable[[Any], Any],
    name: Optional[str] = None,
) -> View:
    """Build a view editor from two conversions that undo each other."""

    def run(f: Transform) -> Transform:
        def edit_through_view(x: Any) -> Any:
            return from_view(f(to_view(x)))
        return edit_through_view

    if name is None:
        name = (f"as_view({getattr(to_view, '__name__', 'to_view')}, "
                f"{getattr(from_view, '__name__', 'from_view')})")
    return View(run, name, to_view=to_view, from_view=from_view)


as_code: View = as_view(ord, chr, "as_code")


def _chars_to_str(chars: list) -> str:
    return "".join(chars)


as_chars: View = as_view(list, _chars_to_str, "as_chars")


def _reverse(seq: Any) -> Any:
    return seq[::-1]


as_reversed: View = as_view(_reverse, _reverse, "as_reversed")


def as_bits(width: int = DEFAULT_BIT_WIDTH) -> View:
    """
    View a non-negative integer below 2**width as a tuple of `width`
    bits, most significant first.

        (as_bits(4) >> last)(lambda b: 1 - b)(6)   → 7
    """
    if not isinstance(width, int) or isinstance(width, bool) or width <= 0:
        raise ValueError(f"bit width must be a positive integer, got {width!r}")

    def to_bits(n: int) -> tuple:
        return tuple((n >> shift) & 1 for shift in range(width - 1, -1, -1))

    def from_bits(bits: tuple) -> int:
        n = 0
        for bit in bits:
            n = (n << 1) | (1 if bit else 0)
        return n

    return as_view(to_bits, from_bits, f"as_bits({width})")
