"""
Semantic Editor Combinators
===========================

Edit a part of a structure by saying WHERE it is, not by rebuilding the
structure around it by hand.

    (index(2) >> index(3))(lambda x: x + 100)([[1, 2], [3, 4], [5, 6, 7, 8, 9]])
        → [[1, 2], [3, 4], [5, 6, 7, 108, 9]]

    on_every(3)(lambda _: 0)([1, 2, 3, 4, 5, 6, 7, 8, 9])
        → [0, 2, 3, 0, 5, 6, 0, 8, 9]

    (each >> as_code)(lambda c: c + 1)("hello world")
        → "ifmmp!xpsme"

An editor turns a transformation of a part into a transformation of the
whole.  Editors are:
  • Pure (the input is never modified; a new value is returned)
  • Composable (`>>` reads as a path, left to right)
  • Lawful (associative composition, identity preserved)
  • Total where absence has an obvious meaning (no-op), and loud where
    it does not (IndexOutOfRange, InvalidStride, FieldNotFound)
"""

import logging

from semedit.core import (
    Editor,
    IDENTITY,
    identity,
    compose,
    apply,
    edit,
    set_,
)
from semedit.exceptions import (
    EditorError, IndexOutOfRange, InvalidStride, FieldNotFound,
)
from semedit.containers import (
    index, each, maybe, first, last,
    on_matching, on_every, left, right, on_value, on_values,
)
from semedit.records import on_field, field_editors
from semedit.functions import ret, arg, arg_at, kwarg, wrap
from semedit.views import (
    View, as_view, as_code, as_chars, as_reversed, as_bits, DEFAULT_BIT_WIDTH,
)
from semedit.laws import (
    identity_law, composition_law, associativity_law, round_trip_law,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "Editor", "IDENTITY", "identity", "compose", "apply", "edit", "set_",
    "EditorError", "IndexOutOfRange", "InvalidStride", "FieldNotFound",
    "index", "each", "maybe", "first", "last",
    "on_matching", "on_every", "left", "right", "on_value", "on_values",
    "on_field", "field_editors",
    "ret", "arg", "arg_at", "kwarg", "wrap",
    "View", "as_view", "as_code", "as_chars", "as_reversed", "as_bits",
    "DEFAULT_BIT_WIDTH",
    "identity_law", "composition_law", "associativity_law", "round_trip_law",
]
