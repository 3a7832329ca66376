"""
semedit.laws — Executable statements of the editor laws
========================================================

Each function checks one law on concrete inputs and returns True when
it holds.  They are meant for tests and for `stress.py`; nothing in
the editing path calls them.

    identity_law(e, w)                  e(identity)(w) == w
    composition_law(e₁, e₂, f, w)       (e₁ >> e₂)(f)(w) == e₁(e₂(f))(w)
    associativity_law(e₁, e₂, e₃, f, w) ((e₁ >> e₂) >> e₃) ≡ (e₁ >> (e₂ >> e₃))
    round_trip_law(view, samples)       from_view(to_view(x)) == x
"""

from typing import Any, Iterable

from .core import Editor, Transform, identity
from .views import View


def identity_law(editor: Editor, whole: Any) -> bool:
    return editor(identity)(whole) == whole


def composition_law(outer: Editor, inner: Editor, f: Transform, whole: Any) -> bool:
    """A composed editor does exactly what nesting the edits by hand does."""
    return (outer >> inner)(f)(whole) == outer(inner(f))(whole)


def associativity_law(e1: Editor, e2: Editor, e3: Editor, f: Transform, whole: Any) -> bool:
    return ((e1 >> e2) >> e3)(f)(whole) == (e1 >> (e2 >> e3))(f)(whole)


def round_trip_law(view: View, samples: Iterable[Any]) -> bool:
    """True when every sample survives a trip through the view and back."""
    return all(view.from_view(view.to_view(x)) == x for x in samples)
