"""
semedit.core — Editors and their composition
=============================================

§1  WHAT AN EDITOR IS
─────────────────────

An editor lifts a change of a PART into a change of the WHOLE that
contains it:

    Editor[W, P]  =  (P → P)  →  (W → W)

Given `f`, a transformation of the focused part, an editor returns a
transformation of the whole value that applies `f` at the focus and
leaves everything else alone.  Nothing is mutated: the result is a new
value, possibly sharing the parts that were not touched.


§2  COMPOSITION
───────────────

Editors compose like functions, and the composition reads as a PATH
from the outside in:

    (e₁ >> e₂)(f)  =  e₁(e₂(f))

    index(2) >> index(3)      "element 2, then element 3 of that"

Composition is associative and has IDENTITY as its unit:

    (e₁ >> e₂) >> e₃  ≡  e₁ >> (e₂ >> e₃)
    IDENTITY >> e  ≡  e  ≡  e >> IDENTITY

and every editor preserves the identity transformation:

    e(identity)(w) == w


§3  APPLYING
────────────

    apply(e, f)           → the whole-transformation e(f)
    edit(e, f, whole)     → e(f)(whole)
    set_(e, value)        → the whole-transformation that puts `value`
                            at every place `e` focuses on
"""

from dataclasses import dataclass
from functools import reduce
from typing import Any, Callable, Generic, TypeVar

W = TypeVar("W")  # whole
P = TypeVar("P")  # part

Transform = Callable[[Any], Any]


# ═══════════════════════════════════════════════════════════════════
#  THE EDITOR TYPE
# ═══════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class Editor(Generic[W, P]):
    """
    A reusable editor: calling it with a part-transformation returns
    the matching whole-transformation.

    Examples:
        index(2)(lambda x: x + 100)([1, 2, 3, 4, 5])   # [1, 2, 103, 4, 5]
        (index(1) >> first)(str.upper)(["ab", "cd"])    # ["ab", "Cd"]
    """
    run: Callable[[Callable[[P], P]], Callable[[W], W]]
    name: str = "editor"

    def __call__(self, f: Callable[[P], P]) -> Callable[[W], W]:
        return self.run(f)

    def __rshift__(self, inner: "Editor") -> "Editor":
        """`self >> inner`: go into `self`'s target, then into `inner`'s."""
        if not isinstance(inner, Editor):
            return NotImplemented
        return _compose2(self, inner)

    def __repr__(self) -> str:
        return f"Editor({self.name})"


def identity(x: Any) -> Any:
    """The identity part-transformation."""
    return x


def _run_identity(f: Transform) -> Transform:
    return f


IDENTITY: Editor = Editor(_run_identity, "identity")


# ═══════════════════════════════════════════════════════════════════
#  COMPOSITION
# ═══════════════════════════════════════════════════════════════════

def _compose2(outer: Editor, inner: Editor) -> Editor:
    # Unit laws hold structurally, not just extensionally.
    if outer is IDENTITY:
        return inner
    if inner is IDENTITY:
        return outer

    outer_run, inner_run = outer.run, inner.run

    def run(f: Transform) -> Transform:
        return outer_run(inner_run(f))

    return Editor(run, f"{outer.name} >> {inner.name}")


def compose(*editors: Editor) -> Editor:
    """
    Chain editors left to right: `compose(a, b, c)` is `a >> b >> c`.

    `compose()` with no arguments is IDENTITY.
    """
    for e in editors:
        if not isinstance(e, Editor):
            raise TypeError(f"compose() takes editors, got {type(e).__name__}")
    return reduce(_compose2, editors, IDENTITY)


# ═══════════════════════════════════════════════════════════════════
#  APPLICATION
# ═══════════════════════════════════════════════════════════════════

def apply(editor: Editor[W, P], f: Callable[[P], P]) -> Callable[[W], W]:
    """Turn a part-transformation into a whole-transformation."""
    return editor(f)


def edit(editor: Editor[W, P], f: Callable[[P], P], whole: W) -> W:
    """Apply `f` at the focus of `editor` inside `whole`."""
    return editor(f)(whole)


def set_(editor: Editor[W, P], value: P) -> Callable[[W], W]:
    """
    Replace every target of `editor` with `value`.

        set_(index(0), "x")(["a", "b"])   → ["x", "b"]
    """
    return editor(lambda _old: value)
