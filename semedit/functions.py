"""
semedit.functions — Editing what functions receive and produce
===============================================================

A function is a whole too.  Its RESULT and its ARGUMENT are parts:

    ret(f)(g)  =  f ∘ g        edit what g produces
    arg(f)(g)  =  g ∘ f        edit what g receives

Both compose with every other editor.  With curried functions the path
reads naturally:

    (ret >> arg)(f)(g)      edits the second argument of g
    (ret >> each)(f)(g)     edits every element of the list g returns

`wrap(before, after)` does both at once: g ↦ after ∘ g ∘ before.
"""

import logging
from typing import Any, Callable

from .core import Editor, Transform
from .exceptions import IndexOutOfRange

logger = logging.getLogger(__name__)


def _run_ret(f: Transform) -> Transform:
    def edit_function(g: Callable) -> Callable:
        def edited(*args, **kwargs):
            return f(g(*args, **kwargs))
        return edited
    return edit_function


def _run_arg(f: Transform) -> Transform:
    def edit_function(g: Callable) -> Callable:
        def edited(x, *args, **kwargs):
            return g(f(x), *args, **kwargs)
        return edited
    return edit_function


ret: Editor = Editor(_run_ret, "ret")
arg: Editor = Editor(_run_arg, "arg")


def arg_at(i: int) -> Editor:
    """
    Edit the `i`-th positional argument of a multi-argument function.

    Calling the edited function with `i` or fewer positional arguments
    raises IndexOutOfRange.
    """
    if not isinstance(i, int) or isinstance(i, bool):
        raise TypeError(f"arg_at() takes an int, got {type(i).__name__}")
    if i < 0:
        logger.debug("arg_at rejected negative position %d", i)
        raise IndexOutOfRange(i)

    def run(f: Transform) -> Transform:
        def edit_function(g: Callable) -> Callable:
            def edited(*args, **kwargs):
                if i >= len(args):
                    logger.debug("arg_at(%d) called with %d positional arguments", i, len(args))
                    raise IndexOutOfRange(i, len(args))
                args = args[:i] + (f(args[i]),) + args[i + 1:]
                return g(*args, **kwargs)
            return edited
        return edit_function

    return Editor(run, f"arg_at({i})")


def kwarg(name: str) -> Editor:
    """Edit keyword argument `name`; calls that do not pass it are unchanged."""

    def run(f: Transform) -> Transform:
        def edit_function(g: Callable) -> Callable:
            def edited(*args, **kwargs):
                if name in kwargs:
                    kwargs[name] = f(kwargs[name])
                return g(*args, **kwargs)
            return edited
        return edit_function

    return Editor(run, f"kwarg({name!r})")


def wrap(before: Callable[[Any], Any], after: Callable[[Any], Any]) -> Callable[[Callable], Callable]:
    """Pre-process the argument and post-process the result of a function."""
    return lambda g: ret(after)(arg(before)(g))
