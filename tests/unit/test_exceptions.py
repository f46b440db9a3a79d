"""Unit tests for minimalpack.exceptions."""

from minimalpack.exceptions import get_inner_exceptions, get_innermost_exception


def make_chain() -> tuple[Exception, Exception, Exception]:
    """Raise a three level chain and return (outer, middle, inner)."""
    try:
        try:
            try:
                raise KeyError("inner")
            except KeyError as e:
                raise ValueError("middle") from e
        except ValueError:
            raise RuntimeError("outer")  # pylint: disable=raise-missing-from
    except RuntimeError as e:
        outer = e
    middle = outer.__context__
    inner = middle.__cause__
    return outer, middle, inner


def test_get_inner_exceptions_outermost_first():
    """Causes come back from the outermost child to the innermost."""
    outer, middle, inner = make_chain()
    assert list(get_inner_exceptions(outer)) == [middle, inner]


def test_get_inner_exceptions_excludes_self():
    """An exception without causes has no inner exceptions."""
    assert not list(get_inner_exceptions(ValueError("alone")))
    assert not list(get_inner_exceptions(None))


def test_get_inner_exceptions_is_lazy():
    """The result is an iterator, not a list."""
    outer, middle, _ = make_chain()
    iterator = get_inner_exceptions(outer)
    assert next(iterator) is middle


def test_suppressed_context_ends_the_chain():
    """``raise ... from None`` hides the implicit context."""
    try:
        try:
            raise KeyError("hidden")
        except KeyError:
            raise ValueError("visible") from None
    except ValueError as e:
        assert not list(get_inner_exceptions(e))
        assert get_innermost_exception(e) is e


def test_cyclic_chain_terminates():
    """A chain that loops back on itself stops at the repeat."""
    first = ValueError("first")
    second = ValueError("second")
    first.__cause__ = second
    second.__cause__ = first
    assert list(get_inner_exceptions(first)) == [second]


def test_get_innermost_exception():
    """The deepest cause wins; an exception without cause is its own."""
    outer, _, inner = make_chain()
    assert get_innermost_exception(outer) is inner
    alone = TypeError("alone")
    assert get_innermost_exception(alone) is alone
    assert get_innermost_exception(None) is None
