"""Tests for boxes, records and name bindings."""

import pytest

import lrvalues


def test_box_field_and_accessors():
    box = lrvalues.Box(1)
    assert box.get() == 1
    box.i = 2
    assert box.get() == 2
    box.set(3)
    assert box.i == 3
    assert repr(box) == "Box(3)"


def test_box_is_shared_not_copied():
    box = lrvalues.Box(1)
    alias = box
    alias.set(7)
    assert box.get() == 7


def test_record_compares_by_value():
    assert lrvalues.Record(i=3, b=True) == lrvalues.Record(3, True)
    assert lrvalues.Record(i=3, b=True) != lrvalues.Record(i=3, b=False)


def test_final_binding_refuses_rebind():
    binding = lrvalues.Binding("y", 2, final=True)
    with pytest.raises(lrvalues.AssignError, match="immutable binding 'y'"):
        binding.rebind(3)
    assert binding.value == 2


def test_mutable_binding_rebinds():
    binding = lrvalues.Binding("x", 1)
    binding.rebind(3)
    assert binding.value == 3


def test_final_binding_content_still_mutable():
    """Finality belongs to the name, not to what it holds."""
    scope = lrvalues.Scope()
    scope.declare("a", [1, 1], final=True)

    scope["a"][0] = 3

    assert scope["a"] == [3, 1]
    with pytest.raises(lrvalues.AssignError):
        scope.assign("a", [0, 0])


def test_scope_assign_and_lookup():
    scope = lrvalues.Scope()
    scope.declare("x", 1)
    scope.declare("y", 2, final=True)

    scope.assign("x", scope["x"] + scope["y"])

    assert scope["x"] == 3
    assert "x" in scope
    assert "z" not in scope
    assert scope.lookup("z") is None


def test_scope_undeclared_name():
    scope = lrvalues.Scope()
    with pytest.raises(lrvalues.AssignError, match="'x' is not declared") as info:
        scope.assign("x", 1, position=(4, 2))
    assert info.value.position == (4, 2)
    with pytest.raises(KeyError):
        scope["x"]


def test_redeclare_replaces_binding():
    scope = lrvalues.Scope()
    scope.declare("y", 2, final=True)
    scope.declare("y", 4)
    scope.assign("y", 5)
    assert scope["y"] == 5
