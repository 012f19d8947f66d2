"""
Tests for chained lexical environments.
"""
from monkey.environment import Environment
from monkey.objects import TRUE, Integer


def test_get_missing_name():
    env = Environment()
    assert env.get("nope") == (None, False)


def test_set_and_get():
    env = Environment()
    value = Integer(1)
    assert env.set("a", value) is value
    assert env.get("a") == (value, True)


def test_lookup_walks_outward():
    outer = Environment()
    outer.set("a", Integer(1))
    inner = Environment.new_enclosed(outer)
    value, found = inner.get("a")
    assert found
    assert value.value == 1


def test_set_binds_innermost_only():
    """
    Test that binding in a child scope shadows without touching the parent.
    """
    outer = Environment()
    outer.set("a", Integer(1))
    inner = Environment.new_enclosed(outer)
    inner.set("a", TRUE)
    assert inner.get("a")[0] is TRUE
    assert outer.get("a")[0].value == 1


def test_rebinding_overwrites():
    env = Environment()
    env.set("a", Integer(1))
    env.set("a", Integer(2))
    assert env.get("a")[0].value == 2


def test_contains_follows_chain():
    outer = Environment()
    outer.set("a", Integer(1))
    inner = Environment.new_enclosed(outer)
    assert "a" in inner
    assert "b" not in inner
