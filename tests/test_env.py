import pytest

from minishell.env import (
    Environment,
    default_environment,
    from_environ,
    init_shlvl,
    trim_quotes,
)


@pytest.fixture
def env():
    environment = Environment()
    environment.set("USER", "alice")
    environment.set("EMPTY", "")
    return environment


def test_set_then_get_round_trip(env):
    env.set("NAME", "value")
    assert env.get("NAME") == "value"


def test_get_requires_exact_name(env):
    assert env.get("USE") is None
    assert env.get("USERS") is None


def test_set_strips_matching_quotes():
    environment = Environment()
    environment.set("A", "'text'")
    environment.set("B", '"text"')
    assert environment.get("A") == "text"
    assert environment.get("B") == "text"


def test_set_keeps_lone_quote_for_underscore():
    environment = Environment()
    environment.set("_", '"')
    assert environment.get("_") == '"'


def test_set_none_value():
    environment = Environment()
    environment.set("DECLARED", None)
    assert list(environment.items()) == [("DECLARED", None)]


def test_update_keeps_position(env):
    env.set("USER", "bob")
    assert [name for name, _ in env.items()] == ["USER", "EMPTY"]
    assert env.get("USER") == "bob"


def test_lookup_stops_at_blank(env):
    assert env.lookup("USER rest") == "alice"
    assert env.lookup("USER\tmore") == "alice"
    assert env.lookup("MISSING") is None


def test_delete(env):
    env.delete("USER")
    assert env.get("USER") is None
    assert [name for name, _ in env.items()] == ["EMPTY"]


def test_delete_missing_leaves_variables(env):
    before = list(env.items())
    env.delete("NOPE")
    assert list(env.items()) == before


def test_trim_quotes_cases():
    assert trim_quotes("'abc'") == "abc"
    assert trim_quotes("'abc\"") == "'abc\""
    assert trim_quotes("") == ""
    assert trim_quotes("plain") == "plain"


def test_init_shlvl():
    assert init_shlvl({"SHLVL": "3"}) == "4"
    assert init_shlvl({}) == "1"


def test_from_environ_order_and_specials():
    environment = from_environ({"A": "1", "B": "2"}, 0)
    assert [name for name, _ in environment.items()] == ["B", "A", "?", "SHLVL"]
    assert environment.get("?") == "0"
    assert environment.get("SHLVL") == "1"


def test_from_environ_updates_existing_shlvl():
    environment = from_environ({"SHLVL": "5", "X": "y"}, 0)
    assert [name for name, _ in environment.items()] == ["X", "SHLVL", "?"]
    assert environment.get("SHLVL") == "6"


def test_from_environ_keeps_inherited_quotes():
    environment = from_environ({"Q": "'v'"}, 0)
    assert environment.get("Q") == "'v'"


def test_default_environment_with_cwd():
    environment = default_environment("/tmp/work", {})
    assert [name for name, _ in environment.items()] == [
        "SHLVL", "PWD", "OLDPWD", "HOME", "_", "?",
    ]
    assert environment.get("PWD") == "/tmp/work"
    assert environment.get("OLDPWD") == ""
    assert environment.get("HOME") == "/"
    assert environment.get("?") == "0"


def test_default_environment_without_cwd():
    environment = default_environment(None, {})
    names = [name for name, _ in environment.items()]
    assert "PWD" not in names
    assert "OLDPWD" not in names
    assert environment.get("SHLVL") == "1"


@pytest.mark.parametrize(
    "arg, expected",
    [
        ("$UNSET", True),
        ("$USER", False),
        ("plain", False),
        ("$", False),
        ("$UNSET$OTHER", True),
        ("$EMPTY", True),
        ("$UNSET$USER", False),
        ("$UNSET$", False),
    ],
)
def test_is_null_reference(env, arg, expected):
    assert env.is_null_reference(arg) is expected