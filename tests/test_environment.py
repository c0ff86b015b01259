import pytest

from minishell.environment import (
    Environment,
    format_export_entry,
    is_valid_identifier,
    make_entry,
    matches_name,
)


@pytest.mark.parametrize("name", ["PATH", "_x", "a1_b2", "_"])
def test_valid_identifiers(name):
    assert is_valid_identifier(name) is True


@pytest.mark.parametrize("name", ["", None, "1abc", "a-b", "a b", "=x", "é"])
def test_invalid_identifiers(name):
    assert is_valid_identifier(name) is False


def test_make_entry_with_and_without_value():
    assert make_entry("HOME", "/tmp") == "HOME=/tmp"
    assert make_entry("HOME", None) == "HOME"
    assert make_entry("E", "") == "E="


def test_matches_name():
    assert matches_name("HOME=/x", "HOME")
    assert matches_name("HOME", "HOME")
    assert not matches_name("HOMEDIR=/x", "HOME")
    assert not matches_name("HOM", "HOME")
    assert not matches_name(None, "HOME")
    assert not matches_name("HOME=1", "")


def test_format_export_entry_with_value():
    assert format_export_entry("A=b") == 'declare -x A="b"'


def test_format_export_entry_drops_quotes():
    assert format_export_entry('A=x"y"z') == 'declare -x A="xyz"'


def test_format_export_entry_bare_name():
    assert format_export_entry("LONELY") == "declare -x LONELY"


def test_get_set_roundtrip():
    env = Environment(["A=1"])
    env.set("B", "two")
    assert env.get("B") == "two"
    assert env.get("A") == "1"
    assert env.get("C") is None


def test_set_replaces_in_place():
    env = Environment(["A=1", "B=2"])
    env.set("A", "9")
    assert env.entries == ["A=9", "B=2"]


def test_set_without_value_replaces_entry():
    env = Environment(["A=1"])
    env.set("A")
    assert env.entries == ["A"]
    assert env.get("A") is None
    assert "A" in env


def test_value_may_contain_equals():
    env = Environment(["K=a=b"])
    assert env.get("K") == "a=b"


def test_prefix_names_are_distinct():
    env = Environment(["AB=1"])
    env.set("A", "2")
    assert env.get("AB") == "1"
    assert env.get("A") == "2"
    assert len(env) == 2


def test_unset_removes_only_that_name():
    env = Environment(["A=1", "AB=2", "A"])
    env.unset("A")
    assert env.entries == ["AB=2"]
    assert "A" not in env


def test_unset_missing_is_noop():
    env = Environment(["A=1"])
    env.unset("Z")
    assert env.entries == ["A=1"]


def test_copy_is_independent():
    env = Environment(["A=1"])
    other = env.copy()
    other.set("A", "2")
    assert env.get("A") == "1"
    assert other.get("A") == "2"


def test_constructor_copies_input():
    source = ["A=1"]
    env = Environment(source)
    env.set("B", "2")
    assert source == ["A=1"]


def test_env_lines_skip_bare_names():
    env = Environment(["A=1", "B", "C="])
    assert env.env_lines() == ["A=1", "C="]


def test_export_lines_sorted_and_formatted():
    env = Environment(["b=2", "a=1", "C"])
    lines = env.export_lines()
    assert lines == [
        format_export_entry("C"),
        format_export_entry("a=1"),
        format_export_entry("b=2"),
    ]
    assert all(line.startswith("declare -x ") for line in lines)


def test_iteration_yields_entries():
    env = Environment(["X=1", "Y"])
    assert list(env) == ["X=1", "Y"]