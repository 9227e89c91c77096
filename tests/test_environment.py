import pytest

from minishell.environment import Environment, is_valid_name


@pytest.fixture
def env():
    return Environment.from_strings(["HOME=/home/user", "PATH=/bin:/usr/bin", "LANG=C"])


def test_from_strings_reads_values(env):
    assert env.get("HOME") == "/home/user"
    assert env.get("PATH") == "/bin:/usr/bin"
    assert env.get("MISSING") is None


def test_order_and_length(env):
    assert len(env) == 3
    assert [name for name, _ in env] == ["HOME", "PATH", "LANG"]


def test_to_list_round_trip(env):
    entries = env.to_list()
    assert entries == ["HOME=/home/user", "PATH=/bin:/usr/bin", "LANG=C"]
    assert Environment.from_strings(entries).to_list() == entries


def test_value_stops_at_second_equals():
    env = Environment.from_strings(["A=b=c"])
    assert env.get("A") == "b"


def test_set_updates_existing_in_place(env):
    env.set("PATH", "/opt")
    assert env.get("PATH") == "/opt"
    assert [name for name, _ in env] == ["HOME", "PATH", "LANG"]


def test_set_none_keeps_existing_value(env):
    env.set("HOME", None)
    assert env.get("HOME") == "/home/user"


def test_set_new_appends(env):
    env.set("NEW", "1")
    assert env.to_list()[-1] == "NEW=1"
    assert len(env) == 4


def test_valueless_name_only_in_export_mode(env):
    env.set("FLAG", None)
    assert "FLAG" not in env.to_list()
    assert env.to_list(export_mode=True)[-1] == "FLAG"
    assert env.get("FLAG") is None


def test_unset(env):
    env.unset("PATH")
    assert env.get("PATH") is None
    assert len(env) == 2
    env.unset("PATH")
    assert len(env) == 2


def test_empty_environment():
    env = Environment()
    assert len(env) == 0
    assert env.to_list() == []
    assert list(env) == []


@pytest.mark.parametrize("name", ["A", "_x", "abc_123", "Z9"])
def test_valid_names(name):
    assert is_valid_name(name) is True


@pytest.mark.parametrize("name", ["", None, "1abc", "a-b", "a b", "=x", "é"])
def test_invalid_names(name):
    assert is_valid_name(name) is False