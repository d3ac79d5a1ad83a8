from minishell.environment import Environment, init_env


def test_init_env_reverses_order():
    env = init_env(["USER=juan", "HOME=/home/juan", "PATH=/usr/bin"])
    assert list(env) == ["PATH", "HOME", "USER"]
    assert env.get("HOME") == "/home/juan"


def test_init_env_from_mapping():
    env = init_env({"A": "1", "B": "2"})
    assert list(env.items()) == [("B", "2"), ("A", "1")]


def test_value_keeps_later_equals():
    env = init_env(["X=a=b"])
    assert env.get("X") == "a=b"


def test_get_missing_is_none():
    env = Environment([("A", "1")])
    assert env.get("B") is None
    assert env.get("") is None


def test_get_requires_exact_key():
    env = Environment([("PATH", "/bin")])
    assert env.get("PAT") is None
    assert env.get("PATHX") is None


def test_set_updates_in_place():
    env = Environment([("A", "1"), ("B", "2")])
    env.set("A", "9")
    assert list(env.items()) == [("A", "9"), ("B", "2")]


def test_set_appends_new_key():
    env = Environment([("A", "1")])
    env.set("C", "3")
    assert list(env) == ["A", "C"]
    assert "C" in env


def test_remove_existing_and_missing():
    env = Environment([("A", "1"), ("B", "2")])
    env.remove("A")
    env.remove("NOPE")
    assert list(env) == ["B"]
    assert "A" not in env
    assert len(env) == 1


def test_to_array_round_trip():
    original = ["K1=v1", "K2=", "K3=x=y"]
    env = init_env(original)
    assert init_env(env.to_array()).to_array() == original
    assert sorted(env.to_array()) == sorted(original)


def test_to_array_with_none_value():
    env = Environment([("A", None)])
    assert env.to_array() == ["A="]


def test_to_dict_matches_items():
    env = Environment([("A", "1"), ("B", None)])
    assert env.to_dict() == {"A": "1", "B": ""}