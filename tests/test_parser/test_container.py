import pytest

from argus.parser import ParsedArguments


@pytest.fixture
def args():
    return ParsedArguments({"threads": 1, "verbose": False})


def test_item_and_attribute_access(args):
    assert args["threads"] == 1
    assert args.threads == 1
    assert args.get("verbose") is False
    assert list(args) == ["threads", "verbose"]
    assert len(args) == 2


def test_assign_declared_field(args):
    args["threads"] = 4
    args.verbose = True
    assert args == {"threads": 4, "verbose": True}


def test_assign_undeclared_field(args):
    with pytest.raises(KeyError):
        args["thread"] = 4
    with pytest.raises(AttributeError):
        args.thread = 4
    assert "thread" not in args


def test_missing_attribute(args):
    with pytest.raises(AttributeError, match="no argument 'nope'"):
        args.nope


def test_update_from(args):
    args.update_from({"threads": 8})
    assert args.threads == 8
    with pytest.raises(KeyError, match="Not declared arguments: extra"):
        args.update_from({"threads": 2, "extra": 1})
    assert args.threads == 8


def test_as_dict_is_a_copy(args):
    values = args.as_dict()
    values["threads"] = 99
    assert args.threads == 1


def test_equality_and_repr(args):
    assert args == ParsedArguments({"threads": 1, "verbose": False})
    assert args != ParsedArguments({"threads": 2, "verbose": False})
    assert repr(args) == "ParsedArguments(threads=1, verbose=False)"


def test_mapping_method_names_are_items():
    args = ParsedArguments({"values": 1, "get": 2})
    assert args["values"] == 1
    assert callable(args.values)
    args["get"] = 3
    assert args.as_dict() == {"values": 1, "get": 3}
