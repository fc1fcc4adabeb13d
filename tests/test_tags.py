import functools

import pytest

from registrar.errors import InvalidRegistration
from registrar.tags import inferred_name, normalize_tags


class Database:
    pass


def make_cache():
    return {}


def test_none_falls_back_to_class_name():
    assert normalize_tags(None, Database) == ("Database",)


def test_empty_string_falls_back_to_class_name():
    assert normalize_tags("", Database) == ("Database",)


def test_empty_sequence_falls_back_to_class_name():
    assert normalize_tags([], Database) == ("Database",)


def test_function_name_is_used_as_is():
    assert normalize_tags(None, make_cache) == ("make_cache",)


def test_single_string_becomes_single_tag():
    assert normalize_tags("db", Database) == ("db",)


def test_sequence_is_used_as_is():
    assert normalize_tags(["db", "primary_db", "db"], Database) == (
        "db",
        "primary_db",
        "db",
    )


def test_tuple_is_accepted():
    assert normalize_tags(("a", "b"), Database) == ("a", "b")


def test_non_string_tags_are_rejected():
    with pytest.raises(InvalidRegistration, match="Tags must be strings"):
        normalize_tags(["db", 42], Database)


def test_nameless_target_without_tags_is_rejected():
    nameless = functools.partial(Database)

    with pytest.raises(InvalidRegistration, match="No tags provided"):
        normalize_tags(None, nameless)

    with pytest.raises(InvalidRegistration, match="No tags provided"):
        normalize_tags("", nameless)


def test_nameless_target_with_tags_is_accepted():
    assert normalize_tags("db", functools.partial(Database)) == ("db",)


def test_inferred_name():
    assert inferred_name(Database) == "Database"
    assert inferred_name(make_cache) == "make_cache"
    assert inferred_name(functools.partial(Database)) is None
