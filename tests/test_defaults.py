import uuid

import pytest

import registrar
from registrar import defaults
from registrar.errors import InvalidRequest, NotFound


@pytest.fixture
def tag():
    return f"tag-{uuid.uuid4()}"


def test_registers_with_process_wide_registry(tag):
    class Greeter:
        def greet(self):
            return "Hello, world!"

    registrar.register_component(Greeter, tag)

    assert tag in defaults.registry
    assert registrar.resolve(tag=tag).greet() == "Hello, world!"


def test_provides_decorator(tag):
    @registrar.provides(tags=tag)
    class Greeter:
        pass

    assert registrar.resolve_tag(tag) is registrar.resolve_tag(tag)
    assert registrar.resolve_tag(tag, singleton=False) is not registrar.resolve_tag(
        tag, singleton=False
    )


def test_group_functions(tag):
    group = f"group-{uuid.uuid4()}"

    @registrar.provides(group=group, tags=f"{tag}-first")
    class First:
        pass

    @registrar.provides(group=group, tags=f"{tag}-second")
    class Second:
        pass

    instances = registrar.resolve_group(group)

    assert [type(i) for i in instances] == [First, Second]
    assert registrar.resolve(group=group) is instances
    assert registrar.resolve(group=group, singleton=False) is not instances


def test_default_injection_pattern(tag):
    @registrar.provides(tags=tag)
    class FirstDependency:
        def get(self):
            return "FirstDependency"

    class FakeDependency:
        def get(self):
            return "Fake"

    class Example:
        def __init__(self, first=None):
            self.first = first if first is not None else registrar.resolve_tag(tag)

    assert Example().first.get() == "FirstDependency"
    assert Example(FakeDependency()).first.get() == "Fake"


def test_falsy_explicit_group_is_not_replaced():
    group = f"group-{uuid.uuid4()}"
    registrar.register_component(dict, f"plugin-{uuid.uuid4()}", group=group)

    class Host:
        def __init__(self, plugins=None):
            self.plugins = (
                plugins if plugins is not None else registrar.resolve_group(group)
            )

    assert Host().plugins == ({},)
    assert Host(plugins=[]).plugins == []


def test_errors():
    with pytest.raises(InvalidRequest):
        registrar.resolve()

    with pytest.raises(NotFound):
        registrar.resolve_tag(f"missing-{uuid.uuid4()}")

    with pytest.raises(NotFound):
        registrar.resolve_group(f"missing-{uuid.uuid4()}")
