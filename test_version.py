import pytest

from algobench import AlgorithmVersion, create_test, create_version


def test_create_version_binds_arguments():
    calls = []

    def target(a, b):
        calls.append((a, b))
        return a + b

    version = create_version("add", target, 3, [1, 2])
    assert calls == []  # nothing runs at construction
    assert version.execute() == 3
    assert calls == [(1, 2)]
    assert version.name == "add"
    assert version.runs == 3


def test_execute_passes_awaitables_through():
    async def target(x):
        return x

    coro = create_version("async", target, 1, [5]).execute()
    try:
        assert hasattr(coro, "__await__")
    finally:
        coro.close()


def test_version_is_immutable():
    version = create_version("noop", lambda: None, 1, [])
    with pytest.raises(AttributeError):
        version.runs = 10


def test_non_callable_algorithm_rejected():
    with pytest.raises(TypeError):
        AlgorithmVersion("bad", 42, 1)


def test_test_keeps_version_order():
    v1 = create_version("v1", lambda: None, 1)
    v2 = create_version("v2", lambda: None, 1)
    test = create_test("ordering", [v1])
    test.add_version(v2)
    assert [v.name for v in test.versions] == ["v1", "v2"]


def test_test_rejects_non_versions():
    with pytest.raises(TypeError):
        create_test("bad", [lambda: None])
