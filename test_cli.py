import io
import runpy
import textwrap
from pathlib import Path

import pytest

from algobench.tools import bench_cli
from benchmarks.festival.data import make_rng

SCRIPT = textwrap.dedent("""
    from algobench import TestSuite, create_test, create_version

    first = TestSuite()
    first.add_test(create_test("first-test", [create_version("noop", lambda: None, 2)]))

    second = TestSuite()
    second.add_test(create_test("second-test", [create_version("noop", lambda: None, 2)]))

    if __name__ == "__main__":
        raise RuntimeError("should not run as __main__")
""")


@pytest.fixture
def script(tmp_path):
    path = tmp_path / "bench_script.py"
    path.write_text(SCRIPT)
    return path


def test_runs_every_suite_in_order(script, capsys):
    assert bench_cli.main([str(script)]) == 0
    out = capsys.readouterr().out
    assert out.index("Running Test: first-test") < out.index("Running Test: second-test")


def test_runs_named_suite_only(script, capsys):
    assert bench_cli.main([str(script), "--suite", "second"]) == 0
    out = capsys.readouterr().out
    assert "second-test" in out
    assert "first-test" not in out


def test_unknown_suite_is_a_usage_error(script):
    with pytest.raises(SystemExit) as excinfo:
        bench_cli.main([str(script), "--suite", "missing"])
    assert excinfo.value.code == 2


def test_missing_script_is_a_usage_error(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        bench_cli.main([str(tmp_path / "nope.py")])
    assert excinfo.value.code == 2


def test_log_level_defaults_from_environment(monkeypatch):
    monkeypatch.setenv("ALGOBENCH_LOG_LEVEL", "DEBUG")
    args = bench_cli.build_parser().parse_args(["script.py"])
    assert args.log_level == "DEBUG"


def test_aliased_suite_runs_once(tmp_path, capsys):
    path = tmp_path / "aliased.py"
    path.write_text(textwrap.dedent("""
        from algobench import TestSuite, create_test, create_version

        suite = TestSuite()
        suite.add_test(create_test("aliased-test", [create_version("noop", lambda: None, 1)]))
        alias = suite
    """))
    assert bench_cli.main([str(path)]) == 0
    assert capsys.readouterr().out.count("Running Test: aliased-test") == 1


def test_festival_example_runs(capsys):
    example = Path(__file__).parent / "examples" / "festival_suite.py"
    assert bench_cli.main([str(example)]) == 0
    out = capsys.readouterr().out
    assert out.index("Running Test: search") < out.index("Running Test: assign")
    assert out.count("Average Time:") == 4


def test_festival_example_keeps_data_inside_the_factory():
    example = Path(__file__).parent / "examples" / "festival_suite.py"
    namespace = runpy.run_path(str(example), run_name="__algobench__")
    assert not {"rng", "stages", "artists"} & set(namespace)

    suite = namespace["build_suite"](make_rng(5), artist_count=20, runs=2, stream=io.StringIO())
    results = suite.run_sync()
    assert [r.test_name for r in results] == ["search", "search", "assign", "assign"]
    assert all(len(r.samples) == 2 for r in results)
