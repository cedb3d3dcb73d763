from __future__ import annotations

import asyncio

import pytest

from spintest.core import AssertionFailure, Status, TestResult, TestRunner
from spintest.reporting.terminal import CLEAR_LINE


def _passes(t: TestRunner) -> None:
    t.assert_true(True)


def _boom(t: TestRunner) -> None:
    t.assert_true(False, "boom")


def test_end_to_end_pass_fail_pass(sink) -> None:
    runner = TestRunner("Scenario", use_color=False)
    runner.register("A", _passes)
    runner.register("B", _boom)
    runner.register("C", _passes)

    results = runner.run_sync(sink)

    assert results == [
        TestResult("A", Status.PASS),
        TestResult("B", Status.FAIL, "boom"),
        TestResult("C", Status.PASS),
    ]
    assert runner.passed_count == 2
    assert runner.failed_count == 1
    assert "Tests: 3 | Passed: 2 | Failed: 1" in sink.text
    assert "Success Rate: 66.7%" in sink.text
    assert "  ✗ B\n     └─ boom\n" in sink.text


def test_results_follow_registration_order_and_counts_add_up(sink) -> None:
    runner = TestRunner(use_color=False)
    names = ["first", "second", "second", "third", "fourth"]
    for index, name in enumerate(names):
        runner.register(name, _boom if index % 2 else _passes)

    results = runner.run_sync(sink)

    assert [result.name for result in results] == names
    assert len(results) == len(names)
    assert runner.passed_count + runner.failed_count == len(names)


def test_failure_does_not_stop_later_tests(sink) -> None:
    executed = []
    runner = TestRunner(use_color=False)

    def crash(t):
        executed.append("crash")
        raise RuntimeError("collaborator exploded")

    def later(t):
        executed.append("later")

    runner.register("crash", crash)
    runner.register("later", later)
    results = runner.run_sync(sink)

    assert executed == ["crash", "later"]
    assert results[0].error == "collaborator exploded"
    assert results[1].status is Status.PASS
    assert results[1].error is None


def test_async_rejection_is_recorded_with_message(sink) -> None:
    runner = TestRunner(use_color=False)

    async def rejects(t):
        await asyncio.sleep(0)
        raise ValueError("rejected later")

    runner.register("async reject", rejects)
    (result,) = runner.run_sync(sink)
    assert result.status is Status.FAIL
    assert result.error == "rejected later"


def test_error_without_message_falls_back_to_class_name(sink) -> None:
    runner = TestRunner(use_color=False)

    def raises_bare(t):
        raise KeyError

    runner.register("bare", raises_bare)
    (result,) = runner.run_sync(sink)
    assert result.error == "KeyError"


def test_outcome_recorded_only_after_suspension_resolves(sink) -> None:
    events = []
    runner = TestRunner(use_color=False, interval=0.01)

    async def waits_on_deferred(t):
        loop = asyncio.get_running_loop()
        deferred = loop.create_future()
        loop.call_later(0.05, deferred.set_result, 42)
        value = await deferred
        events.append("resolved")
        t.assert_equal(value, 42)

    def recording_sink(text: str) -> None:
        if "✓" in text:
            events.append("reported")
            assert [result.name for result in runner.results] == ["deferred"]
        sink(text)

    runner.register("deferred", waits_on_deferred)
    results = runner.run_sync(recording_sink)

    assert events == ["resolved", "reported"]
    assert results[0].status is Status.PASS


def test_spinner_is_cleared_before_result_line(sink) -> None:
    runner = TestRunner(use_color=False, interval=0.01)

    async def slow(t):
        await asyncio.sleep(0.1)

    runner.register("slow", slow)
    runner.register("fast", _passes)
    runner.run_sync(sink)

    frames = [chunk for chunk in sink.chunks if chunk.startswith("\r  ") and "Running slow..." in chunk]
    assert frames
    for name in ("slow", "fast"):
        line_index = sink.chunks.index(f"  ✓ {name}\n")
        assert sink.chunks[line_index - 1] == CLEAR_LINE
    assert not any("Running fast..." in chunk for chunk in sink.chunks)


def test_runner_writes_only_through_the_sink(sink, capsys) -> None:
    runner = TestRunner()
    runner.register("A", _passes)
    runner.register("B", _boom)
    runner.run_sync(sink)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""
    assert sink.text


def test_empty_runner_reports_zero_rate(sink) -> None:
    runner = TestRunner("Nothing", use_color=False)
    assert runner.run_sync(sink) == []
    assert "Tests: 0 | Passed: 0 | Failed: 0" in sink.text
    assert "Success Rate: 0.0%" in sink.text


def test_repeated_runs_accumulate_results(sink) -> None:
    runner = TestRunner(use_color=False)
    runner.register("A", _passes)
    runner.register("B", _boom)

    runner.run_sync(sink)
    second_sink = type(sink)()
    results = runner.run_sync(second_sink)

    assert [result.name for result in results] == ["A", "B", "A", "B"]
    assert runner.passed_count == 2
    assert runner.failed_count == 2
    assert runner.summary().total == 4
    assert "Tests: 2 | Passed: 1 | Failed: 1" in second_sink.text


def test_assert_equal_is_strict() -> None:
    runner = TestRunner()
    runner.assert_equal(5, 5)
    runner.assert_equal("abc", "abc")
    with pytest.raises(AssertionFailure):
        runner.assert_equal(5, "5")
    with pytest.raises(AssertionFailure):
        runner.assert_equal(True, 1)
    with pytest.raises(AssertionFailure) as info:
        runner.assert_equal(3, 4)
    assert info.value.message == "Expected 4, got 3"
    with pytest.raises(AssertionFailure, match="custom"):
        runner.assert_equal(3, 4, "custom")
    with pytest.raises(AssertionFailure) as info:
        runner.assert_equal(3, 4, "")
    assert info.value.message == ""


def test_assert_equal_does_not_compare_containers_structurally(sink) -> None:
    runner = TestRunner(use_color=False)
    shared = [1, 2]
    runner.register("equal lists", lambda t: t.assert_equal([1, 2], [1, 2]))
    runner.register("equal dicts", lambda t: t.assert_equal({"a": [1]}, {"a": [1]}))
    runner.register("equal tuples", lambda t: t.assert_equal(tuple(shared), tuple(shared)))
    runner.register("same list", lambda t: t.assert_equal(shared, shared))
    runner.register("none", lambda t: t.assert_equal(None, None))
    runner.register("floats", lambda t: t.assert_equal(1.0, 1))

    results = runner.run_sync(sink)

    assert [result.status for result in results] == [
        Status.FAIL,
        Status.FAIL,
        Status.FAIL,
        Status.PASS,
        Status.PASS,
        Status.PASS,
    ]
    assert results[0].error == "Expected [1, 2], got [1, 2]"


def test_assert_true_messages() -> None:
    runner = TestRunner()
    runner.assert_true(1)
    with pytest.raises(AssertionFailure) as info:
        runner.assert_true(False)
    assert info.value.message == "Assertion failed"
    with pytest.raises(AssertionFailure) as info:
        runner.assert_true(False, "custom")
    assert info.value.message == "custom"


def test_register_rejects_bad_input() -> None:
    runner = TestRunner()
    with pytest.raises(ValueError):
        runner.register("", _passes)
    with pytest.raises(TypeError):
        runner.register("not callable", None)  # type: ignore[arg-type]
    assert runner.tests == ()


def test_decorator_registers_and_returns_function(sink) -> None:
    runner = TestRunner(use_color=False, host={"editor": "stub"})

    @runner.test("sees host")
    def sees_host(t):
        t.assert_equal(t.host["editor"], "stub")

    assert callable(sees_host)
    assert [case.name for case in runner.tests] == ["sees host"]
    assert runner.run_sync(sink)[0].status is Status.PASS


def test_cancellation_is_not_a_test_failure(sink) -> None:
    runner = TestRunner(use_color=False)

    async def cancelled(t):
        raise asyncio.CancelledError()

    runner.register("cancelled", cancelled)
    with pytest.raises(asyncio.CancelledError):
        runner.run_sync(sink)
