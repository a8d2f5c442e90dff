"""Tests for HookChain: nesting order, short-circuits and ensure semantics."""

from __future__ import annotations

import logging

import pytest

from interaktor.core.chain import HookChain, execution_plan
from interaktor.models.definition import HookSet
from interaktor.models.hooks import ClosureHook, MethodHook


class Subject:
    """Plain object carrying hook methods that log to ``calls``."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def core(self) -> None:
        self.calls.append("core")

    def a(self) -> None:
        self.calls.append("a")

    def b(self) -> None:
        self.calls.append("b")

    def p(self) -> None:
        self.calls.append("p")

    def q(self) -> None:
        self.calls.append("q")

    def x(self, proceed) -> None:
        self.calls.append("x-enter")
        proceed()
        self.calls.append("x-exit")

    def y(self, proceed) -> None:
        self.calls.append("y-enter")
        proceed()
        self.calls.append("y-exit")

    def halt(self, proceed) -> None:
        self.calls.append("halt")

    def twice(self, proceed) -> None:
        proceed()
        proceed()

    def boom(self) -> None:
        raise RuntimeError("boom")

    def cleanup(self) -> None:
        self.calls.append("cleanup")

    def cleanup2(self) -> None:
        self.calls.append("cleanup2")


def methods(*names: str) -> tuple[MethodHook, ...]:
    return tuple(MethodHook(name=name) for name in names)


def run(subject: Subject, **hooks) -> None:
    HookChain(subject, HookSet(**hooks), subject.core).run()


class TestOrdering:
    def test_full_nesting_order(self):
        subject = Subject()
        run(
            subject,
            before=methods("a", "b"),
            around=methods("x", "y"),
            after=methods("q", "p"),
            ensure=methods("cleanup"),
        )
        assert subject.calls == [
            "x-enter", "y-enter", "a", "b", "core", "q", "p", "y-exit", "x-exit", "cleanup",
        ]

    def test_no_hooks_runs_core_only(self):
        subject = Subject()
        run(subject)
        assert subject.calls == ["core"]

    def test_closure_hooks_mix_with_method_hooks(self):
        subject = Subject()
        run(
            subject,
            before=(MethodHook(name="a"), ClosureHook(fn=lambda s: s.calls.append("block"))),
        )
        assert subject.calls == ["a", "block", "core"]

    def test_around_closure_receives_proceed(self):
        subject = Subject()

        def wrap(instance, proceed):
            instance.calls.append("wrap-enter")
            proceed()
            instance.calls.append("wrap-exit")

        run(subject, around=(ClosureHook(fn=wrap),))
        assert subject.calls == ["wrap-enter", "core", "wrap-exit"]


class TestShortCircuit:
    def test_around_without_proceed_skips_nested_work(self):
        subject = Subject()
        run(
            subject,
            before=methods("a"),
            around=methods("x", "halt", "y"),
            after=methods("p"),
            ensure=methods("cleanup"),
        )
        assert subject.calls == ["x-enter", "halt", "x-exit", "cleanup"]

    def test_proceed_may_run_more_than_once(self):
        subject = Subject()
        run(subject, before=methods("a"), around=methods("twice"))
        assert subject.calls == ["a", "core", "a", "core"]


class TestEnsure:
    def test_ensure_runs_in_declared_order_after_exception(self):
        subject = Subject()
        with pytest.raises(RuntimeError, match="boom"):
            run(
                subject,
                before=methods("boom"),
                after=methods("p"),
                ensure=methods("cleanup", "cleanup2"),
            )
        assert subject.calls == ["cleanup", "cleanup2"]

    def test_ensure_runs_when_around_raises_after_proceed(self):
        subject = Subject()

        def explode(instance, proceed):
            proceed()
            raise ValueError("late")

        with pytest.raises(ValueError):
            run(subject, around=(ClosureHook(fn=explode),), ensure=methods("cleanup"))
        assert subject.calls == ["core", "cleanup"]


class TestResolution:
    def test_unknown_method_fails_before_anything_runs(self):
        subject = Subject()
        with pytest.raises(AttributeError):
            run(subject, around=methods("x"), before=methods("a", "missing"))
        assert subject.calls == []

    @pytest.mark.parametrize("stage", ["before", "after", "around"])
    def test_ensure_runs_when_a_hook_name_is_unknown(self, stage):
        subject = Subject()
        with pytest.raises(AttributeError, match="no hook method 'missing'"):
            run(subject, ensure=methods("cleanup"), **{stage: methods("missing")})
        assert subject.calls == ["cleanup"]

    def test_unknown_ensure_method_fails_at_build(self):
        subject = Subject()
        with pytest.raises(AttributeError):
            HookChain(subject, HookSet(ensure=methods("missing")), subject.core)
        assert subject.calls == []


class TestTracing:
    def test_trace_hooks_logs_each_hook(self, trace_hooks, caplog):
        subject = Subject()
        with caplog.at_level(logging.DEBUG, logger="interaktor.core.chain"):
            run(subject, before=methods("a"), ensure=methods("cleanup"))
        assert "running before hook a" in caplog.text
        assert "running ensure hook cleanup" in caplog.text

    def test_no_trace_by_default(self, caplog):
        subject = Subject()
        with caplog.at_level(logging.DEBUG, logger="interaktor.core.chain"):
            run(subject, before=methods("a"))
        assert "running before hook" not in caplog.text


class TestExecutionPlan:
    def test_plan_lists_stages_in_run_order(self):
        hooks = HookSet(
            before=methods("a"),
            around=methods("x"),
            after=methods("q", "p"),
            ensure=methods("cleanup"),
        )
        assert execution_plan(hooks) == [
            ("around", "x"),
            ("before", "a"),
            ("core", "perform"),
            ("after", "q"),
            ("after", "p"),
            ("ensure", "cleanup"),
        ]
