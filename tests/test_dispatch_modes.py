"""Tests for the dispatch modes and the mode factory."""

from __future__ import annotations

import pytest
from conftest import MODE_NAMES, SMALL_N

from calls_benchmark import BenchmarkState, MethodLookupError, create_mode, get_available_modes


class DoubleStepState(BenchmarkState):
    def method_normal(self) -> None:
        self.result += 2

    def method_virtual(self) -> None:
        self.result += 2


class TestModeFactory:
    def test_fixed_order(self):
        assert get_available_modes() == [
            "normal",
            "virtual",
            "closure",
            "bound-method",
            "reflect-action",
            "reflect-delegate",
            "reflect-invoke",
        ]

    def test_display_names_follow_order(self):
        names = [create_mode(mode_id).get_mode_name() for mode_id in get_available_modes()]
        assert names == MODE_NAMES

    def test_available_modes_is_a_copy(self):
        get_available_modes().clear()
        assert len(get_available_modes()) == 7

    def test_unknown_mode(self):
        with pytest.raises(ValueError, match="Unknown dispatch mode: inline"):
            create_mode("inline")


class TestModeExecution:
    @pytest.mark.parametrize("mode_id", get_available_modes())
    def test_each_call_increments_once(self, mode_id, state):
        mode = create_mode(mode_id)
        mode.bind(state)
        mode.run(SMALL_N)
        assert state.result == SMALL_N

    @pytest.mark.parametrize("mode_id", get_available_modes())
    def test_runs_accumulate(self, mode_id, state):
        mode = create_mode(mode_id)
        mode.bind(state)
        mode.run(10)
        mode.run(15)
        assert state.result == 25

    def test_full_sequence_increments_seven_times(self, state):
        for mode_id in get_available_modes():
            mode = create_mode(mode_id)
            mode.bind(state)
            mode.run(SMALL_N)
        assert state.result == 7 * SMALL_N

    @pytest.mark.parametrize(
        "mode_id", ["virtual", "bound-method", "reflect-action", "reflect-delegate", "reflect-invoke"]
    )
    def test_resolves_against_runtime_type(self, mode_id):
        state = DoubleStepState()
        mode = create_mode(mode_id)
        mode.bind(state)
        mode.run(10)
        assert state.result == 20

    @pytest.mark.parametrize("mode_id", get_available_modes())
    def test_unbound_mode_refuses_to_run(self, mode_id):
        mode = create_mode(mode_id)
        assert not mode.is_bound
        with pytest.raises(RuntimeError, match="not bound"):
            mode.run(1)

    @pytest.mark.parametrize("mode_id", get_available_modes())
    @pytest.mark.parametrize("iterations", [0, -5])
    def test_non_positive_iterations_rejected(self, mode_id, iterations, state):
        mode = create_mode(mode_id)
        mode.bind(state)
        with pytest.raises(ValueError, match=f"iterations must be >= 1, got {iterations}"):
            mode.run(iterations)
        assert state.result == 0


class TestReflectiveModeLookup:
    @pytest.mark.parametrize("mode_id", ["reflect-action", "reflect-delegate", "reflect-invoke"])
    def test_missing_method_is_fatal(self, mode_id, state):
        mode = create_mode(mode_id, method_name="method_missing")
        with pytest.raises(MethodLookupError, match="'method_missing' not found on BenchmarkState"):
            mode.bind(state)
        assert state.result == 0

    @pytest.mark.parametrize("mode_id", ["reflect-action", "reflect-delegate", "reflect-invoke"])
    def test_other_method_by_name(self, mode_id, state):
        mode = create_mode(mode_id, method_name="method_virtual")
        mode.bind(state)
        mode.run(5)
        assert state.result == 5
