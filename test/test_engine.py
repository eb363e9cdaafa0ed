"""
Unit tests for the simulation engine

Tests the tick driver, operator actions, input clamping, failed-tick
handling, history bookkeeping and determinism.

Author: Hermetic Compressor Simulator Project
Date: 2026-10-18
"""

import itertools
import math
from dataclasses import replace

import pytest

from app_hermetic.core.engine import (
    InputLimits,
    MIN_COMPRESSOR_EFFICIENCY,
    SimulationConfig,
    SimulationEngine,
    build_model,
)
from app_hermetic.core.state import refrigeration_defaults
from app_hermetic.modules.motor import MotorController
from app_hermetic.modules.refrigeration import RefrigerationController


def counting_clock():
    """Clock returning 0, 1, 2, ... on successive calls."""
    counter = itertools.count()
    return lambda: float(next(counter))


@pytest.fixture
def engine():
    """Fixture providing a detailed engine with a deterministic clock."""
    return RefrigerationController(clock=counting_clock())


class TestBuildModel:
    """Test fidelity selection."""

    @pytest.mark.parametrize("fidelity", ["DETAILED", "SIMPLE"])
    def test_known_fidelities(self, fidelity):
        assert build_model(fidelity).fidelity == fidelity

    def test_unknown_fidelity(self):
        with pytest.raises(ValueError):
            build_model("EXACT")

    def test_engine_from_config(self):
        engine = SimulationEngine(SimulationConfig(fidelity="SIMPLE"))
        assert engine.model.fidelity == "SIMPLE"


class TestToggle:
    """Test start/stop."""

    def test_start_runs_one_step(self, engine):
        running = engine.toggle_running()
        s = engine.state
        assert running and s.is_running
        assert s.compressor_rpm == 1500.0
        assert len(engine.history) == 1, "Start should record exactly one history point"
        assert s.system_temperature == pytest.approx(24.0325)
        assert s.cop == pytest.approx(0.6375)

    def test_stop_zeroes_speed(self, engine):
        engine.toggle_running()
        running = engine.toggle_running()
        assert not running and not engine.state.is_running
        assert engine.state.compressor_rpm == 0.0
        assert len(engine.history) == 1

    def test_rpm_zero_iff_stopped(self, engine):
        engine.set_compressor_rpm(2000)
        assert engine.state.compressor_rpm == 0.0, "Speed requests are ignored while stopped"
        engine.toggle_running()
        engine.set_compressor_rpm(2000)
        assert engine.state.compressor_rpm == 2000.0
        engine.toggle_running()
        assert engine.state.compressor_rpm == 0.0

    def test_speed_request_while_stopped_steps_idle(self, engine):
        """The request is dropped but pressure equalization still advances."""
        engine.set_compressor_rpm(2000)
        s = engine.state
        assert s.compressor_rpm == 0.0 and not s.is_running
        assert len(engine.history) == 1
        assert s.condenser_pressure < refrigeration_defaults().condenser_pressure

    def test_motor_start_does_not_step(self):
        motor = MotorController()
        motor.toggle_running()
        assert motor.state.is_running
        assert motor.state.compressor_rpm == 1200.0
        assert len(motor.history) == 0, "Motor actions wait for the next tick"


class TestHistory:
    """Test history bookkeeping through the engine."""

    def test_bounded_and_ordered(self, engine):
        engine.toggle_running()
        for _ in range(25):
            assert engine.step()
        timestamps = engine.history.series("timestamp")
        assert len(engine.history) == 20
        assert list(timestamps) == [float(i) for i in range(6, 26)]
        assert engine.tick_count == 26

    def test_idle_steps_recorded(self, engine):
        engine.step()
        engine.step()
        assert len(engine.history) == 2

    def test_reset(self, engine):
        engine.toggle_running()
        engine.step()
        engine.reset()
        assert len(engine.history) == 0
        assert engine.state == refrigeration_defaults()
        assert engine.tick_count == 0


class TestFailedTick:
    """Test that a domain error leaves the engine untouched."""

    def test_state_and_history_retained(self):
        bad = replace(
            refrigeration_defaults(), is_running=True, compressor_rpm=1500.0, compressor_efficiency=0.0
        )
        engine = RefrigerationController(state=bad)
        before = engine.snapshot()

        assert engine.step() is False
        assert engine.snapshot() is before, "Failed tick must keep the previous state"
        assert len(engine.history) == 0
        assert engine.last_error is not None

    def test_zero_efficiency_clamped_and_ticks_continue(self, engine):
        """An efficiency of 0 is clamped, so the clock keeps applying ticks."""
        engine.toggle_running()
        engine.set_parameters(compressor_efficiency=0.0)
        assert engine.state.compressor_efficiency == MIN_COMPRESSOR_EFFICIENCY
        assert engine.last_error is None

        applied = [engine.advance(1.0) for _ in range(10)]
        assert all(applied), "Every full period should apply a tick"
        assert engine.last_error is None
        assert len(engine.history) == 12
        assert all(math.isfinite(v) for v in engine.history.series("power_consumption"))


class TestOperatorInputs:
    """Test validation and clamping at the action boundary."""

    def test_rpm_clamped(self, engine):
        engine.toggle_running()
        engine.set_compressor_rpm(5000)
        assert engine.state.compressor_rpm == 3000.0
        engine.set_compressor_rpm(-10)
        assert engine.state.compressor_rpm == 0.0

    def test_target_clamped(self, engine):
        engine.set_target_temperature(-80)
        assert engine.state.target_temperature == -50.0

    def test_clamping_disabled(self):
        config = SimulationConfig(input_limits=InputLimits(rpm=None, target_temperature=None))
        engine = RefrigerationController(config=config)
        engine.toggle_running()
        engine.set_compressor_rpm(4500)
        engine.set_target_temperature(-80)
        assert engine.state.compressor_rpm == 4500.0
        assert engine.state.target_temperature == -80.0

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), -float("inf")])
    def test_non_finite_rejected(self, engine, value):
        before = engine.snapshot()
        with pytest.raises(ValueError):
            engine.set_target_temperature(value)
        assert engine.snapshot() is before

    def test_target_change_steps_immediately(self, engine):
        engine.toggle_running()
        engine.set_target_temperature(-2)
        assert engine.state.target_temperature == -2.0
        assert len(engine.history) == 2

    def test_set_parameters(self, engine):
        engine.set_parameters(refrigerant_charge=150, expansion_valve_opening=30, ambient_temperature=35)
        s = engine.state
        assert s.refrigerant_charge == 100.0
        assert s.expansion_valve_opening == 30.0
        assert s.ambient_temperature == 35.0

    def test_unknown_parameter(self, engine):
        with pytest.raises(KeyError):
            engine.set_parameters(compressor_rpm=100)

    def test_defrost_toggle(self, engine):
        engine.set_defrost_mode(True)
        assert engine.state.defrost_mode


class TestAdvance:
    """Test the periodic clock driver."""

    def test_no_tick_while_stopped(self, engine):
        assert engine.advance(5.0) is False
        assert len(engine.history) == 0

    def test_accumulates_to_period(self, engine):
        engine.toggle_running()
        assert engine.advance(0.5) is False
        assert engine.advance(0.6) is True
        assert len(engine.history) == 2

    def test_missed_ticks_dropped(self, engine):
        """A 10 s stall yields one tick, not ten."""
        engine.toggle_running()
        assert engine.advance(10.0) is True
        assert len(engine.history) == 2
        assert engine.advance(0.1) is False

    def test_non_positive_dt(self, engine):
        engine.toggle_running()
        assert engine.advance(0.0) is False
        assert engine.advance(-1.0) is False


class TestDeterminism:
    """Test that a seed fixes the trajectory."""

    def run_motor(self, seed):
        motor = MotorController(config=SimulationConfig(
            fidelity="SIMPLE", start_rpm=1200.0, step_on_action=False, seed=seed,
        ))
        motor.toggle_running()
        for _ in range(15):
            motor.step()
        return motor.state

    def test_same_seed_same_trajectory(self):
        assert self.run_motor(123) == self.run_motor(123)

    def test_different_seed_differs(self):
        assert self.run_motor(1).motor_temperature != self.run_motor(2).motor_temperature

    def test_reset_replays(self):
        motor = MotorController()
        motor.toggle_running()
        motor.step()
        first = motor.state.power_consumption
        motor.reset()
        motor.toggle_running()
        motor.step()
        assert motor.state.power_consumption == first
