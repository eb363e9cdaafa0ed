"""
SimulationEngine - Owner of one simulation instance

Holds the current CycleState and its performance history, exposes the
operator actions and the tick driver. Every mutation goes through this
class; readers get immutable snapshots.

Author: Hermetic Compressor Simulator Project
Date: 2026-10-18
"""

import logging
import math
import time
from dataclasses import dataclass, field, replace
from typing import Callable, Optional, Tuple

from app_hermetic.core.errors import DomainError
from app_hermetic.core.history import PerformanceDataPoint, PerformanceHistory
from app_hermetic.core.noise import NoiseSource
from app_hermetic.core.state import CycleState, refrigeration_defaults

logger = logging.getLogger(__name__)

FIDELITIES = ("DETAILED", "SIMPLE")

# Compressor efficiency floor, keeps 100 / efficiency finite
MIN_COMPRESSOR_EFFICIENCY = 1.0

# Slow parameters and their clamp range (None = unbounded)
TUNABLE_PARAMETERS = {
    "refrigerant_charge": (0.0, 100.0),
    "expansion_valve_opening": (0.0, 100.0),
    "compressor_efficiency": (MIN_COMPRESSOR_EFFICIENCY, 100.0),
    "condenser_efficiency": (0.0, 100.0),
    "evaporator_efficiency": (0.0, 100.0),
    "ambient_temperature": None,
    "motor_balance": (0.0, 1.0),
    "friction_coefficient": (0.0, 1.0),
}


@dataclass
class InputLimits:
    """
    Clamp ranges applied to operator inputs.

    A range set to None lets the value through untouched.
    """
    rpm: Optional[Tuple[float, float]] = (0.0, 3000.0)
    target_temperature: Optional[Tuple[float, float]] = (-50.0, 50.0)


@dataclass
class SimulationConfig:
    """
    Engine configuration.

    Attributes:
        fidelity: "DETAILED" (refrigeration cycle) or "SIMPLE" (motor)
        tick_period_s: Period of the simulation clock [s]
        history_capacity: Number of retained history points
        start_rpm: Speed set when the system is switched on [rpm]
        step_on_action: Re-run the step right after setpoint actions
        seed: Seed of the noise source
        input_limits: Clamp ranges of the operator inputs
    """
    fidelity: str = "DETAILED"
    tick_period_s: float = 1.0
    history_capacity: int = 20
    start_rpm: float = 1500.0
    step_on_action: bool = True
    seed: Optional[int] = 42
    input_limits: InputLimits = field(default_factory=InputLimits)


def build_model(fidelity: str):
    """
    Create the cycle model for a fidelity level.

    Args:
        fidelity: "DETAILED" or "SIMPLE"

    Returns:
        Model object exposing step(state, noise) -> CycleState

    Raises:
        ValueError: If fidelity is unknown
    """
    # Import here to avoid circular dependencies (models import core)
    if fidelity == "DETAILED":
        from app_hermetic.modules.refrigeration.model import RefrigerationCycleModel
        return RefrigerationCycleModel()
    if fidelity == "SIMPLE":
        from app_hermetic.modules.motor.model import MotorModel
        return MotorModel()
    raise ValueError(f"Unknown fidelity '{fidelity}', expected one of {FIDELITIES}")


class SimulationEngine:
    """
    One independently owned simulation instance.

    Single-threaded: the tick driver and the operator actions are expected
    to run on the same event loop, so no locking is done.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        state: Optional[CycleState] = None,
        model=None,
        noise: Optional[NoiseSource] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.config = config or SimulationConfig()
        self.model = model or build_model(self.config.fidelity)
        self.noise = noise or NoiseSource(self.config.seed)
        self.clock = clock
        self.history = PerformanceHistory(self.config.history_capacity)
        self._initial_state = state or refrigeration_defaults()
        self._state = self._initial_state
        self._time_accum_s = 0.0
        self.tick_count = 0
        self.last_error: Optional[str] = None

    # ========== Read surface ==========

    @property
    def state(self) -> CycleState:
        return self._state

    def snapshot(self) -> CycleState:
        """Current state; safe to keep, it is never mutated."""
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state.is_running

    # ========== Tick driver ==========

    def step(self) -> bool:
        """
        Run one simulation tick.

        On success the new state replaces the current one and exactly one
        history point is appended. A DomainError leaves state and history
        untouched.

        Returns:
            True if the tick was applied
        """
        try:
            new_state = self.model.step(self._state, self.noise)
        except DomainError as e:
            self.last_error = str(e)
            logger.error("Tick rejected, keeping previous state: %s", e)
            return False

        self._state = new_state
        self.last_error = None
        self.tick_count += 1
        self.history.append(PerformanceDataPoint.from_state(new_state, self.clock()))
        logger.debug(
            "tick %d: rpm=%.0f T=%.2f P_cond=%.2f P_evap=%.2f W=%.1f",
            self.tick_count,
            new_state.compressor_rpm,
            new_state.system_temperature,
            new_state.condenser_pressure,
            new_state.evaporator_pressure,
            new_state.power_consumption,
        )
        return True

    def advance(self, dt: float) -> bool:
        """
        Feed elapsed wall-clock time to the periodic clock.

        Ticks only while running. At most one tick is performed per call;
        periods missed during a stall are dropped, not replayed.

        Args:
            dt: Elapsed time since the previous call [s]

        Returns:
            True if a tick was performed
        """
        if dt <= 0 or not self._state.is_running:
            return False

        self._time_accum_s += float(dt)
        if self._time_accum_s < self.config.tick_period_s:
            return False

        self._time_accum_s = 0.0
        return self.step()

    # ========== Operator actions ==========

    def toggle_running(self) -> bool:
        """
        Switch the system on or off.

        Starting sets the default speed (and runs a step when
        step_on_action is set); stopping zeroes the speed.

        Returns:
            New running flag
        """
        running = not self._state.is_running
        if running:
            self._state = replace(
                self._state, is_running=True, compressor_rpm=self.config.start_rpm
            )
            logger.info("System started at %.0f rpm", self.config.start_rpm)
            self._after_action()
        else:
            self._state = replace(self._state, is_running=False, compressor_rpm=0.0)
            self._time_accum_s = 0.0
            logger.info("System stopped")
        return running

    def set_target_temperature(self, temperature: float) -> None:
        """Set the temperature setpoint [°C]."""
        value = self._bounded("target_temperature", temperature, self.config.input_limits.target_temperature)
        self._state = replace(self._state, target_temperature=value)
        self._after_action()

    def set_defrost_mode(self, enabled: bool) -> None:
        self._state = replace(self._state, defrost_mode=bool(enabled))
        logger.info("Defrost mode %s", "on" if enabled else "off")
        self._after_action()

    def set_compressor_rpm(self, rpm: float) -> None:
        """
        Set the compressor speed [rpm].

        While the system is stopped the speed stays 0 until
        toggle_running() starts it; the idle step still runs.
        """
        value = self._bounded("compressor_rpm", rpm, self.config.input_limits.rpm)
        if self._state.is_running:
            self._state = replace(self._state, compressor_rpm=value)
        else:
            logger.warning("Speed request of %.0f rpm ignored, system is stopped", value)
        self._after_action()

    def set_parameters(self, **params: float) -> None:
        """
        Change slow configuration parameters of the cycle.

        Accepted keys: see TUNABLE_PARAMETERS. Percent parameters are
        clamped to [0, 100], compressor efficiency to
        [MIN_COMPRESSOR_EFFICIENCY, 100].

        Raises:
            KeyError: If a key is not tunable
            ValueError: If a value is not finite
        """
        updates = {}
        for name, value in params.items():
            if name not in TUNABLE_PARAMETERS:
                raise KeyError(f"'{name}' is not a tunable parameter")
            updates[name] = self._bounded(name, value, TUNABLE_PARAMETERS[name])
        self._state = replace(self._state, **updates)
        self._after_action()

    def reset(self, state: Optional[CycleState] = None) -> None:
        """Restore an initial state and clear the history."""
        self._state = state or self._initial_state
        self.history.clear()
        self.noise.reset()
        self._time_accum_s = 0.0
        self.tick_count = 0
        self.last_error = None

    # ========== Helpers ==========

    def _after_action(self) -> None:
        if self.config.step_on_action:
            self.step()

    @staticmethod
    def _bounded(name: str, value: float, limits: Optional[Tuple[float, float]]) -> float:
        """
        Validate an operator input and clamp it to its range.

        Raises:
            ValueError: If value is NaN or infinite
        """
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"{name} must be a finite number, got {value}")
        if limits is None:
            return value
        lo, hi = limits
        clamped = max(lo, min(hi, value))
        if clamped != value:
            logger.warning("%s=%s outside [%s, %s], clamped to %s", name, value, lo, hi, clamped)
        return clamped
