"""
PerformanceHistory - Bounded log of performance snapshots

Fixed-capacity, append-only sequence consumed by the charts. The oldest
point is evicted first.

Author: Hermetic Compressor Simulator Project
Date: 2026-10-18
"""

from collections import deque
from dataclasses import dataclass, field, fields
from typing import Deque, Dict, Iterator, List, Optional

import numpy as np

from app_hermetic.core.state import CycleState


@dataclass(frozen=True)
class PerformanceDataPoint:
    """
    Time-stamped snapshot of one simulation tick.

    Attributes:
        timestamp: Wall-clock time of the tick [s since epoch]
        compressor_rpm: [rpm]
        system_temperature: [°C]
        target_temperature: [°C]
        compressor_pressure: [bar]
        condenser_pressure: [bar]
        evaporator_pressure: [bar]
        power_consumption: [W]
        cop: [-]
        superheat: [°C]
        subcooling: [°C]
        motor_temperature: [°C]
        motor_efficiency: [%]
        refrigerant_state: Phase labels at the 8 cycle points
    """
    timestamp: float
    compressor_rpm: float
    system_temperature: float
    target_temperature: float
    compressor_pressure: float
    condenser_pressure: float
    evaporator_pressure: float
    power_consumption: float
    cop: float
    superheat: float
    subcooling: float
    motor_temperature: float
    motor_efficiency: float
    refrigerant_state: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_state(cls, state: CycleState, timestamp: float) -> "PerformanceDataPoint":
        return cls(
            timestamp=timestamp,
            compressor_rpm=state.compressor_rpm,
            system_temperature=state.system_temperature,
            target_temperature=state.target_temperature,
            compressor_pressure=state.compressor_pressure,
            condenser_pressure=state.condenser_pressure,
            evaporator_pressure=state.evaporator_pressure,
            power_consumption=state.power_consumption,
            cop=state.cop,
            superheat=state.superheat,
            subcooling=state.subcooling,
            motor_temperature=state.motor_temperature,
            motor_efficiency=state.motor_efficiency,
            refrigerant_state=dict(state.refrigerant_state),
        )


_NUMERIC_FIELDS = tuple(
    f.name for f in fields(PerformanceDataPoint) if f.name != "refrigerant_state"
)


class PerformanceHistory:
    """
    Ring buffer of PerformanceDataPoint, chronological order.

    Only append() mutates the sequence; when full, the oldest point is
    dropped.
    """

    def __init__(self, capacity: int = 20):
        if capacity <= 0:
            raise ValueError(f"History capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._points: Deque[PerformanceDataPoint] = deque(maxlen=capacity)

    def append(self, point: PerformanceDataPoint) -> None:
        self._points.append(point)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[PerformanceDataPoint]:
        return iter(self._points)

    def points(self) -> List[PerformanceDataPoint]:
        """Copy of the retained points, oldest first."""
        return list(self._points)

    def latest(self) -> Optional[PerformanceDataPoint]:
        return self._points[-1] if self._points else None

    def clear(self) -> None:
        self._points.clear()

    def series(self, name: str) -> np.ndarray:
        """
        Extract one numeric field as an array for plotting.

        Args:
            name: Field of PerformanceDataPoint (e.g. 'cop', 'timestamp')

        Returns:
            1D float array, oldest first

        Raises:
            KeyError: If name is not a numeric field
        """
        if name not in _NUMERIC_FIELDS:
            raise KeyError(f"Unknown history series '{name}'")
        return np.array([getattr(p, name) for p in self._points], dtype=float)
