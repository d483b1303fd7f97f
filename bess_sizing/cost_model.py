"""
Investment cost model for battery storage

Unit cost (currency/kWh) falls with capacity along a piecewise-linear
curve. Total investment adds a per-kW construction subsidy cost for the
rated charge power.
"""
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence
import logging

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CostBreakpoint:
    """One point on the unit cost curve"""
    capacity_kwh: float
    unit_cost: float


DEFAULT_COST_BREAKPOINTS: List[CostBreakpoint] = [
    CostBreakpoint(0, 500),     # base cost for small systems
    CostBreakpoint(100, 400),
    CostBreakpoint(250, 350),
    CostBreakpoint(500, 315),
    CostBreakpoint(1000, 280),
    CostBreakpoint(2000, 255),
]


@dataclass(frozen=True)
class InvestmentDetails:
    """Investment breakdown for one (capacity, power, subsidy) combination"""
    unit_cost: float
    storage_cost: float
    subsidy_cost: float
    total_investment: float


class CostModel:
    """
    Piecewise-linear unit cost curve

    Args:
        breakpoints: (capacity, unit cost) pairs, any order, unique capacities
    """

    def __init__(self, breakpoints: Optional[Iterable[CostBreakpoint]] = None):
        points = sorted(
            DEFAULT_COST_BREAKPOINTS if breakpoints is None else breakpoints,
            key=lambda p: p.capacity_kwh
        )
        if not points:
            raise ValueError("Cost breakpoint table must not be empty")

        capacities = np.array([p.capacity_kwh for p in points], dtype=float)
        if np.any(np.diff(capacities) <= 0):
            raise ValueError("Cost breakpoint capacities must be unique")

        self.breakpoints: Sequence[CostBreakpoint] = tuple(points)
        self._capacities = capacities
        self._unit_costs = np.array([p.unit_cost for p in points], dtype=float)

    def unit_cost(self, capacity_kwh: float) -> float:
        """
        Unit cost at the given capacity

        Clamped to the first/last breakpoint outside the table range,
        linearly interpolated in between.
        """
        return float(np.interp(capacity_kwh, self._capacities, self._unit_costs))

    def investment(
        self,
        capacity_kwh: float,
        power_kw: float,
        subsidy_per_kw: float
    ) -> InvestmentDetails:
        """
        Total investment for a battery

        Args:
            capacity_kwh: Battery capacity (kWh)
            power_kw: Rated charge power (kW)
            subsidy_per_kw: Construction subsidy cost per kW of power

        Returns:
            InvestmentDetails with unit cost and cost components
        """
        unit_cost = self.unit_cost(capacity_kwh)
        storage_cost = capacity_kwh * unit_cost
        subsidy_cost = power_kw * subsidy_per_kw
        return InvestmentDetails(
            unit_cost=unit_cost,
            storage_cost=storage_cost,
            subsidy_cost=subsidy_cost,
            total_investment=storage_cost + subsidy_cost,
        )

    def __repr__(self):
        points = ", ".join(f"{p.capacity_kwh:g}:{p.unit_cost:g}" for p in self.breakpoints)
        return f"CostModel({points})"


_DEFAULT_MODEL = CostModel()


def calculate_investment(
    capacity_kwh: float,
    power_kw: float,
    subsidy_per_kw: float
) -> InvestmentDetails:
    """Investment using the default cost curve"""
    return _DEFAULT_MODEL.investment(capacity_kwh, power_kw, subsidy_per_kw)
