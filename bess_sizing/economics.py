"""
Economic metrics for one simulated battery size - annual cost, savings,
self-sufficiency, self-consumption and simple payback
"""
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional
import logging

from .cost_model import InvestmentDetails
from .inputs import SimulationInput
from .simulator import DailyBreakdown, DispatchTotals

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationResult:
    """
    Result of simulating one battery size over the reference year

    `payback_years` is None when the battery never pays back
    (annual savings <= 0).
    """
    battery_capacity: float
    max_power: float
    investment: float
    grid_import_with_battery: float
    grid_export_with_battery: float
    grid_import_without_battery: float
    grid_export_without_battery: float
    annual_cost_with_battery: float
    annual_cost_without_battery: float
    annual_savings: float
    self_sufficiency: float
    self_consumption: float
    payback_years: Optional[float]
    daily_data: Optional[DailyBreakdown] = None

    @property
    def pays_back(self) -> bool:
        return self.payback_years is not None

    def to_dict(self, include_daily: bool = False) -> Dict[str, Any]:
        """Plain dict for downstream consumers"""
        data = asdict(self)
        if not include_daily:
            data.pop('daily_data')
        return data


def annual_grid_cost(
    grid_import_kwh: float,
    grid_export_kwh: float,
    electricity_price: float,
    feed_in_tariff: float
) -> float:
    """Net annual cost: import at retail price minus export revenue"""
    return grid_import_kwh * electricity_price - grid_export_kwh * feed_in_tariff


def calculate_payback(investment: float, annual_savings: float) -> Optional[float]:
    """Simple payback in years, None if savings never recover the investment"""
    if annual_savings <= 0:
        return None
    return investment / annual_savings


def aggregate_economics(
    sim_input: SimulationInput,
    totals: DispatchTotals,
    investment: InvestmentDetails
) -> SimulationResult:
    """
    Derive annual economics from dispatch totals

    Args:
        sim_input: Input that produced the totals
        totals: Annual grid import/export with and without battery
        investment: Investment breakdown for the battery

    Returns:
        SimulationResult
    """
    cost_without = annual_grid_cost(
        totals.grid_import_without_battery,
        totals.grid_export_without_battery,
        sim_input.electricity_price,
        sim_input.feed_in_tariff,
    )
    cost_with = annual_grid_cost(
        totals.grid_import_with_battery,
        totals.grid_export_with_battery,
        sim_input.electricity_price,
        sim_input.feed_in_tariff,
    )
    savings = cost_without - cost_with

    if sim_input.annual_production > 0:
        self_consumption = (
            (sim_input.annual_production - totals.grid_export_with_battery)
            / sim_input.annual_production
        )
    else:
        self_consumption = 0.0

    if sim_input.annual_consumption > 0:
        self_sufficiency = 1 - totals.grid_import_with_battery / sim_input.annual_consumption
    else:
        self_sufficiency = 1.0

    payback = calculate_payback(investment.total_investment, savings)

    logger.debug(
        f"{sim_input.battery_capacity:g} kWh: savings {savings:.2f}/year, "
        f"payback {'never' if payback is None else f'{payback:.1f} years'}, "
        f"self-sufficiency {self_sufficiency:.1%}"
    )

    return SimulationResult(
        battery_capacity=sim_input.battery_capacity,
        max_power=sim_input.max_power,
        investment=investment.total_investment,
        grid_import_with_battery=totals.grid_import_with_battery,
        grid_export_with_battery=totals.grid_export_with_battery,
        grid_import_without_battery=totals.grid_import_without_battery,
        grid_export_without_battery=totals.grid_export_without_battery,
        annual_cost_with_battery=cost_with,
        annual_cost_without_battery=cost_without,
        annual_savings=savings,
        self_sufficiency=self_sufficiency,
        self_consumption=self_consumption,
        payback_years=payback,
        daily_data=totals.daily_data,
    )
