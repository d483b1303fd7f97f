"""
Single battery size simulation

Profile generation -> dispatch -> economics for one (capacity, power)
combination. Also used for ad-hoc re-simulation of a chosen size.
"""
from typing import Optional
import logging

from .config import EngineConfig
from .economics import SimulationResult, aggregate_economics
from .inputs import SimulationInput, SizingInput
from .profile_generator import HourlySeries, generate_hourly_profiles
from .simulator import simulate_dispatch

logger = logging.getLogger(__name__)


def simulate(
    sim_input: SimulationInput,
    capture_detail: bool = False,
    config: Optional[EngineConfig] = None,
    series: Optional[HourlySeries] = None
) -> SimulationResult:
    """
    Simulate one battery size over the reference year

    Args:
        sim_input: Site, tariff and battery parameters
        capture_detail: Record hourly flows for the representative days
        config: Engine configuration (cost curve); defaults if None
        series: Precomputed hourly profiles for the same annual totals and
            business type. Generated from sim_input if None.

    Returns:
        SimulationResult
    """
    config = config or EngineConfig()

    if series is None:
        series = generate_hourly_profiles(
            sim_input.annual_consumption,
            sim_input.annual_production,
            sim_input.business_type,
        )

    investment = config.cost_model().investment(
        sim_input.battery_capacity,
        sim_input.max_power,
        sim_input.construction_subsidy,
    )
    totals = simulate_dispatch(
        series,
        capacity_kwh=sim_input.battery_capacity,
        power_kw=sim_input.max_power,
        efficiency=sim_input.battery_efficiency,
        capture_detail=capture_detail,
    )
    return aggregate_economics(sim_input, totals, investment)


def resize(
    result: SimulationResult,
    sizing_input: SizingInput,
    factor: float,
    capture_detail: bool = False,
    config: Optional[EngineConfig] = None
) -> SimulationResult:
    """
    Re-simulate a result with its capacity scaled by `factor`

    Power is recomputed from the new capacity with the configured C-rate.

    Raises:
        ValueError: If factor is not positive, or when shrinking a battery
            of 1 kWh or less
    """
    config = config or EngineConfig()

    if factor <= 0:
        raise ValueError(f"Resize factor must be positive, got {factor}")
    if factor < 1 and result.battery_capacity <= 1:
        raise ValueError(
            f"Cannot shrink a {result.battery_capacity:g} kWh battery any further"
        )

    capacity = result.battery_capacity * factor
    power = config.power_for(capacity)
    logger.info(f"Resizing {result.battery_capacity:g} kWh -> {capacity:g} kWh ({power:g} kW)")

    return simulate(sizing_input.with_battery(capacity, power), capture_detail, config)
