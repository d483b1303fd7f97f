"""
Battery size optimization by candidate sweep

Every candidate size is simulated with power = capacity x C-rate. The best
candidate has the shortest payback; if no candidate pays back, the one
with the highest self-sufficiency is chosen instead.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple
import logging

from joblib import Parallel, delayed

from .config import EngineConfig
from .cost_model import InvestmentDetails
from .economics import SimulationResult
from .engine import simulate
from .inputs import SizingInput
from .profile_generator import HourlySeries, generate_hourly_profiles

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OptimizationReport:
    """Optimal size with its investment breakdown and the size comparison"""
    optimal: SimulationResult
    investment: InvestmentDetails
    comparison: List[SimulationResult] = field(default_factory=list)
    candidates: List[SimulationResult] = field(default_factory=list)


def _profiles_for(sizing_input: SizingInput) -> HourlySeries:
    return generate_hourly_profiles(
        sizing_input.annual_consumption,
        sizing_input.annual_production,
        sizing_input.business_type,
    )


def sweep(
    sizing_input: SizingInput,
    sizes: Sequence[float],
    config: Optional[EngineConfig] = None,
    n_jobs: int = 1,
    series: Optional[HourlySeries] = None
) -> List[SimulationResult]:
    """
    Simulate each size without detail capture

    Args:
        sizing_input: Site and tariff parameters
        sizes: Battery capacities (kWh)
        config: Engine configuration
        n_jobs: Parallel workers (1 = sequential, -1 = all CPUs)
        series: Precomputed hourly profiles, shared by all sizes

    Returns:
        Results in the same order as `sizes`
    """
    config = config or EngineConfig()
    if not sizes:
        return []
    if series is None:
        series = _profiles_for(sizing_input)

    inputs = [sizing_input.with_battery(size, config.power_for(size)) for size in sizes]
    if n_jobs == 1:
        return [simulate(sim_input, False, config, series) for sim_input in inputs]

    return Parallel(n_jobs=n_jobs)(
        delayed(simulate)(sim_input, False, config, series) for sim_input in inputs
    )


def select_best(results: Sequence[SimulationResult]) -> Optional[SimulationResult]:
    """
    Pick the best candidate

    1. Shortest defined, positive payback (first occurrence on ties)
    2. Otherwise highest self-sufficiency (first occurrence on ties)
    3. None for an empty candidate list
    """
    best: Optional[SimulationResult] = None
    for result in results:
        if result.payback_years is None or result.payback_years <= 0:
            continue
        if best is None or result.payback_years < best.payback_years:
            best = result
    if best is not None:
        return best

    for result in results:
        if best is None or result.self_sufficiency > best.self_sufficiency:
            best = result
    if best is not None:
        logger.warning(
            f"No candidate pays back, choosing {best.battery_capacity:g} kWh "
            f"by self-sufficiency ({best.self_sufficiency:.1%})"
        )
    return best


def _find_optimal(
    sizing_input: SizingInput,
    config: EngineConfig,
    n_jobs: int,
    series: HourlySeries
) -> Tuple[SimulationResult, List[SimulationResult]]:
    candidates = sweep(sizing_input, config.candidate_sizes, config, n_jobs, series)
    best = select_best(candidates)

    if best is None:
        logger.warning(
            f"Empty candidate list, falling back to {config.fallback_capacity_kwh:g} kWh / "
            f"{config.fallback_power_kw:g} kW"
        )
        best = simulate(
            sizing_input.with_battery(config.fallback_capacity_kwh, config.fallback_power_kw),
            False, config, series,
        )
    else:
        payback = best.payback_years
        logger.info(
            f"Optimal size {best.battery_capacity:g} kWh of {len(candidates)} candidates, "
            f"payback {'never' if payback is None else f'{payback:.1f} years'}"
        )
    return best, candidates


def find_optimal_size(
    sizing_input: SizingInput,
    config: Optional[EngineConfig] = None,
    n_jobs: int = 1
) -> SimulationResult:
    """
    Find the most economical battery size

    Args:
        sizing_input: Site and tariff parameters (no battery size)
        config: Engine configuration (candidates, C-rate, cost curve)
        n_jobs: Parallel workers for the sweep (1 = sequential)

    Returns:
        SimulationResult of the selected size, without daily detail
    """
    config = config or EngineConfig()
    best, _ = _find_optimal(sizing_input, config, n_jobs, _profiles_for(sizing_input))
    return best


def compare_sizes(
    sizing_input: SizingInput,
    sizes: Optional[Sequence[float]] = None,
    config: Optional[EngineConfig] = None
) -> List[SimulationResult]:
    """Results for the fixed comparison sizes (power = capacity x C-rate)"""
    config = config or EngineConfig()
    return sweep(sizing_input, config.comparison_sizes if sizes is None else sizes, config)


def run_optimization(
    sizing_input: SizingInput,
    capture_detail: bool = False,
    config: Optional[EngineConfig] = None,
    n_jobs: int = 1
) -> OptimizationReport:
    """
    Find the optimal size, re-simulate it and build the size comparison

    Args:
        sizing_input: Site and tariff parameters
        capture_detail: Include representative-day detail for the optimal size
        config: Engine configuration
        n_jobs: Parallel workers for the sweep

    Returns:
        OptimizationReport
    """
    config = config or EngineConfig()
    series = _profiles_for(sizing_input)

    best, candidates = _find_optimal(sizing_input, config, n_jobs, series)
    if capture_detail:
        best = simulate(
            sizing_input.with_battery(best.battery_capacity, best.max_power),
            True, config, series,
        )

    investment = config.cost_model().investment(
        best.battery_capacity, best.max_power, sizing_input.construction_subsidy
    )
    comparison = sweep(sizing_input, config.comparison_sizes, config, series=series)

    return OptimizationReport(
        optimal=best,
        investment=investment,
        comparison=comparison,
        candidates=candidates,
    )
