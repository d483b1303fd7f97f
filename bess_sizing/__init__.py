"""
Battery storage sizing for commercial PV sites

Contains:
- Load shapes and synthetic profiles: load_profiles, profile_generator
- Battery and dispatch: battery, simulator
- Costs and economics: cost_model, economics
- Entry points: engine (single size), optimizer (size sweep)
"""

from .load_profiles import BusinessType, SeasonalProfile, BusinessLoadShape, LOAD_SHAPES
from .profile_generator import HourlySeries, generate_hourly_profiles
from .cost_model import CostBreakpoint, CostModel, InvestmentDetails, calculate_investment
from .battery import Battery
from .simulator import HourlyDataPoint, DispatchTotals, simulate_dispatch
from .inputs import SizingInput, SimulationInput
from .economics import SimulationResult, aggregate_economics
from .config import EngineConfig
from .engine import simulate, resize
from .optimizer import OptimizationReport, find_optimal_size, compare_sizes, run_optimization

__version__ = "0.1.0"

__all__ = [
    'BusinessType',
    'SeasonalProfile',
    'BusinessLoadShape',
    'LOAD_SHAPES',
    'HourlySeries',
    'generate_hourly_profiles',
    'CostBreakpoint',
    'CostModel',
    'InvestmentDetails',
    'calculate_investment',
    'Battery',
    'HourlyDataPoint',
    'DispatchTotals',
    'simulate_dispatch',
    'SizingInput',
    'SimulationInput',
    'SimulationResult',
    'aggregate_economics',
    'EngineConfig',
    'simulate',
    'resize',
    'OptimizationReport',
    'find_optimal_size',
    'compare_sizes',
    'run_optimization',
]
