"""
Synthetic hourly consumption and production profiles

A full reference year (8760 hours) is built from annual totals, a business
load shape and a fixed solar daily shape. Both series are normalised so
they reproduce the requested annual totals exactly.
"""
from dataclasses import dataclass
from typing import Union
import logging

import numpy as np
import pandas as pd

from .load_profiles import BusinessType, SeasonalProfile, get_load_shape

logger = logging.getLogger(__name__)

# Non-leap reference year, only used for day-of-week
REFERENCE_YEAR = 2023
DAYS_PER_YEAR = 365
HOURS_PER_DAY = 24
HOURS_PER_YEAR = DAYS_PER_YEAR * HOURS_PER_DAY

SOLAR_DAILY_SHAPE = np.array([
    0.0, 0.0, 0.0, 0.0, 0.0, 0.1,  # 00-06
    0.4, 0.7, 0.9, 1.0, 1.1, 1.2,  # 06-12
    1.1, 1.0, 0.9, 0.7, 0.4, 0.1,  # 12-18
    0.0, 0.0, 0.0, 0.0, 0.0, 0.0,  # 18-24
])

PRODUCTION_PEAK_DAY = 172
PRODUCTION_AMPLITUDE = 0.4


@dataclass(frozen=True, eq=False)
class HourlySeries:
    """Hourly consumption and production (kWh per hour) for one reference year"""
    consumption: np.ndarray
    production: np.ndarray

    def __post_init__(self):
        consumption = np.array(self.consumption, dtype=float)
        production = np.array(self.production, dtype=float)
        if consumption.shape != production.shape or consumption.ndim != 1:
            raise ValueError(
                f"Consumption and production must be 1-D series of equal length, "
                f"got {consumption.shape} and {production.shape}"
            )
        consumption.setflags(write=False)
        production.setflags(write=False)
        object.__setattr__(self, 'consumption', consumption)
        object.__setattr__(self, 'production', production)

    def __len__(self) -> int:
        return len(self.consumption)

    def to_frame(self) -> pd.DataFrame:
        """Series as a DataFrame indexed by hour of the reference year"""
        index = pd.date_range(f'{REFERENCE_YEAR}-01-01', periods=len(self), freq='h')
        return pd.DataFrame(
            {'consumption_kwh': self.consumption, 'production_kwh': self.production},
            index=index,
        )


def production_seasonal_factors(day_of_year: np.ndarray) -> np.ndarray:
    """Solar seasonal multiplier, peaking at the summer solstice"""
    return 1 + PRODUCTION_AMPLITUDE * np.cos(
        2 * np.pi * (day_of_year - PRODUCTION_PEAK_DAY) / DAYS_PER_YEAR
    )


def consumption_seasonal_factors(
    profile: SeasonalProfile,
    day_of_year: np.ndarray
) -> np.ndarray:
    """
    Consumption seasonal multiplier for the given seasonal mode

    Args:
        profile: Seasonal mode of the business category
        day_of_year: 1-based day numbers

    Returns:
        np.ndarray: One multiplier per day
    """
    if profile == SeasonalProfile.SUMMER_PEAK:
        # Peak mid-July
        return 1 + 0.3 * np.cos(2 * np.pi * (day_of_year - 196) / DAYS_PER_YEAR)
    if profile == SeasonalProfile.WINTER_PEAK:
        # Inverted: peak mid-January
        return 1 - 0.4 * np.cos(2 * np.pi * (day_of_year - 196) / DAYS_PER_YEAR)
    if profile == SeasonalProfile.SUMMER_LOW:
        # Summer holiday dip around late July
        return 1.0 - 0.9 * np.exp(-((day_of_year - 208) / 25) ** 2)
    return np.ones(len(day_of_year))


def weekend_mask(year: int = REFERENCE_YEAR) -> np.ndarray:
    """True for Saturdays and Sundays of the first 365 days of the year"""
    days = pd.date_range(f'{year}-01-01', periods=DAYS_PER_YEAR, freq='D')
    return np.asarray(days.dayofweek >= 5)


def _scale_to_total(factors: np.ndarray, annual_total: float) -> np.ndarray:
    total_factor = factors.sum()
    scale = annual_total / total_factor if total_factor > 0 else 0.0
    return factors * scale


def generate_hourly_profiles(
    annual_consumption: float,
    annual_production: float,
    business_type: Union[BusinessType, str] = BusinessType.ALLGEMEIN
) -> HourlySeries:
    """
    Generate hourly consumption and production for one reference year

    Args:
        annual_consumption: Annual consumption (kWh)
        annual_production: Annual PV production (kWh)
        business_type: Business category (unknown values use the default)

    Returns:
        HourlySeries: 8760 values per series, day-major order
    """
    if annual_consumption < 0 or annual_production < 0:
        raise ValueError("Annual consumption and production must be non-negative")

    category = BusinessType.parse(business_type)
    shape = get_load_shape(category)
    day_of_year = np.arange(1, DAYS_PER_YEAR + 1)

    day_factor = np.where(weekend_mask(), shape.weekend_factor, 1.0)
    day_factor = day_factor * consumption_seasonal_factors(shape.seasonal_profile, day_of_year)

    hourly = np.asarray(shape.hourly_multipliers, dtype=float)
    consumption_factors = np.maximum(0.0, np.outer(day_factor, hourly)).ravel()
    production_factors = np.outer(production_seasonal_factors(day_of_year), SOLAR_DAILY_SHAPE).ravel()

    logger.debug(
        f"Profile factors for {category.value}: "
        f"consumption sum={consumption_factors.sum():.2f}, "
        f"production sum={production_factors.sum():.2f}"
    )

    return HourlySeries(
        consumption=_scale_to_total(consumption_factors, annual_consumption),
        production=_scale_to_total(production_factors, annual_production),
    )
