"""
Business load shapes for synthetic consumption profiles.

Each business category maps to a 24-hour multiplier pattern (relative
weights, not normalised), a weekend multiplier and a seasonal mode.
The table is built once at import and never mutated.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple, Union
import logging

logger = logging.getLogger(__name__)


class SeasonalProfile(Enum):
    """Seasonal modulation applied to daily consumption."""
    NONE = "none"
    WINTER_PEAK = "winter_peak"
    SUMMER_PEAK = "summer_peak"
    SUMMER_LOW = "summer_low"


class BusinessType(Enum):
    """Supported business categories."""
    ALLGEMEIN = "Allgemein"
    FERKELZUCHT = "Ferkelzucht"
    PUTENZUCHT = "Putenzucht"
    HAEHNCHENSTALL = "Hähnchenstall"
    FLEISCHEREI = "Fleischerei"
    CATERING = "Catering"
    HOTEL = "Hotel"
    LOGISTIKBETRIEB = "Logistikbetrieb"
    IMMOBILIENVERWALTER = "Immobilienverwalter"
    INDUSTRIEBETRIEB = "Industriebetrieb"
    VERWALTUNG = "Verwaltung"
    SCHULE = "Schule"
    BBZ = "BBZ"

    @classmethod
    def default(cls) -> "BusinessType":
        return cls.ALLGEMEIN

    @classmethod
    def parse(cls, value: Union["BusinessType", str, None]) -> "BusinessType":
        """
        Resolve a category from an enum member or its string value.

        Unknown values fall back to the default category.
        """
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value == value or member.name == value:
                return member
        logger.warning(f"Unknown business type {value!r}, using {cls.default().value}")
        return cls.default()


@dataclass(frozen=True)
class BusinessLoadShape:
    """Daily consumption shape for one business category"""
    hourly_multipliers: Tuple[float, ...]
    weekend_factor: float
    seasonal_profile: SeasonalProfile
    description: str = ""

    def __post_init__(self):
        if len(self.hourly_multipliers) != 24:
            raise ValueError(
                f"Load shape needs 24 hourly multipliers, got {len(self.hourly_multipliers)}"
            )
        if any(m < 0 for m in self.hourly_multipliers):
            raise ValueError("Hourly multipliers must be non-negative")
        if self.weekend_factor < 0:
            raise ValueError("Weekend factor must be non-negative")


LOAD_SHAPES: Dict[BusinessType, BusinessLoadShape] = {
    BusinessType.ALLGEMEIN: BusinessLoadShape(
        (0.6, 0.6, 0.6, 0.6, 0.7, 0.8, 1.2, 1.4, 1.5, 1.4, 1.3, 1.2,
         1.2, 1.3, 1.4, 1.5, 1.6, 1.8, 2.0, 1.8, 1.6, 1.2, 0.9, 0.7),
        weekend_factor=0.8,
        seasonal_profile=SeasonalProfile.NONE,
        description="General commercial profile: business-hours rise, moderate base load.",
    ),
    BusinessType.FERKELZUCHT: BusinessLoadShape(
        (1.2, 1.2, 1.2, 1.2, 1.2, 1.2, 1.1, 1.0, 1.0, 0.9, 0.9, 0.9,
         0.9, 0.9, 1.0, 1.0, 1.1, 1.2, 1.2, 1.2, 1.2, 1.2, 1.2, 1.2),
        weekend_factor=1.0,
        seasonal_profile=SeasonalProfile.WINTER_PEAK,
        description="Piglet breeding: high, constant ventilation and heating load.",
    ),
    BusinessType.PUTENZUCHT: BusinessLoadShape(
        (1.1, 1.1, 1.1, 1.1, 1.1, 1.2, 1.2, 1.1, 1.0, 0.9, 0.8, 0.8,
         0.8, 0.9, 1.0, 1.1, 1.2, 1.2, 1.2, 1.1, 1.1, 1.1, 1.1, 1.1),
        weekend_factor=1.0,
        seasonal_profile=SeasonalProfile.WINTER_PEAK,
        description="Turkey farming: high, fairly constant ventilation and heating load.",
    ),
    BusinessType.HAEHNCHENSTALL: BusinessLoadShape(
        (1.3, 1.3, 1.2, 1.2, 1.2, 1.1, 1.0, 0.9, 0.8, 0.8, 0.8, 0.8,
         0.8, 0.8, 0.9, 1.0, 1.1, 1.2, 1.2, 1.2, 1.3, 1.3, 1.3, 1.3),
        weekend_factor=1.0,
        seasonal_profile=SeasonalProfile.WINTER_PEAK,
        description="Poultry house: high base load from ventilation and heating.",
    ),
    BusinessType.FLEISCHEREI: BusinessLoadShape(
        (0.8, 0.8, 0.8, 0.9, 1.2, 1.8, 2.0, 1.9, 1.7, 1.5, 1.4, 1.3,
         1.2, 1.1, 0.9, 0.8, 0.7, 0.7, 0.7, 0.7, 0.7, 0.7, 0.7, 0.8),
        weekend_factor=0.3,
        seasonal_profile=SeasonalProfile.NONE,
        description="Butcher: morning-heavy processing on top of constant cooling.",
    ),
    BusinessType.CATERING: BusinessLoadShape(
        (0.5, 0.5, 0.5, 0.6, 0.8, 1.2, 1.5, 1.2, 1.0, 0.8, 0.9, 1.0,
         1.2, 1.3, 1.5, 1.8, 2.2, 2.5, 2.0, 1.5, 0.8, 0.6, 0.5, 0.5),
        weekend_factor=1.2,
        seasonal_profile=SeasonalProfile.SUMMER_PEAK,
        description="Catering: bimodal, morning preparation and evening events.",
    ),
    BusinessType.HOTEL: BusinessLoadShape(
        (0.9, 0.8, 0.8, 0.8, 0.9, 1.2, 1.5, 1.6, 1.2, 1.0, 0.9, 0.9,
         1.0, 1.1, 1.2, 1.4, 1.6, 1.8, 1.9, 1.7, 1.5, 1.2, 1.0, 0.9),
        weekend_factor=1.1,
        seasonal_profile=SeasonalProfile.SUMMER_PEAK,
        description="Hotel: morning and evening peaks over a round-the-clock base load.",
    ),
    BusinessType.LOGISTIKBETRIEB: BusinessLoadShape(
        (1.1, 1.0, 1.0, 1.0, 1.1, 1.2, 1.2, 1.2, 1.2, 1.2, 1.2, 1.1,
         1.1, 1.1, 1.1, 1.1, 1.1, 1.0, 1.0, 0.9, 0.9, 0.9, 0.9, 1.0),
        weekend_factor=0.7,
        seasonal_profile=SeasonalProfile.NONE,
        description="Logistics: shift operation with a high, even load.",
    ),
    BusinessType.IMMOBILIENVERWALTER: BusinessLoadShape(
        (0.7, 0.6, 0.6, 0.6, 0.7, 0.9, 1.1, 1.3, 1.4, 1.5, 1.5, 1.4,
         1.3, 1.3, 1.4, 1.4, 1.2, 1.1, 0.9, 0.8, 0.8, 0.7, 0.7, 0.7),
        weekend_factor=0.2,
        seasonal_profile=SeasonalProfile.SUMMER_LOW,
        description="Property management: office building with a clear daily cycle.",
    ),
    BusinessType.INDUSTRIEBETRIEB: BusinessLoadShape(
        (0.8, 0.8, 0.8, 0.8, 0.9, 1.2, 1.4, 1.5, 1.5, 1.5, 1.4, 1.4,
         1.4, 1.4, 1.5, 1.5, 1.4, 1.2, 1.0, 0.9, 0.8, 0.8, 0.8, 0.8),
        weekend_factor=0.4,
        seasonal_profile=SeasonalProfile.NONE,
        description="Industry: two-shift production profile.",
    ),
    BusinessType.VERWALTUNG: BusinessLoadShape(
        (0.4, 0.4, 0.4, 0.4, 0.5, 0.8, 1.2, 1.8, 1.9, 1.9, 1.8, 1.6,
         1.6, 1.6, 1.8, 1.8, 1.2, 0.8, 0.6, 0.5, 0.4, 0.4, 0.4, 0.4),
        weekend_factor=0.1,
        seasonal_profile=SeasonalProfile.SUMMER_LOW,
        description="Administration: classic office peak during core hours.",
    ),
    BusinessType.SCHULE: BusinessLoadShape(
        (0.3, 0.3, 0.3, 0.3, 0.4, 0.6, 1.2, 2.0, 2.2, 2.0, 1.8, 1.5,
         1.4, 1.2, 1.0, 0.8, 0.5, 0.4, 0.3, 0.3, 0.3, 0.3, 0.3, 0.3),
        weekend_factor=0.05,
        seasonal_profile=SeasonalProfile.SUMMER_LOW,
        description="School: sharp peaks tied to teaching hours, minimal in holidays.",
    ),
    BusinessType.BBZ: BusinessLoadShape(
        (0.3, 0.3, 0.3, 0.3, 0.5, 0.8, 1.5, 2.0, 2.1, 2.0, 1.9, 1.7,
         1.6, 1.5, 1.4, 1.1, 0.7, 0.5, 0.4, 0.4, 0.3, 0.3, 0.3, 0.3),
        weekend_factor=0.1,
        seasonal_profile=SeasonalProfile.SUMMER_LOW,
        description="Vocational training centre: like a school with a longer day.",
    ),
}


def get_load_shape(business_type: Union[BusinessType, str, None]) -> BusinessLoadShape:
    """Look up the load shape, falling back to the default category."""
    return LOAD_SHAPES[BusinessType.parse(business_type)]
