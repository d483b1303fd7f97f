"""
Simulation input dataclasses

Inputs are validated on construction so invalid values are rejected
before any simulation starts.
"""
from dataclasses import dataclass, asdict
from typing import Any, Dict
import math

from .load_profiles import BusinessType


def _check_finite(**values: float) -> None:
    for name, value in values.items():
        if not math.isfinite(value):
            raise ValueError(f"{name} must be a finite number, got {value}")


@dataclass(frozen=True)
class SizingInput:
    """
    Site and tariff parameters shared by all battery sizes

    Attributes:
        business_type: Business category for the load shape
        annual_consumption: Annual consumption (kWh)
        annual_production: Annual PV production (kWh)
        electricity_price: Grid import price (currency/kWh)
        feed_in_tariff: Grid export tariff (currency/kWh)
        battery_efficiency: Round-trip efficiency (0-1)
        construction_subsidy: Construction subsidy cost (currency/kW)
    """
    business_type: BusinessType = BusinessType.ALLGEMEIN
    annual_consumption: float = 50000.0
    annual_production: float = 60000.0
    electricity_price: float = 0.28
    feed_in_tariff: float = 0.07
    battery_efficiency: float = 0.90
    construction_subsidy: float = 100.0

    def __post_init__(self):
        object.__setattr__(self, 'business_type', BusinessType.parse(self.business_type))
        _check_finite(
            annual_consumption=self.annual_consumption,
            annual_production=self.annual_production,
            electricity_price=self.electricity_price,
            feed_in_tariff=self.feed_in_tariff,
            battery_efficiency=self.battery_efficiency,
            construction_subsidy=self.construction_subsidy,
        )
        if self.annual_consumption < 0:
            raise ValueError("annual_consumption must be non-negative")
        if self.annual_production < 0:
            raise ValueError("annual_production must be non-negative")
        if not 0 <= self.battery_efficiency <= 1:
            raise ValueError("battery_efficiency must be between 0 and 1")
        if self.construction_subsidy < 0:
            raise ValueError("construction_subsidy must be non-negative")

    def with_battery(self, capacity_kwh: float, power_kw: float) -> "SimulationInput":
        """Combine with a battery size into a full simulation input"""
        return SimulationInput(
            business_type=self.business_type,
            annual_consumption=self.annual_consumption,
            annual_production=self.annual_production,
            electricity_price=self.electricity_price,
            feed_in_tariff=self.feed_in_tariff,
            battery_efficiency=self.battery_efficiency,
            construction_subsidy=self.construction_subsidy,
            battery_capacity=capacity_kwh,
            max_power=power_kw,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['business_type'] = self.business_type.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SizingInput":
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**known)


@dataclass(frozen=True)
class SimulationInput(SizingInput):
    """
    Full input for one simulation run

    Attributes:
        battery_capacity: Battery capacity (kWh)
        max_power: Maximum charge/discharge power (kW), symmetrical
    """
    battery_capacity: float = 0.0
    max_power: float = 0.0

    def __post_init__(self):
        super().__post_init__()
        _check_finite(battery_capacity=self.battery_capacity, max_power=self.max_power)
        if self.battery_capacity < 0:
            raise ValueError("battery_capacity must be non-negative")
        if self.max_power < 0:
            raise ValueError("max_power must be non-negative")

    @property
    def sizing_input(self) -> SizingInput:
        """Parameters without the battery size"""
        return SizingInput(
            business_type=self.business_type,
            annual_consumption=self.annual_consumption,
            annual_production=self.annual_production,
            electricity_price=self.electricity_price,
            feed_in_tariff=self.feed_in_tariff,
            battery_efficiency=self.battery_efficiency,
            construction_subsidy=self.construction_subsidy,
        )

