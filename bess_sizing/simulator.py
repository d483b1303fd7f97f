"""
Hour-by-hour battery dispatch over one reference year

The battery charges from PV surplus and discharges into deficits
(self-consumption dispatch). Annual grid import/export is accumulated both
with the battery and for the no-battery baseline.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional
import logging

from .battery import Battery
from .profile_generator import HOURS_PER_DAY, HourlySeries

logger = logging.getLogger(__name__)

# Zero-based day index per representative month, one per quarter
REPRESENTATIVE_DAYS: Dict[str, int] = {
    'Januar': 14,
    'April': 104,
    'Juli': 195,
    'November': 319,
}


@dataclass(frozen=True)
class HourlyDataPoint:
    """Energy flows (kWh) in one captured hour"""
    hour: int
    consumption: float
    production: float
    pv_to_load: float
    battery_discharge: float  # delivered to the load, after efficiency loss
    grid_import: float
    battery_charge: float
    grid_export: float
    battery_soc: float  # after the hour


DailyBreakdown = Dict[str, List[HourlyDataPoint]]


@dataclass(frozen=True)
class DispatchTotals:
    """Annual energy totals (kWh) from one dispatch run"""
    grid_import_with_battery: float
    grid_export_with_battery: float
    grid_import_without_battery: float
    grid_export_without_battery: float
    final_soc_kwh: float
    daily_data: Optional[DailyBreakdown] = None


def simulate_dispatch(
    series: HourlySeries,
    capacity_kwh: float,
    power_kw: float,
    efficiency: float,
    capture_detail: bool = False
) -> DispatchTotals:
    """
    Simulate battery dispatch hour by hour

    Energy flow per hour:
        surplus (production > consumption): charge battery, export the rest
        deficit: discharge battery (efficiency loss on discharge), import the rest

    SOC starts at 0 and carries over the whole year.

    Args:
        series: Hourly consumption/production
        capacity_kwh: Battery capacity (kWh), 0 for no battery
        power_kw: Maximum charge/discharge power (kW)
        efficiency: Round-trip efficiency (0-1)
        capture_detail: Record hourly flows for the representative days

    Returns:
        DispatchTotals with annual import/export with and without battery
    """
    battery = Battery(capacity_kwh=capacity_kwh, power_kw=power_kw, efficiency=efficiency)

    import_with = 0.0
    export_with = 0.0
    import_without = 0.0
    export_without = 0.0

    day_labels = {day: label for label, day in REPRESENTATIVE_DAYS.items()}
    daily_data: Optional[DailyBreakdown] = (
        {label: [] for label in REPRESENTATIVE_DAYS} if capture_detail else None
    )

    consumption = series.consumption.tolist()
    production = series.production.tolist()

    for t in range(len(consumption)):
        cons = consumption[t]
        prod = production[t]
        net = prod - cons

        # No-battery baseline
        if net > 0:
            export_without += net
        else:
            import_without -= net

        if net > 0:
            charged = battery.charge(net)
            hour_export = net - charged
            hour_import = 0.0
            delivered = 0.0
            export_with += hour_export
        else:
            deficit = -net
            charged = 0.0
            delivered = battery.discharge(deficit) * efficiency
            hour_import = deficit - delivered
            hour_export = 0.0
            import_with += hour_import

        if daily_data is not None:
            label = day_labels.get(t // HOURS_PER_DAY)
            if label is not None:
                daily_data[label].append(HourlyDataPoint(
                    hour=t % HOURS_PER_DAY,
                    consumption=cons,
                    production=prod,
                    pv_to_load=min(prod, cons),
                    battery_discharge=delivered,
                    grid_import=max(0.0, hour_import),
                    battery_charge=charged,
                    grid_export=hour_export,
                    battery_soc=battery.soc_kwh,
                ))

    logger.debug(
        f"Dispatch {capacity_kwh:g} kWh / {power_kw:g} kW: "
        f"import {import_with:.0f} kWh (baseline {import_without:.0f}), "
        f"export {export_with:.0f} kWh (baseline {export_without:.0f})"
    )

    return DispatchTotals(
        grid_import_with_battery=import_with,
        grid_export_with_battery=export_with,
        grid_import_without_battery=import_without,
        grid_export_without_battery=export_without,
        final_soc_kwh=battery.soc_kwh,
        daily_data=daily_data,
    )
