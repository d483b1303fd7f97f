"""
Battery storage model with SOC tracking
"""


class Battery:
    """
    Battery with state-of-charge tracking for self-consumption dispatch

    Charging is lossless. The round-trip efficiency loss is applied once,
    when energy leaves the battery. SOC starts empty.

    Args:
        capacity_kwh: Battery capacity (kWh)
        power_kw: Maximum charge/discharge power (kW), symmetrical
        efficiency: Round-trip efficiency (0-1)
        duration_h: Length of one time step (hours)
    """

    def __init__(
        self,
        capacity_kwh: float,
        power_kw: float,
        efficiency: float = 0.9,
        duration_h: float = 1.0
    ):
        if capacity_kwh < 0 or power_kw < 0:
            raise ValueError("Battery capacity and power must be non-negative")
        if not 0 <= efficiency <= 1:
            raise ValueError("Battery efficiency must be between 0 and 1")

        self.capacity_kwh = capacity_kwh
        self.power_kw = power_kw
        self.efficiency = efficiency
        self.duration_h = duration_h

        self.soc_kwh = 0.0

    @property
    def max_energy_per_step(self) -> float:
        return self.power_kw * self.duration_h

    def charge(self, surplus_kwh: float) -> float:
        """
        Store surplus energy

        Args:
            surplus_kwh: Energy available for charging (kWh)

        Returns:
            float: Energy stored (kWh)
        """
        headroom = self.capacity_kwh - self.soc_kwh
        stored = max(0.0, min(surplus_kwh, self.max_energy_per_step, headroom))
        self.soc_kwh += stored
        return stored

    def discharge(self, deficit_kwh: float) -> float:
        """
        Take energy out of the battery to cover a deficit

        Args:
            deficit_kwh: Energy needed by the load (kWh)

        Returns:
            float: Energy taken from the battery before efficiency loss (kWh).
                The load receives this amount times `efficiency`.
        """
        taken = max(0.0, min(deficit_kwh, self.max_energy_per_step, self.soc_kwh))
        self.soc_kwh -= taken
        return taken

    def get_soc_fraction(self) -> float:
        if self.capacity_kwh == 0:
            return 0.0
        return self.soc_kwh / self.capacity_kwh

    def reset(self, initial_soc_kwh: float = 0.0):
        """Reset SOC (kWh), clamped to the capacity"""
        self.soc_kwh = min(max(initial_soc_kwh, 0.0), self.capacity_kwh)

    def __repr__(self):
        return (f"Battery(capacity={self.capacity_kwh:.1f}kWh, "
                f"power={self.power_kw:.1f}kW, "
                f"SOC={self.soc_kwh:.1f}kWh ({self.get_soc_fraction()*100:.1f}%))")
