"""
Engine configuration for battery sizing.

Static data supplied by the embedding application at startup: cost curve,
candidate battery sizes, comparison sizes, C-rate and default inputs.
Supports loading from and saving to YAML.

Usage:
    >>> from bess_sizing.config import EngineConfig
    >>>
    >>> config = EngineConfig.from_yaml("configs/default.yaml")
    >>> config.validate()
    >>> print(config.c_rate)
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union
import logging

import numpy as np
import yaml

from .cost_model import DEFAULT_COST_BREAKPOINTS, CostBreakpoint, CostModel
from .inputs import SizingInput

logger = logging.getLogger(__name__)


def default_candidate_sizes() -> List[float]:
    """Battery sizes (kWh) swept by the optimizer, ascending"""
    sizes: List[float] = []
    sizes.extend(range(10, 201, 10))
    sizes.extend(range(250, 1001, 50))
    sizes.extend(range(1100, 2001, 100))
    return [float(s) for s in sizes]


def sizes_from_ranges(ranges: List[Dict[str, float]]) -> List[float]:
    """
    Expand inclusive {start, stop, step} ranges into a size list

    Args:
        ranges: e.g. [{'start': 10, 'stop': 200, 'step': 10}]
    """
    sizes: List[float] = []
    for r in ranges:
        start, stop, step = float(r['start']), float(r['stop']), float(r['step'])
        if step <= 0:
            raise ValueError(f"Range step must be positive, got {step}")
        n_steps = int(np.floor((stop - start) / step + 1e-9))
        sizes.extend(start + i * step for i in range(n_steps + 1))
    return sizes


DEFAULT_COMPARISON_SIZES = [50.0, 100.0, 250.0, 500.0, 1000.0]


@dataclass
class EngineConfig:
    """
    Master configuration for sizing runs.

    Attributes:
        cost_breakpoints: Unit cost curve
        candidate_sizes: Battery sizes swept by the optimizer (kWh, ascending)
        comparison_sizes: Fixed sizes for the comparison table (kWh)
        c_rate: Power rating per kWh of capacity used for swept sizes
        fallback_capacity_kwh: Size simulated when no candidates exist
        fallback_power_kw: Power for the fallback size
        defaults: Default site and tariff inputs
    """
    cost_breakpoints: List[CostBreakpoint] = field(
        default_factory=lambda: list(DEFAULT_COST_BREAKPOINTS)
    )
    candidate_sizes: List[float] = field(default_factory=default_candidate_sizes)
    comparison_sizes: List[float] = field(default_factory=lambda: list(DEFAULT_COMPARISON_SIZES))
    c_rate: float = 0.5
    fallback_capacity_kwh: float = 100.0
    fallback_power_kw: float = 50.0
    defaults: SizingInput = field(default_factory=SizingInput)

    def cost_model(self) -> CostModel:
        return CostModel(self.cost_breakpoints)

    def power_for(self, capacity_kwh: float) -> float:
        """Charge/discharge power for a capacity under the C-rate assumption"""
        return capacity_kwh * self.c_rate

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "EngineConfig":
        config = cls()

        if 'cost_breakpoints' in config_dict:
            config.cost_breakpoints = [
                CostBreakpoint(
                    capacity_kwh=float(bp['capacity_kwh']),
                    unit_cost=float(bp['unit_cost']),
                )
                for bp in config_dict['cost_breakpoints']
            ]

        if 'candidate_sizes' in config_dict:
            config.candidate_sizes = [float(s) for s in config_dict['candidate_sizes']]
        elif 'candidate_ranges' in config_dict:
            config.candidate_sizes = sizes_from_ranges(config_dict['candidate_ranges'])

        if 'comparison_sizes' in config_dict:
            config.comparison_sizes = [float(s) for s in config_dict['comparison_sizes']]

        config.c_rate = float(config_dict.get('c_rate', config.c_rate))
        config.fallback_capacity_kwh = float(
            config_dict.get('fallback_capacity_kwh', config.fallback_capacity_kwh)
        )
        config.fallback_power_kw = float(
            config_dict.get('fallback_power_kw', config.fallback_power_kw)
        )

        if 'defaults' in config_dict:
            config.defaults = SizingInput.from_dict(config_dict['defaults'] or {})

        return config

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "EngineConfig":
        """
        Load engine configuration from YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            EngineConfig instance

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            ValueError: If YAML is empty or not a mapping
        """
        yaml_path = Path(yaml_path)

        if not yaml_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {yaml_path}")

        with open(yaml_path, 'r', encoding='utf-8') as f:
            config_dict = yaml.safe_load(f)

        if config_dict is None or not isinstance(config_dict, dict):
            raise ValueError(f"Empty or invalid YAML file: {yaml_path}")

        logger.info(f"Loaded engine configuration from {yaml_path}")
        return cls.from_dict(config_dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'cost_breakpoints': [
                {'capacity_kwh': bp.capacity_kwh, 'unit_cost': bp.unit_cost}
                for bp in self.cost_breakpoints
            ],
            'candidate_sizes': list(self.candidate_sizes),
            'comparison_sizes': list(self.comparison_sizes),
            'c_rate': self.c_rate,
            'fallback_capacity_kwh': self.fallback_capacity_kwh,
            'fallback_power_kw': self.fallback_power_kw,
            'defaults': self.defaults.to_dict(),
        }

    def to_yaml(self, yaml_path: Union[str, Path]) -> None:
        """
        Save configuration to YAML file.

        Args:
            yaml_path: Path to save YAML file
        """
        yaml_path = Path(yaml_path)
        yaml_path.parent.mkdir(parents=True, exist_ok=True)

        with open(yaml_path, 'w', encoding='utf-8') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False,
                      allow_unicode=True)

    def validate(self) -> None:
        """
        Validate configuration parameters.

        Raises:
            ValueError: If configuration is invalid
        """
        if not self.cost_breakpoints:
            raise ValueError("cost_breakpoints must not be empty")
        # Raises on duplicate capacities
        self.cost_model()

        if not self.candidate_sizes:
            raise ValueError("candidate_sizes must not be empty")
        if any(s <= 0 for s in self.candidate_sizes):
            raise ValueError("candidate_sizes must be positive")
        if any(b <= a for a, b in zip(self.candidate_sizes, self.candidate_sizes[1:])):
            raise ValueError("candidate_sizes must be strictly increasing")

        if any(s <= 0 for s in self.comparison_sizes):
            raise ValueError("comparison_sizes must be positive")

        if self.c_rate <= 0:
            raise ValueError("c_rate must be positive")
        if self.fallback_capacity_kwh < 0 or self.fallback_power_kw < 0:
            raise ValueError("Fallback capacity and power must be non-negative")
