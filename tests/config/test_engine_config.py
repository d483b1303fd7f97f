"""
Unit tests for EngineConfig and YAML loading.
"""

from pathlib import Path

import pytest
import yaml

from bess_sizing.config import (
    DEFAULT_COMPARISON_SIZES,
    EngineConfig,
    default_candidate_sizes,
    sizes_from_ranges,
)
from bess_sizing.cost_model import CostBreakpoint
from bess_sizing.inputs import SizingInput
from bess_sizing.load_profiles import BusinessType

DEFAULT_YAML = Path(__file__).parents[2] / "configs" / "default.yaml"


class TestCandidateSizes:
    """Test candidate size lists."""

    def test_default_candidates(self):
        sizes = default_candidate_sizes()
        assert len(sizes) == 46
        assert sizes[:3] == [10, 20, 30]
        assert sizes[19:22] == [200, 250, 300]
        assert sizes[35:37] == [1000, 1100]
        assert sizes[-1] == 2000

    def test_sizes_from_ranges(self):
        sizes = sizes_from_ranges([
            {'start': 10, 'stop': 30, 'step': 10},
            {'start': 50, 'stop': 60, 'step': 5},
        ])
        assert sizes == [10, 20, 30, 50, 55, 60]

    def test_sizes_from_ranges_rejects_zero_step(self):
        with pytest.raises(ValueError, match="step must be positive"):
            sizes_from_ranges([{'start': 10, 'stop': 30, 'step': 0}])


class TestEngineConfig:
    """Test engine configuration."""

    def test_default_config(self):
        config = EngineConfig()
        assert config.c_rate == 0.5
        assert config.fallback_capacity_kwh == 100
        assert config.fallback_power_kw == 50
        assert config.comparison_sizes == DEFAULT_COMPARISON_SIZES
        assert config.defaults == SizingInput()
        config.validate()

    def test_power_for(self):
        assert EngineConfig().power_for(300) == 150
        assert EngineConfig(c_rate=1.0).power_for(300) == 300

    def test_validate_empty_candidates(self):
        with pytest.raises(ValueError, match="candidate_sizes must not be empty"):
            EngineConfig(candidate_sizes=[]).validate()

    def test_validate_unsorted_candidates(self):
        with pytest.raises(ValueError, match="strictly increasing"):
            EngineConfig(candidate_sizes=[10, 30, 20]).validate()

    def test_validate_non_positive_candidates(self):
        with pytest.raises(ValueError, match="candidate_sizes must be positive"):
            EngineConfig(candidate_sizes=[0, 10]).validate()

    def test_validate_cost_breakpoints(self):
        with pytest.raises(ValueError, match="must not be empty"):
            EngineConfig(cost_breakpoints=[]).validate()
        with pytest.raises(ValueError, match="unique"):
            EngineConfig(
                cost_breakpoints=[CostBreakpoint(0, 500), CostBreakpoint(0, 400)]
            ).validate()

    def test_validate_c_rate(self):
        with pytest.raises(ValueError, match="c_rate must be positive"):
            EngineConfig(c_rate=0).validate()


class TestYamlLoading:
    """Test YAML serialization."""

    def test_default_yaml_matches_defaults(self):
        config = EngineConfig.from_yaml(DEFAULT_YAML)
        config.validate()

        default = EngineConfig()
        assert config.candidate_sizes == default.candidate_sizes
        assert config.comparison_sizes == default.comparison_sizes
        assert config.cost_breakpoints == default.cost_breakpoints
        assert config.c_rate == default.c_rate
        assert config.defaults == default.defaults

    def test_round_trip(self, tmp_path):
        config = EngineConfig(
            candidate_sizes=[25.0, 75.0],
            c_rate=1.0,
            defaults=SizingInput(business_type="Hähnchenstall", electricity_price=0.35),
        )
        yaml_path = tmp_path / "nested" / "config.yaml"
        config.to_yaml(yaml_path)

        assert yaml_path.exists()
        with open(yaml_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
        assert data['defaults']['business_type'] == "Hähnchenstall"

        loaded = EngineConfig.from_yaml(yaml_path)
        assert loaded.candidate_sizes == [25.0, 75.0]
        assert loaded.c_rate == 1.0
        assert loaded.defaults.business_type is BusinessType.HAEHNCHENSTALL
        assert loaded.defaults.electricity_price == 0.35

    def test_partial_yaml_keeps_defaults(self, tmp_path):
        yaml_path = tmp_path / "partial.yaml"
        yaml_path.write_text("c_rate: 0.25\ndefaults:\n  annual_consumption: 80000\n")

        config = EngineConfig.from_yaml(yaml_path)
        assert config.c_rate == 0.25
        assert config.candidate_sizes == default_candidate_sizes()
        assert config.defaults.annual_consumption == 80000
        assert config.defaults.annual_production == 60000

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            EngineConfig.from_yaml(tmp_path / "missing.yaml")

    def test_empty_file(self, tmp_path):
        yaml_path = tmp_path / "empty.yaml"
        yaml_path.write_text("")
        with pytest.raises(ValueError, match="Empty or invalid YAML"):
            EngineConfig.from_yaml(yaml_path)
