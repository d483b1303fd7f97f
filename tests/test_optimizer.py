"""
Tests for the battery size optimizer.
"""

import logging

import pytest

from bess_sizing.config import EngineConfig
from bess_sizing.economics import SimulationResult
from bess_sizing.inputs import SizingInput
from bess_sizing.optimizer import (
    compare_sizes,
    find_optimal_size,
    run_optimization,
    select_best,
    sweep,
)


def make_result(capacity, payback=None, self_sufficiency=0.5):
    return SimulationResult(
        battery_capacity=capacity,
        max_power=capacity / 2,
        investment=1000.0,
        grid_import_with_battery=0.0,
        grid_export_with_battery=0.0,
        grid_import_without_battery=0.0,
        grid_export_without_battery=0.0,
        annual_cost_with_battery=0.0,
        annual_cost_without_battery=0.0,
        annual_savings=0.0,
        self_sufficiency=self_sufficiency,
        self_consumption=0.0,
        payback_years=payback,
    )


class TestSelectBest:
    """Test candidate selection rules."""

    def test_shortest_payback(self):
        results = [make_result(10, 8.0), make_result(20, 6.0), make_result(30, 7.0)]
        assert select_best(results).battery_capacity == 20

    def test_payback_tie_keeps_first(self):
        results = [make_result(10, 9.0), make_result(20, 6.0), make_result(30, 6.0)]
        assert select_best(results).battery_capacity == 20

    def test_ignores_never_and_zero_payback(self):
        results = [make_result(10, None), make_result(20, 0.0), make_result(30, 12.0)]
        assert select_best(results).battery_capacity == 30

    def test_falls_back_to_self_sufficiency(self, caplog):
        results = [
            make_result(10, None, 0.2),
            make_result(20, None, 0.4),
            make_result(30, None, 0.4),
        ]
        with caplog.at_level(logging.WARNING):
            assert select_best(results).battery_capacity == 20
        assert "self-sufficiency" in caplog.text

    def test_empty(self):
        assert select_best([]) is None


class TestSweep:

    def test_order_and_power(self, default_input):
        results = sweep(default_input, [100.0, 20.0, 50.0])

        assert [r.battery_capacity for r in results] == [100.0, 20.0, 50.0]
        assert [r.max_power for r in results] == [50.0, 10.0, 25.0]

    def test_no_detail(self, default_input):
        assert all(r.daily_data is None for r in sweep(default_input, [50.0]))

    def test_parallel_matches_sequential(self, default_input, small_config):
        sequential = sweep(default_input, small_config.candidate_sizes, small_config)
        parallel = sweep(default_input, small_config.candidate_sizes, small_config, n_jobs=2)
        assert parallel == sequential

    def test_empty_sizes(self, default_input):
        assert sweep(default_input, []) == []


class TestFindOptimalSize:
    """Test optimizer end to end."""

    def test_default_scenario(self, default_input):
        config = EngineConfig()
        report = run_optimization(default_input, config=config)
        best, candidates = report.optimal, report.candidates

        assert best.battery_capacity in config.candidate_sizes
        assert best.max_power == best.battery_capacity * 0.5
        assert best.payback_years is not None and best.payback_years > 0
        assert best.payback_years == min(
            r.payback_years for r in candidates if r.payback_years is not None
        )

    def test_deterministic(self, default_input, small_config):
        first = find_optimal_size(default_input, small_config)
        second = find_optimal_size(default_input, small_config)
        assert first == second

    def test_no_production_picks_first_candidate(self, small_config):
        """Without PV nothing pays back and self-sufficiency ties at zero."""
        sizing_input = SizingInput(annual_production=0)
        best = find_optimal_size(sizing_input, small_config)

        assert best.payback_years is None
        assert best.battery_capacity == 20.0

    def test_empty_candidates_use_fallback(self, default_input, caplog):
        config = EngineConfig(candidate_sizes=[])
        with caplog.at_level(logging.WARNING):
            best = find_optimal_size(default_input, config)

        assert best.battery_capacity == 100
        assert best.max_power == 50
        assert "falling back" in caplog.text


class TestRunOptimization:

    def test_report(self, default_input, small_config):
        report = run_optimization(default_input, capture_detail=True, config=small_config)

        assert len(report.candidates) == 4
        assert [r.battery_capacity for r in report.comparison] == [50.0, 100.0]
        assert set(report.optimal.daily_data) == {'Januar', 'April', 'Juli', 'November'}
        assert report.investment.total_investment == pytest.approx(report.optimal.investment)

    def test_optimal_matches_find_optimal_size(self, default_input, small_config):
        report = run_optimization(default_input, config=small_config)
        best = find_optimal_size(default_input, small_config)

        assert report.optimal == best
        assert report.optimal.daily_data is None


class TestCompareSizes:

    def test_default_sizes(self, default_input):
        results = compare_sizes(default_input)

        assert [r.battery_capacity for r in results] == [50, 100, 250, 500, 1000]
        savings = [r.annual_savings for r in results]
        assert savings[0] < savings[1]
        assert max(savings) > savings[0]

    def test_custom_sizes(self, default_input):
        results = compare_sizes(default_input, sizes=[75.0])
        assert results[0].max_power == 37.5
