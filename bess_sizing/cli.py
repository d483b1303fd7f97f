#!/usr/bin/env python3
"""
Battery Sizing - Command Line Entry Point
=========================================

Usage:
    bess-sizing optimize --business-type Hotel --consumption 120000 --production 90000
    bess-sizing optimize --config configs/default.yaml --detail --output-dir results
    bess-sizing simulate --capacity 200
    bess-sizing compare --price 0.32
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import EngineConfig
from .economics import SimulationResult
from .engine import simulate
from .inputs import SizingInput
from .load_profiles import BusinessType
from .optimizer import compare_sizes, run_optimization
from .reporting import daily_breakdown_to_frame, results_to_frame, save_report


def _format_payback(payback: Optional[float]) -> str:
    return "never" if payback is None else f"{payback:.1f} years"


def print_result(result: SimulationResult, title: str) -> None:
    print("\n" + "=" * 70)
    print(title)
    print("=" * 70)
    print(f"  Battery:               {result.battery_capacity:g} kWh / {result.max_power:g} kW")
    print(f"  Investment:            {result.investment:,.0f}")
    print(f"  Annual cost w/o battery: {result.annual_cost_without_battery:,.0f}")
    print(f"  Annual cost w/ battery:  {result.annual_cost_with_battery:,.0f}")
    print(f"  Annual savings:        {result.annual_savings:,.0f}")
    print(f"  Payback:               {_format_payback(result.payback_years)}")
    print(f"  Self-sufficiency:      {result.self_sufficiency:.1%}")
    print(f"  Self-consumption:      {result.self_consumption:.1%}")


def print_table(results: List[SimulationResult], title: str) -> None:
    df = results_to_frame(results)
    print(f"\n{title}")
    if df.empty:
        print("  (no results)")
        return
    print(df[['max_power', 'investment', 'annual_savings', 'payback_years',
              'self_sufficiency', 'self_consumption']].round(3).to_string())


def _load_config(args) -> EngineConfig:
    config = EngineConfig.from_yaml(args.config) if args.config else EngineConfig()
    config.validate()
    return config


def _sizing_input(args, config: EngineConfig) -> SizingInput:
    """Command-line values override the configured defaults"""
    data = config.defaults.to_dict()
    overrides = {
        'business_type': args.business_type,
        'annual_consumption': args.consumption,
        'annual_production': args.production,
        'electricity_price': args.price,
        'feed_in_tariff': args.feed_in,
        'battery_efficiency': args.efficiency,
        'construction_subsidy': args.subsidy,
    }
    data.update({k: v for k, v in overrides.items() if v is not None})
    return SizingInput.from_dict(data)


def cmd_optimize(args, config: EngineConfig, sizing_input: SizingInput) -> None:
    report = run_optimization(
        sizing_input, capture_detail=args.detail, config=config, n_jobs=args.jobs
    )
    print_result(report.optimal, "Optimal battery size")
    print(f"  Unit cost:             {report.investment.unit_cost:,.1f} per kWh")
    print_table(report.comparison, "Size comparison:")

    if args.detail:
        daily = daily_breakdown_to_frame(report.optimal.daily_data)
        print("\nRepresentative days:")
        print(daily.round(2).to_string(index=False))

    if args.output_dir:
        save_report(report, Path(args.output_dir))
        print(f"\nResults saved to: {args.output_dir}")


def cmd_simulate(args, config: EngineConfig, sizing_input: SizingInput) -> None:
    power = args.power if args.power is not None else config.power_for(args.capacity)
    result = simulate(
        sizing_input.with_battery(args.capacity, power),
        capture_detail=args.detail,
        config=config,
    )
    print_result(result, "Simulation result")
    if args.detail:
        print(daily_breakdown_to_frame(result.daily_data).round(2).to_string(index=False))


def cmd_compare(args, config: EngineConfig, sizing_input: SizingInput) -> None:
    print_table(compare_sizes(sizing_input, config=config), "Size comparison:")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Battery storage sizing for commercial PV sites",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument('--config', type=Path, help='YAML engine configuration')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--business-type', choices=[b.value for b in BusinessType])
    common.add_argument('--consumption', type=float, help='Annual consumption (kWh)')
    common.add_argument('--production', type=float, help='Annual PV production (kWh)')
    common.add_argument('--price', type=float, help='Electricity price per kWh')
    common.add_argument('--feed-in', type=float, help='Feed-in tariff per kWh')
    common.add_argument('--efficiency', type=float, help='Round-trip efficiency (0-1)')
    common.add_argument('--subsidy', type=float, help='Construction subsidy per kW')

    subparsers = parser.add_subparsers(dest='command', required=True)

    optimize = subparsers.add_parser('optimize', parents=[common], help='Find optimal battery size')
    optimize.add_argument('--detail', action='store_true', help='Show representative days')
    optimize.add_argument('--jobs', type=int, default=1, help='Parallel workers (-1 = all CPUs)')
    optimize.add_argument('--output-dir', type=Path, help='Write CSV results here')
    optimize.set_defaults(func=cmd_optimize)

    sim = subparsers.add_parser('simulate', parents=[common], help='Simulate one battery size')
    sim.add_argument('--capacity', type=float, required=True, help='Battery capacity (kWh)')
    sim.add_argument('--power', type=float, help='Charge/discharge power (kW)')
    sim.add_argument('--detail', action='store_true', help='Show representative days')
    sim.set_defaults(func=cmd_simulate)

    compare = subparsers.add_parser('compare', parents=[common], help='Compare fixed battery sizes')
    compare.set_defaults(func=cmd_compare)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    try:
        config = _load_config(args)
        sizing_input = _sizing_input(args, config)
        args.func(args, config, sizing_input)
    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
