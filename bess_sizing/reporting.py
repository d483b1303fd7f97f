"""
Tabular export of simulation results.

Converts results to pandas DataFrames and writes CSV files for further
analysis. Rendering charts is left to the caller.
"""

from dataclasses import asdict
from pathlib import Path
from typing import Iterable, Optional
import logging

import pandas as pd

from .economics import SimulationResult
from .optimizer import OptimizationReport
from .simulator import DailyBreakdown

logger = logging.getLogger(__name__)


def results_to_frame(results: Iterable[SimulationResult]) -> pd.DataFrame:
    """
    One row per result, indexed by battery capacity.

    `payback_years` is NaN where the battery never pays back.
    """
    rows = [result.to_dict() for result in results]
    df = pd.DataFrame(rows)
    if df.empty:
        return df
    df['payback_years'] = pd.to_numeric(df['payback_years'])
    return df.set_index('battery_capacity')


def daily_breakdown_to_frame(daily_data: Optional[DailyBreakdown]) -> pd.DataFrame:
    """Representative-day detail as a long table with a `month` column."""
    if not daily_data:
        return pd.DataFrame()

    rows = []
    for month, points in daily_data.items():
        for point in points:
            row = asdict(point)
            row['month'] = month
            rows.append(row)

    df = pd.DataFrame(rows)
    columns = ['month'] + [c for c in df.columns if c != 'month']
    return df[columns]


def save_report(report: OptimizationReport, output_dir: Path) -> None:
    """
    Export an optimization report to CSV files.

    Args:
        report: Result of run_optimization
        output_dir: Directory to save CSV files
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    # Optimal size with investment breakdown
    summary = report.optimal.to_dict()
    summary.update({f'investment_{k}': v for k, v in asdict(report.investment).items()})
    pd.DataFrame([summary]).to_csv(output_dir / 'optimal_size.csv', index=False)

    results_to_frame(report.comparison).to_csv(output_dir / 'size_comparison.csv')
    results_to_frame(report.candidates).to_csv(output_dir / 'candidate_sweep.csv')

    daily = daily_breakdown_to_frame(report.optimal.daily_data)
    if not daily.empty:
        daily.to_csv(output_dir / 'representative_days.csv', index=False)

    logger.info(f"Saved sizing report to {output_dir}")
