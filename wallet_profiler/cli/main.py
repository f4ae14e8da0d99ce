"""Command-line interface for the wallet profiler."""

import sys
import json
from dataclasses import asdict
from typing import Any, Dict, List, Optional
import click
import structlog

from wallet_profiler.core.normalizer import deduplicate_transactions, normalize_transactions
from wallet_profiler.core.profiler import WalletProfiler
from wallet_profiler.core.trends import TIMEFRAME_WINDOWS, aggregate_daily_trends
from wallet_profiler.exceptions import WalletProfilerError
from wallet_profiler.models.config import ProfilerConfig
from wallet_profiler.models.wallet_data import Transaction, WalletReport
from wallet_profiler.utils.formatting import format_address, format_sol
from wallet_profiler.utils.logging import setup_logging

logger = structlog.get_logger(__name__)


def _read_json(path: str) -> Any:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def _records_from(payload: Any) -> List[Dict[str, Any]]:
    """Accept a bare list of transfers or an API envelope ``{"data": [...]}``."""
    if isinstance(payload, dict) and 'data' in payload:
        payload = payload['data']
    if not isinstance(payload, list):
        raise click.BadParameter("expected a JSON list of transfer records")
    return payload


def _load_transactions(records: List[Dict[str, Any]]) -> List[Transaction]:
    return deduplicate_transactions(normalize_transactions(records))


def _print_report(report: WalletReport, as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2))
        return

    features = report.features
    click.echo(f"Wallet:        {format_address(report.address) or '-'}")
    click.echo(f"Profile:       {report.description}")
    click.echo(f"Score:         {report.profile.normalized_score:.1f}/10 "
               f"(raw {report.profile.raw_score:.0f}, {report.profile.insight_level.value})")
    click.echo(f"Risk:          {report.risk.level.value} - {report.risk.description}")
    click.echo(f"Transactions:  {features.total_count} over {features.time_span_days:.1f} days")
    click.echo(f"Volume:        {format_sol(round(features.total_volume_sol * 1_000_000_000))} SOL")
    tags = ", ".join(tag.value for tag in report.profile.behavior_tags)
    click.echo(f"Tags:          {tags or '-'}")


@click.group()
@click.option('--config-file', '-c', type=click.Path(exists=True),
              help='Path to configuration file')
@click.option('--log-level', '-l', default='WARNING',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR']),
              help='Logging level')
@click.pass_context
def cli(ctx, config_file: Optional[str], log_level: str):
    """Solana Wallet Behavioral Profiler CLI."""
    ctx.ensure_object(dict)

    try:
        if config_file:
            config = ProfilerConfig(_env_file=config_file)
        else:
            config = ProfilerConfig()

        config.log_level = log_level
        setup_logging(config)

        ctx.obj['config'] = config

    except Exception as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument('transfers_file', type=click.Path(exists=True))
@click.option('--address', '-a', default=None, help='Wallet address being profiled')
@click.option('--reference-address', '-r', default=None,
              help='Address whose incoming transfers count as buys '
                   '(default: destination of the first transfer)')
@click.option('--threshold', '-t', type=float, default=None,
              help='Large transfer threshold in SOL')
@click.option('--now', type=int, default=None,
              help='Reference Unix time for age-based rules')
@click.option('--json/--text', 'as_json', default=True, help='Output format')
@click.pass_context
def analyze(ctx, transfers_file: str, address: Optional[str], reference_address: Optional[str],
            threshold: Optional[float], now: Optional[int], as_json: bool):
    """Profile a single wallet from a JSON file of transfers."""
    config = ctx.obj['config']

    try:
        transactions = _load_transactions(_records_from(_read_json(transfers_file)))

        profiler = WalletProfiler(config)
        report = profiler.analyze(
            transactions,
            address=address,
            reference_address=reference_address,
            now=now,
            large_transfer_threshold_sol=threshold
        )

        logger.info("Wallet analyzed",
                    address=address,
                    tx_count=report.features.total_count,
                    profile_type=report.profile.type.value)

        _print_report(report, as_json)

    except (WalletProfilerError, click.BadParameter, OSError, ValueError) as e:
        click.echo(f"❌ Analysis failed: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument('wallets_file', type=click.Path(exists=True))
@click.option('--now', type=int, default=None,
              help='Reference Unix time for age-based rules')
@click.pass_context
def batch(ctx, wallets_file: str, now: Optional[int]):
    """Profile every wallet in a JSON object of ``{address: [transfers]}``."""
    config = ctx.obj['config']

    try:
        payload = _read_json(wallets_file)
        if not isinstance(payload, dict):
            raise click.BadParameter("expected a JSON object keyed by wallet address")

        wallets = {
            address: _load_transactions(_records_from(records))
            for address, records in payload.items()
        }

        profiler = WalletProfiler(config)
        reports = profiler.analyze_batch(wallets, now=now)

        click.echo(json.dumps(
            {address: report.to_dict() for address, report in reports.items()},
            indent=2
        ))

    except (WalletProfilerError, click.BadParameter, OSError, ValueError) as e:
        click.echo(f"❌ Batch analysis failed: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument('transfers_file', type=click.Path(exists=True))
@click.option('--timeframe', '-f', default='all',
              type=click.Choice(list(TIMEFRAME_WINDOWS)),
              help='Time window to aggregate')
@click.option('--now', type=int, default=None,
              help='Reference Unix time for the time window')
@click.pass_context
def trends(ctx, transfers_file: str, timeframe: str, now: Optional[int]):
    """Aggregate transfers into daily count, volume and interaction series."""
    config = ctx.obj['config']

    try:
        transactions = _load_transactions(_records_from(_read_json(transfers_file)))

        profiler = WalletProfiler(config)
        daily = aggregate_daily_trends(transactions, profiler.registry,
                                       timeframe=timeframe, now=now)

        click.echo(json.dumps([asdict(day) for day in daily], indent=2))

    except (WalletProfilerError, click.BadParameter, OSError, ValueError) as e:
        click.echo(f"❌ Trend aggregation failed: {e}", err=True)
        sys.exit(1)


if __name__ == '__main__':
    cli()
