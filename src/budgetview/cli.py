"""Command-line entry points for BudgetView.

Each command reads a snapshot (CSV file or options), runs one derivation and
prints the resulting view model as JSON.
"""

from __future__ import annotations

import json
from pathlib import Path

import click

from .config import get_config
from .logging_config import get_logger, setup_logging
from .models.query import FilterSpec, PageSpec, QuerySpec, SortSpec
from .services import aggregation, distribution, formatting, import_csv, progress, query_engine, radial

logger = get_logger("cli")

_csv_path = click.Path(exists=True, dir_okay=False, path_type=Path)
_kind = click.Choice(["expense", "income"])


def _emit(payload) -> None:
    click.echo(json.dumps(payload, indent=2, default=str))


@click.group()
@click.option("--env", "env_name", type=click.Choice(["base", "dev", "test"]), default="dev", show_default=True)
@click.option("--log/--no-log", default=False, help="Write console and JSON file logs.")
@click.pass_context
def cli(ctx: click.Context, env_name: str, log: bool) -> None:
    """Derive dashboard view models from exported budget data."""

    try:
        config = get_config(env_name)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    if log:
        setup_logging(config)
    ctx.obj = config


@cli.command()
@click.argument("csv_path", type=_csv_path)
@click.option("--kind", type=_kind, default="expense", show_default=True)
def breakdown(csv_path: Path, kind: str) -> None:
    """Percentage breakdown of category totals."""

    records = import_csv.load_category_records(csv_path)
    shares = aggregation.build_breakdown(records, kind)  # type: ignore[arg-type]
    total = aggregation.category_total(records)
    _emit(
        {
            "total": total,
            "total_label": formatting.format_currency(total),
            "drift": aggregation.percentage_drift(shares),
            "shares": [share.to_dict() for share in shares],
        }
    )


@cli.command()
@click.argument("total", type=float)
@click.option("--buckets", type=int, default=None, help="Defaults to BUDGETVIEW_BUCKET_COUNT.")
@click.option("--seed", type=int, default=None, help="Seed for reproducible output.")
@click.option("--start-month", type=click.IntRange(1, 12), default=1, show_default=True)
@click.option("--year", type=int, default=None)
@click.pass_obj
def distribute(config, total: float, buckets: int | None, seed: int | None, start_month: int, year: int | None) -> None:
    """Spread TOTAL across monthly buckets."""

    seed = seed if seed is not None else config.RANDOM_SEED
    try:
        values = distribution.distribute_total(
            total,
            buckets if buckets is not None else config.BUCKET_COUNT,
            rng=distribution.seeded_source(seed),
            variance=config.VARIANCE,
        )
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--buckets") from exc
    points = distribution.label_buckets(values, start_month=start_month, year=year)
    logger.info("Distributed %s into %d buckets", total, len(values))
    _emit({"total": sum(values), "points": [point.to_dict() for point in points]})


@cli.command(name="progress")
@click.option("--target", type=float, default=0.0, show_default=True)
@click.option("--income", type=float, default=0.0, show_default=True)
@click.option("--expenses", type=float, default=0.0, show_default=True)
@click.option("--net", type=float, default=None, help="Defaults to income minus expenses.")
def progress_command(target: float, income: float, expenses: float, net: float | None) -> None:
    """Classify a budget plan's progress toward its target."""

    snapshot = {
        "target": target,
        "income": income,
        "expenses": expenses,
        "net_amount": income - expenses if net is None else net,
    }
    info = progress.classify_progress(snapshot)
    payload = info.to_dict()
    payload["bar_percent"] = progress.clamp_percent(info.progress_percent)
    payload["remaining_label"] = formatting.format_currency(info.remaining)
    _emit(payload)


@cli.command()
@click.argument("csv_path", type=_csv_path)
@click.option("--search", default="", help="Case-insensitive text match.")
@click.option("--status", default="all", show_default=True)
@click.option("--account", default="all", show_default=True)
@click.option("--type", "type_", default="all", show_default=True)
@click.option("--category", default="all", show_default=True)
@click.option("--sort", "sort_key", default="date", show_default=True)
@click.option("--direction", type=click.Choice(["asc", "desc"]), default="desc", show_default=True)
@click.option("--page", type=int, default=1, show_default=True)
@click.option("--page-size", type=int, default=None, help="Defaults to BUDGETVIEW_PAGE_SIZE.")
@click.pass_obj
def transactions(
    config,
    csv_path: Path,
    search: str,
    status: str,
    account: str,
    type_: str,
    category: str,
    sort_key: str,
    direction: str,
    page: int,
    page_size: int | None,
) -> None:
    """Filter, sort and page through a transaction export."""

    records = import_csv.load_transaction_records(csv_path)
    spec = QuerySpec(
        filter=FilterSpec(
            search_term=search,
            status_filter=status,
            account_filter=account,
            type_filter=type_,
            category_filter=category,
        ),
        sort=SortSpec(key=sort_key, direction=direction),  # type: ignore[arg-type]
        page=PageSpec(index=page, size=config.PAGE_SIZE if page_size is None else page_size),
    )
    result = query_engine.run_query(records, spec)
    payload = result.to_dict()
    payload["pager"] = query_engine.page_window(result.page_index, result.total_pages)
    payload["filter_options"] = query_engine.filter_options(records)
    _emit(payload)


@cli.command()
@click.argument("csv_path", type=_csv_path)
@click.option("--kind", type=_kind, default="expense", show_default=True)
@click.option("--gap", type=float, default=None, help="Degrees between wedges.")
@click.option("--outer", type=float, default=None, help="Outer radius.")
@click.option("--inner", type=float, default=None, help="Inner radius.")
@click.pass_obj
def donut(config, csv_path: Path, kind: str, gap: float | None, outer: float | None, inner: float | None) -> None:
    """Donut segments with angles and SVG wedge paths."""

    records = import_csv.load_category_records(csv_path)
    try:
        segments = radial.build_segments(
            records,
            kind,  # type: ignore[arg-type]
            outer_radius=config.OUTER_RADIUS if outer is None else outer,
            inner_radius=config.INNER_RADIUS if inner is None else inner,
            gap=config.WEDGE_GAP if gap is None else gap,
        )
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    _emit(
        {
            "total": aggregation.category_total(records),
            "segments": [segment.to_dict() for segment in segments],
        }
    )


def main() -> None:  # pragma: no cover - console script
    cli()
