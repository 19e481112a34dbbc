"""Command line front-end.

Usage:
    kalorify analyze meal.jpg
    kalorify analyze meal.jpg --language en --split-errors
    kalorify analyze meal.jpg --no-split-errors
    kalorify analyze meal.jpg --json

Exit codes: 0 on report or "no result", 1 on analysis failure,
2 on invalid arguments or unreadable image.
"""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import sys
from pathlib import Path
from typing import List, Optional, TextIO, Union

from kalorify import __version__
from kalorify.application.analysis.service import FoodAnalysisService
from kalorify.application.analysis.session import AnalysisSession
from kalorify.domain.analysis.models import ImageUpload
from kalorify.domain.analysis.outcome import AnalysisOutcome, AnalysisStatus
from kalorify.domain.localization.catalog import available_languages, load_catalog
from kalorify.domain.localization.models import LocalizedReport
from kalorify.domain.localization.resolver import LocalizationResolver
from kalorify.infrastructure.config import Settings, load_env_file
from kalorify.infrastructure.logging_config import configure_logging
from kalorify.infrastructure.webhook.client import AnalysisWebhookClient


def _fmt(value: Optional[Union[float, str]], unit: str = "") -> str:
    if value is None:
        return "-"
    if isinstance(value, str):
        return f"{value}{unit}"
    return f"{value:g}{unit}"


def render_report(report: LocalizedReport, out: TextIO) -> None:
    """Write a plain-text rendering of a report."""
    totals = report.totals
    out.write(
        f"Total: {_fmt(totals.portion_g, 'g')} | {_fmt(totals.calories_kcal, ' kcal')} | "
        f"P {_fmt(totals.protein_g, 'g')} | C {_fmt(totals.carbs_g, 'g')} | "
        f"F {_fmt(totals.fat_g, 'g')}\n"
    )
    out.write(f"\n{report.summary.primary}\n")
    if report.summary.secondary:
        out.write(f"  > {report.summary.secondary}\n")

    for entry in report.items:
        item = entry.item
        out.write(f"\n* {entry.name} ({_fmt(item.portion_g, 'g')})\n")
        out.write(
            f"  {_fmt(item.calories_kcal, ' kcal')} | P {_fmt(item.protein_g, 'g')} | "
            f"C {_fmt(item.carbs_g, 'g')} | F {_fmt(item.fat_g, 'g')}\n"
        )
        if entry.tags:
            tags = ", ".join(f"{tag.label} [{tag.color.value}]" for tag in entry.tags)
            out.write(f"  {tags}\n")
        if entry.note:
            out.write(f"  {entry.note}\n")
        if entry.tip:
            out.write(f"  > {entry.tip}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kalorify",
        description="Analyze a food photo and print its nutrition report.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    analyze = sub.add_parser("analyze", help="Analyze one food photo")
    analyze.add_argument("image", type=Path, help="Image file to analyze")
    analyze.add_argument("--url", help="Analysis webhook URL (KALORIFY_WEBHOOK_URL)")
    analyze.add_argument(
        "--language",
        choices=available_languages(),
        help="Display language (KALORIFY_LANGUAGE)",
    )
    analyze.add_argument(
        "--timeout",
        type=float,
        help="HTTP timeout in seconds (KALORIFY_TIMEOUT_S)",
    )
    analyze.add_argument(
        "--split-errors",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Distinct messages for transport and response failures (KALORIFY_SPLIT_ERRORS)",
    )
    analyze.add_argument("--json", action="store_true", help="Print the outcome as JSON")
    analyze.add_argument("--log-level", help="Log level (LOG_LEVEL)")
    return parser


async def run_analysis(settings: Settings, upload: ImageUpload) -> AnalysisOutcome:
    """Analyze one photo with the given settings."""
    resolver = LocalizationResolver(load_catalog(settings.language))
    async with AnalysisWebhookClient(
        url=settings.webhook_url,
        timeout_seconds=settings.timeout_seconds,
    ) as client:
        service = FoodAnalysisService(
            transport=client,
            resolver=resolver,
            split_errors=settings.split_errors,
        )
        session = AnalysisSession(service)
        return await session.submit(upload)


def _settings_from_args(args: argparse.Namespace) -> Settings:
    settings = Settings.from_env()
    overrides = {
        "webhook_url": args.url,
        "language": args.language,
        "timeout_seconds": args.timeout,
        "split_errors": args.split_errors,
        "log_level": args.log_level.upper() if args.log_level else None,
    }
    return dataclasses.replace(
        settings,
        **{key: value for key, value in overrides.items() if value is not None},
    )


def main(
    argv: Optional[List[str]] = None,
    out: TextIO = sys.stdout,
    err: Optional[TextIO] = None,
) -> int:
    err = err or sys.stderr
    load_env_file()
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = _settings_from_args(args)
        load_catalog(settings.language)
    except ValueError as e:
        parser.error(str(e))
    if settings.timeout_seconds <= 0:
        parser.error("--timeout must be positive")

    configure_logging(settings.log_level)

    try:
        upload = ImageUpload.from_path(args.image)
    except OSError as e:
        err.write(f"Cannot read image {args.image}: {e}\n")
        return 2

    outcome = asyncio.run(run_analysis(settings, upload))

    if args.json:
        out.write(outcome.model_dump_json(indent=2) + "\n")
    elif outcome.status == AnalysisStatus.COMPLETED and outcome.report is not None:
        render_report(outcome.report, out)
    elif outcome.status == AnalysisStatus.NO_RESULT:
        out.write(load_catalog(settings.language).message("no_result") + "\n")
    else:
        out.write(f"{outcome.error_message}\n")

    return 0 if outcome.is_success() else 1


if __name__ == "__main__":
    sys.exit(main())
