"""Shared CLI utilities."""

import sys
from pathlib import Path
from typing import Optional

import click
import structlog
from rich.console import Console
from rich.table import Table

from cli.config import load_config_model
from cli.config_models import MindlogConfig
from journal import JournalService, JournalStorage
from llm import GenerationClient, LLMError, create_llm_provider
from sentiment import (
    LocalAnalyzer,
    RecommendationSelector,
    RemoteAnalyzer,
    SentimentAnalyzer,
    SentimentResult,
)
from shared_types import StressLevel

console = Console()
logger = structlog.get_logger()


def load_config_or_exit(config_path: Optional[Path] = None) -> MindlogConfig:
    try:
        return load_config_model(config_path)
    except ValueError as e:
        console.print(f"[red]Config error:[/] {e}")
        sys.exit(1)


def build_generation_client(config_model: MindlogConfig) -> Optional[GenerationClient]:
    """Generation client for the configured provider, or None when unavailable.

    A missing key or SDK leaves the journal usable with local analysis only.
    """
    llm_cfg = config_model.llm
    if llm_cfg.provider == "none" or not config_model.analysis.remote_enabled:
        return None
    try:
        provider = create_llm_provider(
            provider=llm_cfg.provider,
            api_key=llm_cfg.api_key or None,
            model=llm_cfg.model,
        )
    except LLMError as e:
        logger.info("remote_analysis_unavailable", error=str(e))
        return None
    return GenerationClient(provider, timeout=llm_cfg.timeout, max_tokens=llm_cfg.max_tokens)


def get_components(local_only: bool = False, config_path: Optional[Path] = None) -> dict:
    """Initialize all components from config.

    Args:
        local_only: If True, skip the LLM provider entirely
        config_path: Explicit config file (default: search standard locations)

    Reuses the config already loaded by the root command when there is one.
    """
    config_model = None if config_path else _root_obj().get("config_model")
    if config_model is None:
        config_model = load_config_or_exit(config_path)
    analysis_cfg = config_model.analysis

    client = None if local_only else build_generation_client(config_model)

    remote = None
    if client is not None:
        remote = RemoteAnalyzer(client, sum_tolerance=analysis_cfg.emotion_sum_tolerance)

    analyzer = SentimentAnalyzer(
        local=LocalAnalyzer(),
        remote=remote,
        min_length=analysis_cfg.min_text_length,
    )
    selector = RecommendationSelector(
        client=client,
        personalize=analysis_cfg.personalize_recommendations,
    )
    storage = JournalStorage(config_model.paths.journal_dir)

    return {
        "config_model": config_model,
        "client": client,
        "analyzer": analyzer,
        "selector": selector,
        "storage": storage,
        "service": JournalService(analyzer, selector, storage),
    }


def _root_obj() -> dict:
    ctx = click.get_current_context(silent=True)
    obj = ctx.find_root().obj if ctx else None
    return obj if isinstance(obj, dict) else {}


def local_only_requested() -> bool:
    """True when the root command was invoked with --local-only."""
    return bool(_root_obj().get("local_only"))


LEVEL_STYLE = {
    StressLevel.MILD: "green",
    StressLevel.MODERATE: "yellow",
    StressLevel.SEVERE: "red",
}


def level_label(level) -> str:
    try:
        level = StressLevel(level)
    except ValueError:
        return f"[dim]{level}[/]"
    return f"[{LEVEL_STYLE[level]}]{level.value}[/]"


def emotion_bar(value: float, width: int = 20) -> str:
    filled = round(max(0.0, min(1.0, value)) * width)
    return "█" * filled + "[dim]" + "░" * (width - filled) + "[/]"


def print_analysis(result: SentimentResult) -> None:
    """Score, level, emotion bars and important words."""
    console.print(f"[bold]Level:[/] {level_label(result.level)}  [bold]Score:[/] {result.score:+.2f}")

    table = Table(show_header=True)
    table.add_column("Emotion")
    table.add_column("", no_wrap=True)
    table.add_column("Value", justify="right")
    for name, value in result.emotions.items():
        table.add_row(name, emotion_bar(value), f"{value:.2f}")
    console.print(table)

    if result.important_words:
        console.print(f"[bold]Important words:[/] {', '.join(result.important_words)}")
