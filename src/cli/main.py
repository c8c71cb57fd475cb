"""mindlog command-line entry point."""

import sys
from pathlib import Path

import click

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.commands import analyze, delete, entries, insights, recommend, write
from cli.logging_config import setup_logging
from cli.utils import load_config_or_exit


@click.group()
@click.version_option(version="0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("--local-only", is_flag=True, help="Never call a remote LLM")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, local_only: bool):
    """mindlog - journal with emotion analysis and stress insights."""
    config_model = load_config_or_exit()
    log_cfg = config_model.logging
    setup_logging(
        json_mode=log_cfg.json_mode,
        level="DEBUG" if verbose else log_cfg.level,
        log_file=config_model.paths.log_file,
    )
    ctx.ensure_object(dict)
    ctx.obj["local_only"] = local_only
    ctx.obj["config_model"] = config_model


cli.add_command(analyze)
cli.add_command(write)
cli.add_command(entries)
cli.add_command(delete)
cli.add_command(insights)
cli.add_command(recommend)


if __name__ == "__main__":
    cli()
