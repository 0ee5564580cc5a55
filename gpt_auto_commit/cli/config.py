"""CLI command for configuration management."""

from typing import Optional

import typer

from gpt_auto_commit import global_config
from gpt_auto_commit.config import AVAILABLE_MODELS
from gpt_auto_commit.cli.utils import ensure_config_or_exit
from gpt_auto_commit.global_config import GlobalConfigError
from gpt_auto_commit.terminal import echo_error, echo_success


def config_command(
    key: Optional[str] = typer.Option(
        None,
        "--key",
        "-k",
        help="Set OpenAI API key",
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help=f"Set OpenAI model (e.g., {', '.join(AVAILABLE_MODELS[:3])}, etc)",
    ),
) -> None:
    """Configure the CLI tool.

    With no options, prints the current configuration.
    """
    ensure_config_or_exit()

    try:
        if key:
            global_config.set_api_key(key)
            echo_success("API key saved successfully!")

        if model:
            global_config.set_model(model)
            echo_success(f"Model set to: {model}")

        if not key and not model:
            config = global_config.get_config()
            typer.echo("Current configuration:")
            typer.echo(f"API Key: {global_config.mask_api_key(config.api_key)}")
            typer.echo(f"Model: {config.model}")

    except GlobalConfigError as e:
        echo_error(f"Error: {e}")
        raise typer.Exit(1)
