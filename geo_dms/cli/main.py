"""Main Typer CLI application for angle tools."""

import logging
from pathlib import Path

import typer

from geo_dms.display_config import DmsDisplayConfig, get_default_config

app = typer.Typer(
    help="Parse, format and classify geographic angles (degrees, minutes, seconds)",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    config: Path | None = typer.Option(
        None, "--config", "-c", help="YAML file with a 'dms' display section"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """
    Load display settings shared by all commands.

    Negative angles must follow `--` so they are not read as options:

        dms format --axis lon -- -0.33
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    display_config: DmsDisplayConfig
    if config is None:
        display_config = get_default_config()
    else:
        try:
            display_config = DmsDisplayConfig.from_yaml(config)
        except (FileNotFoundError, ValueError) as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)

    ctx.obj = display_config


def _register_commands() -> None:
    """
    Import command modules to register commands with the app.

    Commands use the @app.command() decorator, which registers them when the
    module is imported.
    """
    from geo_dms.cli import angles

    # Avoid "imported but unused" warnings by explicitly using the module
    _ = angles


_register_commands()


if __name__ == "__main__":
    app()
