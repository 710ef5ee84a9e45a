# Third-party imports
import typer

# Project-local imports
from simplevendor.utils.util import get_meta_info
from simplevendor.commands.vendor import vendor

# CLI setup
cli = typer.Typer(
    name=get_meta_info("project.name", "simplevendor"),
    rich_markup_mode="rich",
    help=(
        "Copies the [bold]external dependencies[/bold] of the Go packages in the current directory "
        "into [italic]./vendor[/italic].\n\n"
        "Local packages and the standard library are never vendored."
    ),
    add_completion=False,
)

cli.command()(vendor)

if __name__ == "__main__":
    cli()
