"""
Main CLI application using Typer.

Entry point: python -m doentry2dayone
CLI Name: doentry2dayone
"""
import typer

from doentry2dayone import __version__ as app_version
from doentry2dayone.cli.commands import convert, verify

app = typer.Typer(
    name="doentry2dayone",
    help="Convert Day One Classic (.doentry) bundles into Day One JSON imports",
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Run without a command to convert using the configured defaults."""
    if ctx.invoked_subcommand is None:
        convert.run_convert()


@app.command()
def version():
    """Show CLI version information."""
    typer.echo(f"doentry2dayone version {app_version}")

# Register command groups


app.add_typer(convert.app, name="convert")
app.command(name="verify")(verify.run_verify)
