import click

from .commands.convert import convert_command
from .commands.format import format_command
from .commands.parse import parse_command


@click.group()
def app() -> None:
    pass


app.add_command(format_command, name="format")
app.add_command(parse_command, name="parse")
app.add_command(convert_command, name="convert")
__all__ = ["app"]
