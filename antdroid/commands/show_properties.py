import click
import json
import os
from ..decorators import handle_exceptions
from ..properties import PROPERTIES_FILE, read_project_properties

@click.command("properties")
@click.pass_context
@handle_exceptions
def show_properties(ctx):
    """Show library references, gradle includes and system libraries from project.properties."""
    properties = read_project_properties(os.path.join(ctx.obj["path"], PROPERTIES_FILE))
    click.echo(json.dumps(properties.to_dict(), indent=4))
