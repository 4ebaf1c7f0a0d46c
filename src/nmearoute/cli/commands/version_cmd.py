import click
import nmearoute as nmr


@click.command()
def version_cmd():
    """Displays version."""
    click.echo(nmr.__version__)
