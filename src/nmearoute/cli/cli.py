import click
from nmearoute.cli.commands.checksum_cmd import checksum_cmd
from nmearoute.cli.commands.route_cmd import route_cmd
from nmearoute.cli.commands.validate_cmd import validate_cmd
from nmearoute.cli.commands.version_cmd import version_cmd

CONTEXT_SETTINGS = dict(help_option_names=['-h', '--help'])

@click.group(context_settings=CONTEXT_SETTINGS)
def cli():
    pass

cli.add_command(checksum_cmd, 'checksum')
cli.add_command(route_cmd, 'route')
cli.add_command(validate_cmd, 'validate')
cli.add_command(version_cmd, 'version')
