import logging
import math
import sys

import click
from nmearoute import conf
from nmearoute import errors
from nmearoute import pipeline
from nmearoute import route
from nmearoute import util


def validate_epsilon(ctx, param, value):
    if value is not None and (not math.isfinite(value) or value < 0):
        raise click.BadParameter('must be a finite number >= 0.')
    return value


@click.command()
@click.option('-c', '--config', 'config_path', type=click.Path(dir_okay=False), default=conf.CONFIG_FILE,
    show_default=True, help='INI configuration file with [dedup] and [sentences] sections.')
@click.option('-e', '--epsilon', type=float, callback=validate_epsilon,
    help='Minimum movement in decimal degrees between kept points. Overrides the config file.')
@click.option('-t', '--tsv', 'tsv_path', type=click.Path(dir_okay=False, allow_dash=True),
    help="Also write route points as TSV to this path, '-' for STDOUT.")
@click.option('-u', '--url-only', is_flag=True,
    help='Only print the Google Maps URL.')
@click.option('-v', '--verbose', count=True,
    help='Show more information. Specify more than once to show more information.')
@click.argument('files', nargs=-1, required=True, type=click.Path())
def route_cmd(config_path, epsilon, tsv_path, url_only, verbose, files):
    """
    Builds a deduplicated route from NMEA log files.

    FILES are NMEA 0183 logs, optionally '.gz' or '.zst' compressed, or
    directories of logs. Files are processed in the order given. Valid RMC
    fixes are kept, the last fix for each timestamp wins, and points closer
    than EPSILON degrees to the previous kept point are dropped.

    Prints a processing summary, the route points table and a Google Maps
    directions URL to STDOUT. Files which can't be read are reported on STDERR
    and skipped.
    """
    if verbose == 0:
        loglevel = logging.WARNING
    elif verbose == 1:
        loglevel = logging.INFO
    else:
        loglevel = logging.DEBUG
    logging.basicConfig(format="%(asctime)s:%(levelname)s:%(message)s", level=loglevel)

    try:
        config = conf.get_config(config_path)
        if epsilon is None:
            epsilon = conf.get_epsilon(config)
        unsupported = conf.get_unsupported_ids(config)
    except errors.NmeaRouteError as e:
        raise click.ClickException(str(e))

    paths = util.expand_file_list(list(files))
    points, summary = pipeline.process_files(paths, epsilon=epsilon, unsupported=unsupported)

    if tsv_path:
        df = route.route_dataframe(points)
        if tsv_path == '-':
            route.save_to_file(df, sys.stdout)
        else:
            route.save_to_file(df, tsv_path)

    if url_only:
        if points:
            click.echo(route.google_maps_url(points))
        return

    click.echo(summary.format())
    click.echo()
    if not points:
        click.echo("No valid GPS points found.")
        return
    click.echo("=== Route Points ===")
    click.echo(route.format_table(points))
    click.echo()
    click.echo("=== Google Maps URL ===")
    click.echo(route.google_maps_url(points))
