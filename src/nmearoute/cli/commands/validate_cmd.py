import click
from nmearoute import conf
from nmearoute import errors
from nmearoute import fileio
from nmearoute import pipeline
from nmearoute import util


header = ["file", "line", "category", "reason"]


@click.command()
@click.option('-a', '--all', 'report_all', is_flag=True,
    help='Report accepted lines too.')
@click.option('-c', '--config', 'config_path', type=click.Path(dir_okay=False), default=conf.CONFIG_FILE,
    show_default=True, help='INI configuration file with a [sentences] section.')
@click.option('-H', '--no-header', is_flag=True,
    help="Don't print a header line.")
@click.argument('files', nargs=-1, required=True, type=click.Path())
def validate_cmd(report_all, config_path, no_header, files):
    """
    Reports rejected lines in NMEA log files.

    Prints a TSV report to STDOUT with columns file, line (1-based), category
    and reason. Category is one of incomplete, checksum, unsupported, parse or
    ok. Reason is filled for parse failures. Prints a count of lines by
    category for each file to STDERR.
    """
    try:
        unsupported = conf.get_unsupported_ids(conf.get_config(config_path))
    except errors.NmeaRouteError as e:
        raise click.ClickException(str(e))

    if not no_header:
        click.echo("\t".join(header))
    for path in util.expand_file_list(list(files)):
        try:
            numbered = fileio.read_numbered_lines(path)
        except errors.FileError as e:
            click.echo(str(e), err=True)
            continue
        summary = pipeline.Summary()
        for lineno, line in numbered:
            category, result = pipeline.classify_line(line, unsupported)
            summary.count(category)
            if category == pipeline.OK and not report_all:
                continue
            reason = result.reason if category == pipeline.PARSE else ""
            click.echo("\t".join([path, str(lineno), category, reason]))
        click.echo(
            "{}: {} lines, {} ok, {} incomplete, {} checksum, {} unsupported, {} parse".format(
                path, summary.lines_total, summary.records, summary.incomplete,
                summary.checksum_fail, summary.not_relevant, summary.parse_fail
            ),
            err=True
        )
