import click
from nmearoute import nmea


@click.command()
@click.option('-f', '--fix', is_flag=True,
    help='Print each sentence with a corrected checksum instead.')
@click.argument('sentences', nargs=-1, required=True)
def checksum_cmd(fix, sentences):
    """
    Checks NMEA sentence checksums.

    For each SENTENCE prints the sentence, the computed checksum as two hex
    digits and the verification outcome (ok, incomplete or mismatch),
    tab-separated. Sentences without a '*HH' tail are checksummed over
    everything after the leading '$'. With --fix prints the sentence with its
    checksum replaced by the computed value.
    """
    for s in sentences:
        star = s.rfind(nmea.CHECKSUM_SEP)
        body = s[:star] if star != -1 else s
        if fix:
            click.echo(nmea.add_checksum(body))
            continue
        computed = nmea.checksum(body[1:] if body.startswith(nmea.SENTENCE_START) else body)
        click.echo("{}\t{:02X}\t{}".format(s, computed, nmea.verify(s).value))
