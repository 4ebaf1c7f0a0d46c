import pytest
import nmearoute as nmr

# pylint: disable=redefined-outer-name


def make_rmc(time="123519", lat="4807.038", ns="N", lon="01131.000", ew="E",
             speed="022.4", status="A", sid="$GPRMC"):
    """Build an RMC sentence with a valid checksum."""
    body = ",".join([sid, time, status, lat, ns, lon, ew, speed, "084.4", "230394", "003.1", "W"])
    return nmr.nmea.add_checksum(body)


def corrupt_checksum(line):
    """Replace the checksum of a valid sentence with a different value."""
    value = (int(line[-2:], 16) + 1) % 256
    return "{}{:02X}".format(line[:-2], value)


@pytest.fixture()
def rmc():
    return make_rmc


@pytest.fixture()
def nmea_lines():
    """A short log: 3 distinct fixes, a receiver correction, and some junk."""
    return [
        make_rmc(time="100000.000", lat="4807.000", lon="01131.000"),
        nmr.nmea.add_checksum("$GPGGA,100000.000,4807.000,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,"),
        make_rmc(time="100000.000", lat="4807.010", lon="01131.000"),  # correction
        make_rmc(time="100001.000", lat="4807.010", lon="01131.000", speed=""),  # no movement
        make_rmc(time="100002.000", lat="4807.100", lon="01131.100", sid="$GNRMC"),
        make_rmc(time="100003.000", status="V"),
        corrupt_checksum(make_rmc(time="100004.000", lat="4807.200", lon="01131.200")),
        "GPRMC,100005.000,A,4807.200,N",  # incomplete
    ]


@pytest.fixture()
def config_path(tmp_path):
    """Path to a config file which doesn't exist yet, so defaults apply."""
    return str(tmp_path / "config")
