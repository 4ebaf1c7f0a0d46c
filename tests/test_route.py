import io

import pandas as pd
import pandas.testing as pdt
import pytest
import nmearoute as nmr
from nmearoute import record
from nmearoute.record import Record

# pylint: disable=redefined-outer-name


@pytest.fixture()
def points():
    return [
        Record("100000.000", 48 + 7.038 / 60, 11 + 31.0 / 60, 11.523546),
        Record("100002.000", -33.5, -70.25, 0.0),
    ]


def test_url_empty():
    assert nmr.route.google_maps_url([]) == ""


def test_url_single(points):
    url = nmr.route.google_maps_url(points[:1])
    assert url == "https://www.google.com/maps/dir/48.117300,11.516667"


def test_url_many(points):
    url = nmr.route.google_maps_url(points)
    assert url == "https://www.google.com/maps/dir/48.117300,11.516667/-33.500000,-70.250000"


def test_to_fix(points):
    fix = nmr.route.to_fix(points[0])
    assert fix.set == record.TIME_SET | record.MODE_SET | record.LATLON_SET | record.SPEED_SET
    assert fix.mode == record.MODE_2D
    assert fix.status == 1
    assert fix.time == "100000.000"
    assert fix.has_latlon() and fix.has_speed()
    assert fix.get_latlon() == (points[0].latitude, points[0].longitude)
    assert fix.get_speed_mps() == points[0].speed


def test_fix_flags():
    assert (record.TIME_SET, record.MODE_SET, record.LATLON_SET, record.SPEED_SET) == (1, 2, 16, 256)
    fix = record.Fix(set=record.LATLON_SET, mode=record.MODE_NO_FIX, latitude=1.0, longitude=2.0)
    assert not fix.has_latlon()
    with pytest.raises(ValueError):
        fix.get_latlon()
    fix.mode = record.MODE_3D
    assert fix.get_latlon() == (1.0, 2.0)
    assert not fix.has_speed()
    with pytest.raises(ValueError):
        fix.get_speed_mps()


def test_unit_helpers():
    assert record.mps_to_kmh(10.0) == pytest.approx(36.0)
    assert record.mps_to_knots(0.514444) == pytest.approx(1.0, rel=1e-5)


def test_format_table(points):
    lines = nmr.route.format_table(points).split("\n")
    assert lines[0] == "#     Latitude      Longitude     Speed (m/s)"
    assert lines[1] == "-" * 44
    assert lines[2] == "1     48.117300     11.516667     11.523546"
    assert lines[3] == "2     -33.500000    -70.250000    0.000000"
    assert len(lines) == 4


def test_route_dataframe(points):
    df = nmr.route.route_dataframe(points)
    expected = pd.DataFrame({
        "timestamp": ["100000.000", "100002.000"],
        "lat": [points[0].latitude, -33.5],
        "lon": [points[0].longitude, -70.25],
        "speed": [11.523546, 0.0],
    })
    pdt.assert_frame_equal(df, expected)


def test_route_dataframe_empty():
    df = nmr.route.route_dataframe([])
    assert list(df.columns) == ["timestamp", "lat", "lon", "speed"]
    assert len(df) == 0


def test_save_to_file(points):
    out = io.StringIO()
    nmr.route.save_to_file(nmr.route.route_dataframe(points), out)
    assert out.getvalue().splitlines() == [
        "timestamp\tlat\tlon\tspeed",
        "100000.000\t48.117300\t11.516667\t11.523546",
        "100002.000\t-33.500000\t-70.250000\t0.000000",
    ]
