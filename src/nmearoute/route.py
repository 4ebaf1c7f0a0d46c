"""Route presentation: fix containers, point table, TSV and map URL"""
import pandas as pd
from . import util
from .record import Fix, LATLON_SET, MODE_2D, MODE_SET, SPEED_SET, TIME_SET


GOOGLE_MAPS_BASE = "https://www.google.com/maps/dir"
COORD_PRECISION = 6
FIX_STATUS_VALID = 1

route_delim = "\t"
output_columns = ["timestamp", "lat", "lon", "speed"]


def to_fix(record):
    """Fill a Fix from a Record. Parsed records are always complete 2D fixes."""
    return Fix(
        set=TIME_SET | MODE_SET | LATLON_SET | SPEED_SET,
        mode=MODE_2D,
        status=FIX_STATUS_VALID,
        time=record.timestamp,
        latitude=record.latitude,
        longitude=record.longitude,
        speed=record.speed
    )


def google_maps_url(route):
    """Google Maps directions URL through every point of route.

    e.g. https://www.google.com/maps/dir/48.117300,11.516667/48.117400,11.516700

    Returns an empty string for an empty route.
    """
    if not route:
        return ""
    parts = [GOOGLE_MAPS_BASE]
    for r in route:
        parts.append("{lat:.{p}f},{lon:.{p}f}".format(lat=r.latitude, lon=r.longitude, p=COORD_PRECISION))
    return "/".join(parts)


def format_table(route):
    """Fixed width table of route points, one numbered row per point."""
    lines = [
        "{:<6}{:<14}{:<14}{}".format("#", "Latitude", "Longitude", "Speed (m/s)"),
        "-" * 44
    ]
    for i, r in enumerate(route, start=1):
        fix = to_fix(r)
        lat, lon = fix.get_latlon()
        speed = fix.get_speed_mps()
        lines.append(
            "{:<6}{:<14.6f}{:<14.6f}{:.6f}".format(i, lat, lon, speed)
        )
    return "\n".join(lines)


def route_dataframe(route):
    """Route as a DataFrame with columns timestamp, lat, lon, speed."""
    return pd.DataFrame(
        [[r.timestamp, r.latitude, r.longitude, r.speed] for r in route],
        columns=output_columns
    )


@util.suppress_sigpipe
def save_to_file(df, outpath):
    """Write route DataFrame to a TSV file.

    Arguments:
    df -- route DataFrame from route_dataframe().
    outpath -- Output file path or file object.
    """
    df[output_columns].to_csv(
        outpath, sep=route_delim, na_rep="NA", encoding="utf-8", index=False,
        float_format="%.{}f".format(COORD_PRECISION)
    )
