"""Fixed constants: units, J2000 obliquity, Horizons report columns, spacecraft names.

From jpl2mpc.cpp and the Horizons vector-table layout.
"""

# Units
AU_IN_KM = 1.495978707e8
SECONDS_PER_DAY = 86400.0

# Mean obliquity of the ecliptic at J2000
SIN_OBLIQ_2000 = 0.397777155931913701597179975942380896684
COS_OBLIQ_2000 = 0.917482062069181825744000384639406458043

# Julian Date of 2000-01-01 00:00 (day 0 for rms-julian day numbers)
JD_OF_J2000_MIDNIGHT = 2451544.5

# A timestamp line's leading JD must lie strictly between these
MIN_VALID_JD = 2000000.0
MAX_VALID_JD = 3000000.0

# Timestamp line fingerprint, e.g.
# "2458765.500000000 = A.D. 2019-Oct-07 00:00:00.0000 TDB"
TIMESTAMP_MIN_LENGTH = 54  # line must be longer than this, newline included
CALENDAR_OFFSET = 17
CALENDAR_TAG = ' = A.D.'
COLON_OFFSET = 42
DECIMAL_OFFSET = 45
TIME_SCALE_OFFSET = 50
TIME_SCALE_TAG = ' TDB'
FRACTIONAL_DAY_OFFSET = 7  # JD integer part is always seven digits in range

# Header markers
STATE_VECTOR_MARKER = '   VX    VY    VZ'
EQUATORIAL_MARKERS = ('Earth Mean Equator and Equinox', 'Reference frame : ICRF')
ECLIPTIC_MARKERS = (
    'Ecliptic and Mean Equinox of Reference Epoch',
    'Reference frame : Ecliptic of J2000',
)
REVISED_MARKER = ' Revised:'
REVISED_ID_OFFSET = 71
TARGET_BODY_MARKER = 'Target body name:'
TARGET_ID_TAG = '(-'
KM_S_MARKER = 'Output units    : KM-S'
START_OF_EPHEMERIS = '$$SOE'

# Coordinate line column offsets (x, y, z)
LABELED_OFFSETS = (4, 30, 56)
UNLABELED_OFFSETS = (1, 24, 47)
LABEL_CHAR = 'X'
LABEL_POSITIONS = (1, 2)

# Output format (DASO / eph2tle)
HEADER_FMT = '%13.5f %14.10f %4d'
HEADER_FLAGS = ' 0,1,1'  # equatorial J2000, AU, days
DESCRIPTION_FMT = ' (500) Geocentric: %s'
POSITION_FMT = '%13.5f%16.10f%16.10f%16.10f'
VELOCITY_FMT = ' %16.12f%16.12f%16.12f'
TRAILER_FMT = "\n\nCreated from Horizons data by 'jpl2mpc', ver %s\n"

# Release date stamped into the output trailer
BUILD_DATE = 'Oct 18 2026'

# Horizons identifier -> name. Negative IDs are spacecraft. Names carrying
# international and NORAD designations are picked up by eph2tle.
SPACECRAFT_NAMES: dict[int, str] = {
    -21: 'SOHO',
    -48: 'Hubble Space Telescope',
    -82: 'Cassini',
    -234: 'STEREO-A',
    -235: 'STEREO-B',
    -144: 'Solar Orbiter',
    -95: 'TESS = 2018-038A = NORAD 43435',
    -79: 'Spitzer Space Telescope',
    -96: 'Parker Space Probe',
    -98: 'New Horizons',
    -151: 'Chandra = 1999-040B = NORAD 25867',
    -163: 'WISE',
    -139479: 'Gaia = 2013-074A = NORAD 39479',
    -9901491: 'Tianwen-1 = 2020-049A = NORAD 45935',
    -37: 'Hayabusa 2 = 2014-076A = NORAD 40319',
}


def look_up_name(object_id: int) -> str:
    """Return the human-readable name for a Horizons identifier.

    Parameters:
        object_id: Horizons integer ID (e.g. -139479 for Gaia).

    Returns:
        Name string, or '' if the identifier is not in the table.
    """
    return SPACECRAFT_NAMES.get(object_id, '')
