"""JPL Horizons to DASO / eph2tle ephemeris converter.

Reads a Horizons vector table (position or position+velocity, equatorial or
ecliptic J2000, AU-D or KM-S) and writes the fixed-width format used by
MPC's DASO service and by eph2tle, always in equatorial J2000 AU and AU/day.
"""

from jpl2mpc.converter import FrameError, TruncatedInputError, convert

__all__: list[str] = ['FrameError', 'TruncatedInputError', 'convert']
