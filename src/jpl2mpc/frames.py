"""Frame and unit normalization: ecliptic J2000 to equatorial J2000, km to AU."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from jpl2mpc.constants import AU_IN_KM, COS_OBLIQ_2000, SECONDS_PER_DAY, SIN_OBLIQ_2000

# Rotation about the x-axis by the J2000 obliquity (ecliptic -> equatorial).
ECLIPTIC_TO_EQUATORIAL = np.array(
    [
        [1.0, 0.0, 0.0],
        [0.0, COS_OBLIQ_2000, -SIN_OBLIQ_2000],
        [0.0, SIN_OBLIQ_2000, COS_OBLIQ_2000],
    ],
    dtype=np.float64,
)
EQUATORIAL_TO_ECLIPTIC = ECLIPTIC_TO_EQUATORIAL.T


def as_vector(coords: Sequence[float] | np.ndarray) -> np.ndarray:
    """Return coords as a float64 3-vector.

    Raises:
        ValueError: If coords does not hold exactly three components.
    """
    vec = np.asarray(coords, dtype=np.float64)
    if vec.shape != (3,):
        raise ValueError(f'expected a 3-vector, got shape {vec.shape}')
    return vec


def ecliptic_to_equatorial(coords: Sequence[float] | np.ndarray) -> np.ndarray:
    """Rotate an ecliptic J2000 vector into equatorial J2000.

    y' = y cos(e) - z sin(e), z' = y sin(e) + z cos(e). Unit independent.
    """
    return ECLIPTIC_TO_EQUATORIAL @ as_vector(coords)


def equatorial_to_ecliptic(coords: Sequence[float] | np.ndarray) -> np.ndarray:
    """Inverse of ecliptic_to_equatorial."""
    return EQUATORIAL_TO_ECLIPTIC @ as_vector(coords)


def km_to_au(coords: Sequence[float] | np.ndarray) -> np.ndarray:
    """Scale a position from km to AU."""
    return as_vector(coords) / AU_IN_KM


def km_s_to_au_day(coords: Sequence[float] | np.ndarray) -> np.ndarray:
    """Scale a velocity from km/s to AU/day."""
    return as_vector(coords) * (SECONDS_PER_DAY / AU_IN_KM)


def normalize_vector(
    coords: Sequence[float] | np.ndarray,
    *,
    is_ecliptic: bool,
    in_km_s: bool,
    is_velocity: bool = False,
) -> np.ndarray:
    """Bring a raw Horizons vector into equatorial J2000, AU or AU/day.

    Rotation is applied to the raw values first, then unit scaling.

    Parameters:
        coords: Raw (x, y, z) as read from the report.
        is_ecliptic: Report is in ecliptic J2000 coordinates.
        in_km_s: Report is in km and km/s.
        is_velocity: coords is a velocity (scaled km/s -> AU/day) rather than
            a position (km -> AU).

    Returns:
        Normalized float64 3-vector.
    """
    vec = as_vector(coords)
    if is_ecliptic:
        vec = ecliptic_to_equatorial(vec)
    if in_km_s:
        vec = km_s_to_au_day(vec) if is_velocity else km_to_au(vec)
    return vec
