"""Horizons vector table -> DASO / eph2tle ephemeris (single pass over the report)."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TextIO

import numpy as np

from jpl2mpc.constants import BUILD_DATE, START_OF_EPHEMERIS
from jpl2mpc.frames import normalize_vector
from jpl2mpc.record import EphemerisHeader, EphemerisWriter, Sample
from jpl2mpc.scanner import (
    FrameState,
    detect_header_line,
    get_coords_from_buff,
    parse_timestamp_line,
    split_jd,
)
from jpl2mpc.time_utils import format_jd

logger = logging.getLogger(__name__)

FRAME_ERROR_MESSAGE = (
    'Input coordinates must be in the Earth mean equator and equinox\n'
    'or in J2000 ecliptic coordinates'
)
TRUNCATED_INPUT_MESSAGE = 'Failed to get data from input file'


class FrameError(ValueError):
    """Report declared neither or both of the equatorial and ecliptic frames."""

    exit_code = -1


class TruncatedInputError(RuntimeError):
    """Report ended where a coordinate line was expected."""

    exit_code = -2


def _read_vector(source: TextIO, state: FrameState, *, is_velocity: bool) -> np.ndarray:
    """Read the next coordinate line and normalize it.

    Raises:
        TruncatedInputError: If the input is exhausted.
    """
    line = source.readline()
    if not line:
        raise TruncatedInputError(TRUNCATED_INPUT_MESSAGE)
    layout, coords = get_coords_from_buff(line)
    logger.debug(
        '%s line (%s): %s',
        'Velocity' if is_velocity else 'Position',
        layout.name.lower(),
        coords,
    )
    return normalize_vector(
        coords,
        is_ecliptic=state.is_ecliptic,
        in_km_s=state.in_km_s,
        is_velocity=is_velocity,
    )


def iter_preamble(source: TextIO) -> Iterator[str]:
    """Yield report lines from the start up to, not including, the $$SOE line."""
    source.seek(0)
    for line in iter(source.readline, ''):
        if line.startswith(START_OF_EPHEMERIS):
            return
        yield line


def scan(source: TextIO, writer: EphemerisWriter, state: FrameState | None = None) -> FrameState:
    """Scan the report, writing one record per timestamp line.

    Header lines update state; each timestamp line is followed by a
    position line and, for state vectors, a velocity line.

    Parameters:
        source: Horizons report, positioned at its start.
        writer: Output writer with its provisional header already written.
        state: Initial frame/unit state (a fresh one if None).

    Returns:
        The final frame/unit state.

    Raises:
        FrameError: At a timestamp line while the frame is unresolved.
        TruncatedInputError: If a coordinate line is missing.
    """
    if state is None:
        state = FrameState()
    for line in iter(source.readline, ''):
        jd = parse_timestamp_line(line)
        if jd is None:
            detect_header_line(line, state)
            continue
        if not state.frame_resolved:
            raise FrameError(FRAME_ERROR_MESSAGE)
        int_day, frac_day = split_jd(line)
        position = _read_vector(source, state, is_velocity=False)
        velocity = None
        if state.state_vectors:
            velocity = _read_vector(source, state, is_velocity=True)
        writer.write_sample(
            Sample(jd=jd, int_day=int_day, frac_day=frac_day, position=position, velocity=velocity),
            state.object_name,
        )
    return state


def convert(source: TextIO, dest: TextIO, build_date: str = BUILD_DATE) -> EphemerisHeader:
    """Convert a Horizons vector table into the DASO / eph2tle format.

    Output is equatorial J2000 in AU and AU/day whatever the report's frame
    and units. After the records come a provenance line and a copy of the
    report preamble; the header line is then patched with the epoch, step
    size, and sample count.

    Parameters:
        source: Seekable Horizons report text stream.
        dest: Seekable output text stream.
        build_date: Date stamped into the provenance line.

    Returns:
        The final header values.

    Raises:
        FrameError: Frame not resolved at the first sample.
        TruncatedInputError: Report ended inside a sample.
    """
    writer = EphemerisWriter(dest)
    writer.write_provisional_header()
    scan(source, writer)
    writer.write_trailer(build_date)
    writer.write_preamble(iter_preamble(source))
    writer.patch_header()

    header = writer.header
    if header.n_samples:
        logger.info(
            'JD0: %f (%s)   Step size: %f   %d steps',
            header.jd0,
            format_jd(header.jd0),
            header.step_size,
            header.n_samples,
        )
    else:
        logger.warning('No ephemeris lines found in input')
    return header
