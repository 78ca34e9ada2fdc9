"""DASO / eph2tle output records: provisional header, samples, trailer, header patch."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TextIO

import numpy as np

from jpl2mpc.constants import (
    BUILD_DATE,
    DESCRIPTION_FMT,
    HEADER_FLAGS,
    HEADER_FMT,
    POSITION_FMT,
    TRAILER_FMT,
    VELOCITY_FMT,
)

logger = logging.getLogger(__name__)


@dataclass
class Sample:
    """One time-tagged vector, already in equatorial J2000 AU (and AU/day)."""

    jd: float
    int_day: int
    frac_day: float
    position: np.ndarray
    velocity: np.ndarray | None = None


@dataclass
class EphemerisHeader:
    """Epoch, step, and count for the first output line."""

    jd0: float = 0.0
    int_jd0: int = 0
    frac_jd0: float = 0.0
    step_size: float = 0.0
    n_samples: int = 0
    object_name: str = ''

    def format(self) -> str:
        """Return the numeric header prefix (fixed width, no flags)."""
        return HEADER_FMT % (self.jd0, self.step_size, self.n_samples)

    def description(self) -> str:
        """Return the annotation appended after the flags ('' if no name)."""
        if self.object_name:
            return DESCRIPTION_FMT % self.object_name
        return ''


def format_sample(sample: Sample) -> str:
    """Return one output record line (newline included).

    Position only: JD then x, y, z. State vector: the same line continues
    with vx, vy, vz.
    """
    x, y, z = (float(v) for v in sample.position)
    line = POSITION_FMT % (sample.jd, x, y, z)
    if sample.velocity is not None:
        vx, vy, vz = (float(v) for v in sample.velocity)
        line += VELOCITY_FMT % (vx, vy, vz)
    return line + '\n'


class EphemerisWriter:
    """Stream samples to a seekable text output, then patch the header in place.

    The header is first written with zeros; patch_header() rewinds and
    overwrites only the numeric prefix once the step and count are known.
    """

    def __init__(self, stream: TextIO) -> None:
        """Wrap stream, which must support seek(0) for patch_header()."""
        self._stream = stream
        self.header = EphemerisHeader()
        self._provisional = ''

    @property
    def n_written(self) -> int:
        return self.header.n_samples

    def write_provisional_header(self) -> None:
        """Write the zeroed header prefix and the convention flags (no newline)."""
        self._provisional = self.header.format()
        self._stream.write(self._provisional + HEADER_FLAGS)

    def write_sample(self, sample: Sample, object_name: str = '') -> None:
        """Append one sample; the first one also ends the header line.

        The second sample fixes the step size from the integer and fractional
        day differences; later samples do not change it.
        """
        if self.header.n_samples == 0:
            self.header.jd0 = sample.jd
            self.header.int_jd0 = sample.int_day
            self.header.frac_jd0 = sample.frac_day
            self.header.object_name = object_name
            self._stream.write(self.header.description() + '\n')
        elif self.header.n_samples == 1:
            self.header.step_size = (sample.frac_day - self.header.frac_jd0) + float(
                sample.int_day - self.header.int_jd0
            )
        self._stream.write(format_sample(sample))
        self.header.n_samples += 1

    def write_trailer(self, build_date: str = BUILD_DATE) -> None:
        """Append the provenance comment."""
        self._stream.write(TRAILER_FMT % build_date)

    def write_preamble(self, lines: Iterable[str]) -> None:
        """Append the original report lines verbatim."""
        for line in lines:
            self._stream.write(line)

    def patch_header(self) -> None:
        """Rewind and overwrite the numeric header prefix with final values."""
        text = self.header.format()
        if len(text) != len(self._provisional):
            logger.warning(
                'Header %r is wider than its %d-column slot; flags will be overwritten',
                text,
                len(self._provisional),
            )
        self._stream.seek(0)
        self._stream.write(text)
        self._stream.seek(0, 2)
