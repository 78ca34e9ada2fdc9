"""Horizons report scanning: header marker detection and fixed-column data lines."""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass

from jpl2mpc.constants import (
    CALENDAR_OFFSET,
    CALENDAR_TAG,
    COLON_OFFSET,
    DECIMAL_OFFSET,
    ECLIPTIC_MARKERS,
    EQUATORIAL_MARKERS,
    FRACTIONAL_DAY_OFFSET,
    KM_S_MARKER,
    LABEL_CHAR,
    LABEL_POSITIONS,
    LABELED_OFFSETS,
    MAX_VALID_JD,
    MIN_VALID_JD,
    REVISED_ID_OFFSET,
    REVISED_MARKER,
    STATE_VECTOR_MARKER,
    TARGET_BODY_MARKER,
    TARGET_ID_TAG,
    TIME_SCALE_OFFSET,
    TIME_SCALE_TAG,
    TIMESTAMP_MIN_LENGTH,
    UNLABELED_OFFSETS,
    look_up_name,
)

logger = logging.getLogger(__name__)

_LEADING_FLOAT = re.compile(r'\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')
_LEADING_INT = re.compile(r'\s*([+-]?\d+)')

# Header markers reported by detect_header_line
MARK_STATE_VECTORS = 'state_vectors'
MARK_EQUATORIAL = 'equatorial'
MARK_ECLIPTIC = 'ecliptic'
MARK_REVISED_ID = 'revised_id'
MARK_TARGET_ID = 'target_id'
MARK_KM_S = 'km_s'


def leading_float(text: str) -> float:
    """Parse the leading number of text, C atof() style; 0.0 if there is none."""
    m = _LEADING_FLOAT.match(text)
    if m is None:
        return 0.0
    return float(m.group(1))


def leading_int(text: str) -> int:
    """Parse the leading integer of text, C atoi() style; 0 if there is none."""
    m = _LEADING_INT.match(text)
    if m is None:
        return 0
    return int(m.group(1))


@dataclass
class FrameState:
    """Frame, unit, and object metadata gathered from the report header.

    Flags are set by detect_header_line and never cleared. The frame is
    resolved when exactly one of is_equatorial / is_ecliptic is set.
    """

    is_equatorial: bool = False
    is_ecliptic: bool = False
    state_vectors: bool = False
    in_km_s: bool = False
    object_id: int | None = None
    object_name: str = ''

    @property
    def frame_resolved(self) -> bool:
        """True when the report declared exactly one reference frame."""
        return self.is_equatorial != self.is_ecliptic

    def set_object_id(self, object_id: int) -> None:
        """Record the Horizons identifier and resolve its name."""
        self.object_id = object_id
        self.object_name = look_up_name(object_id)
        logger.debug('Object ID %d resolves to %r', object_id, self.object_name)


def detect_header_line(line: str, state: FrameState) -> str | None:
    """Update state from one non-data report line.

    At most one marker fires per line; they are tried in a fixed order.

    Parameters:
        line: One input line (trailing newline allowed).
        state: Frame/unit state to update in place.

    Returns:
        The MARK_* name of the marker found, or None.
    """
    if line.startswith(STATE_VECTOR_MARKER):
        state.state_vectors = True
        logger.debug('Velocity columns present')
        return MARK_STATE_VECTORS
    if any(marker in line for marker in EQUATORIAL_MARKERS):
        if state.is_ecliptic:
            logger.warning('Equatorial frame marker after ecliptic one: %r', line.rstrip())
        state.is_equatorial = True
        logger.debug('Equatorial frame')
        return MARK_EQUATORIAL
    if any(marker in line for marker in ECLIPTIC_MARKERS):
        if state.is_equatorial:
            logger.warning('Ecliptic frame marker after equatorial one: %r', line.rstrip())
        state.is_ecliptic = True
        logger.debug('Ecliptic frame')
        return MARK_ECLIPTIC
    if line.startswith(REVISED_MARKER):
        state.set_object_id(leading_int(line[REVISED_ID_OFFSET:]))
        return MARK_REVISED_ID
    if line.startswith(TARGET_BODY_MARKER):
        loc = line.find(TARGET_ID_TAG)
        if loc >= 0:
            # Skip the parenthesis, keep the minus sign.
            state.set_object_id(leading_int(line[loc + 1 :]))
        return MARK_TARGET_ID
    if line.startswith(KM_S_MARKER):
        state.in_km_s = True
        logger.debug('Units are km and km/s')
        return MARK_KM_S
    return None


def parse_timestamp_line(line: str) -> float | None:
    """Return the JD of a data-row timestamp line, or None if line is not one.

    A timestamp line looks like
    "2458765.500000000 = A.D. 2019-Oct-07 00:00:00.0000 TDB"; the calendar
    text sits at fixed columns, which is what separates data rows from the
    free text around them.

    Parameters:
        line: One input line, newline included (counts toward the length).

    Returns:
        Julian Date (TDB), or None.
    """
    jd = leading_float(line)
    if not MIN_VALID_JD < jd < MAX_VALID_JD:
        return None
    if len(line) <= TIMESTAMP_MIN_LENGTH:
        return None
    if line[CALENDAR_OFFSET : CALENDAR_OFFSET + len(CALENDAR_TAG)] != CALENDAR_TAG:
        return None
    if line[COLON_OFFSET] != ':' or line[DECIMAL_OFFSET] != '.':
        return None
    if line[TIME_SCALE_OFFSET : TIME_SCALE_OFFSET + len(TIME_SCALE_TAG)] != TIME_SCALE_TAG:
        return None
    return jd


def split_jd(line: str) -> tuple[int, float]:
    """Return (integer day, fractional day) read from a timestamp line's text.

    Reading the two parts separately keeps step-size differences exact to
    the printed precision.
    """
    return leading_int(line), leading_float(line[FRACTIONAL_DAY_OFFSET:])


class CoordLayout(enum.Enum):
    """Column layout of a coordinate line."""

    LABELED = LABELED_OFFSETS  # " X = ... Y = ... Z = ..."
    UNLABELED = UNLABELED_OFFSETS

    @property
    def offsets(self) -> tuple[int, int, int]:
        return self.value


def coord_layout(line: str) -> CoordLayout:
    """Pick the layout of one coordinate line from the label column."""
    for pos in LABEL_POSITIONS:
        if len(line) > pos and line[pos] == LABEL_CHAR:
            return CoordLayout.LABELED
    return CoordLayout.UNLABELED


def get_coords_from_buff(line: str) -> tuple[CoordLayout, tuple[float, float, float]]:
    """Read three numbers from a coordinate line at fixed columns.

    Each line chooses its own layout, so labeled and unlabeled lines may be
    mixed in one report. Fields past the end of the line read as 0.0.

    Parameters:
        line: Position or velocity line following a timestamp line.

    Returns:
        (layout, (x, y, z)) in the report's own frame and units.
    """
    layout = coord_layout(line)
    x, y, z = (leading_float(line[offset:]) for offset in layout.offsets)
    return layout, (x, y, z)
