"""Horizons batch request URLs for vector tables this tool can convert."""

from __future__ import annotations

from urllib.parse import quote, urlencode

from jpl2mpc.config import get_horizons_batch_url

GEOCENTER = '500@399'


def _quoted(value: str) -> str:
    """Wrap a batch parameter value in single quotes."""
    return f"'{value}'"


def request_params(
    command: str,
    start: str,
    stop: str,
    step: str,
    *,
    state_vectors: bool = False,
    center: str = GEOCENTER,
) -> dict[str, str]:
    """Return batch parameters for a geometric vector table.

    The table is J2000 equatorial in AU and days with no light-time
    correction, position only unless state_vectors is set.

    Parameters:
        command: Horizons target (e.g. '-139479' for Gaia).
        start: Start time (e.g. '2020-01-01').
        stop: Stop time.
        step: Step size (e.g. '1 day', or a count of steps like '3660').
        state_vectors: Request velocities as well as positions.
        center: Observing center; geocentric by default.

    Returns:
        Ordered parameter mapping with quoted values.
    """
    return {
        'batch': '1',
        'COMMAND': _quoted(command),
        'OBJ_DATA': _quoted('NO'),
        'MAKE_EPHEM': _quoted('YES'),
        'TABLE_TYPE': _quoted('V'),
        'CENTER': _quoted(center),
        'REF_PLANE': _quoted('FRAME'),
        'REF_SYSTEM': _quoted('J2000'),
        'START_TIME': _quoted(start),
        'STOP_TIME': _quoted(stop),
        'STEP_SIZE': _quoted(step),
        'OUT_UNITS': _quoted('AU-D'),
        'VEC_TABLE': _quoted('2' if state_vectors else '1'),
        'VEC_CORR': _quoted('NONE'),
        'VEC_LABELS': _quoted('N'),
        'CAL_FORMAT': _quoted('CAL'),
    }


def build_request_url(
    command: str,
    start: str,
    stop: str,
    step: str,
    *,
    state_vectors: bool = False,
    center: str = GEOCENTER,
) -> str:
    """Return the Horizons batch URL for a table jpl2mpc can convert."""
    params = request_params(
        command, start, stop, step, state_vectors=state_vectors, center=center
    )
    query = urlencode(params, safe="'@", quote_via=quote)
    return f'{get_horizons_batch_url()}?{query}'
