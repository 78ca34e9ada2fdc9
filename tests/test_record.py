"""Tests for DASO / eph2tle record formatting and header patching."""

from __future__ import annotations

import io

import numpy as np

from jpl2mpc.record import EphemerisHeader, EphemerisWriter, Sample, format_sample


def _sample(jd: float, pos=(1.0, 2.0, 3.0), vel=None) -> Sample:  # type: ignore[no-untyped-def]
    int_day = int(jd)
    return Sample(
        jd=jd,
        int_day=int_day,
        frac_day=jd - int_day,
        position=np.array(pos),
        velocity=None if vel is None else np.array(vel),
    )


def test_header_format_widths() -> None:
    """Header prefix is '%13.5f %14.10f %4d'."""
    assert EphemerisHeader().format() == '      0.00000   0.0000000000    0'
    header = EphemerisHeader(jd0=2458765.5, step_size=0.5, n_samples=731)
    assert header.format() == '2458765.50000   0.5000000000  731'


def test_header_description() -> None:
    """Geocentric annotation only when a name is known."""
    assert EphemerisHeader().description() == ''
    assert EphemerisHeader(object_name='WISE').description() == ' (500) Geocentric: WISE'


def test_format_position_sample() -> None:
    """Position-only record: JD then three 16-column fields."""
    line = format_sample(_sample(2458765.5, (-0.5, 0.25, 1e-3)))
    assert line == '2458765.50000   -0.5000000000    0.2500000000    0.0010000000\n'


def test_format_state_vector_sample() -> None:
    """State vector record continues with three 12-decimal velocity fields."""
    line = format_sample(_sample(2458765.5, vel=(1e-3, -2e-4, 0.0)))
    assert line == (
        '2458765.50000    1.0000000000    2.0000000000    3.0000000000'
        '   0.001000000000 -0.000200000000  0.000000000000\n'
    )


def test_writer_patches_header_in_place() -> None:
    """Provisional zeros are replaced; the rest of the file is untouched."""
    out = io.StringIO()
    writer = EphemerisWriter(out)
    writer.write_provisional_header()
    assert out.getvalue() == '      0.00000   0.0000000000    0 0,1,1'
    writer.write_sample(_sample(2458765.5), 'Cassini')
    writer.write_sample(_sample(2458766.0))
    writer.write_sample(_sample(2458770.0))
    writer.write_trailer('Jan 01 2026')
    writer.write_preamble(['line one\n', 'line two\n'])
    writer.patch_header()
    lines = out.getvalue().split('\n')
    assert lines[0] == '2458765.50000   0.5000000000    3 0,1,1 (500) Geocentric: Cassini'
    assert lines[1].startswith('2458765.50000')
    assert lines[3].startswith('2458770.00000')
    assert lines[4:8] == ['', '', "Created from Horizons data by 'jpl2mpc', ver Jan 01 2026", 'line one']
    assert writer.n_written == 3
    assert writer.header.step_size == 0.5


def test_writer_step_uses_first_two_samples_only() -> None:
    """Irregular later spacing does not change the step."""
    writer = EphemerisWriter(io.StringIO())
    writer.write_provisional_header()
    for jd in (2458765.5, 2458765.75, 2458767.0, 2458767.125):
        writer.write_sample(_sample(jd))
    assert writer.header.step_size == 0.25


def test_writer_negative_step() -> None:
    """Descending tables give a negative step."""
    writer = EphemerisWriter(io.StringIO())
    writer.write_provisional_header()
    writer.write_sample(_sample(2458766.5))
    writer.write_sample(_sample(2458765.5))
    writer.patch_header()
    assert writer.header.step_size == -1.0
