"""Tests for the spacecraft name table."""

from __future__ import annotations

from jpl2mpc.constants import SPACECRAFT_NAMES, look_up_name


def test_look_up_known_names() -> None:
    """Known Horizons IDs resolve to their names."""
    assert look_up_name(-139479) == 'Gaia = 2013-074A = NORAD 39479'
    assert look_up_name(-95) == 'TESS = 2018-038A = NORAD 43435'
    assert look_up_name(-151) == 'Chandra = 1999-040B = NORAD 25867'
    assert look_up_name(-48) == 'Hubble Space Telescope'


def test_look_up_unknown_is_empty() -> None:
    """Unknown IDs, positive or negative, give ''."""
    assert look_up_name(12345) == ''
    assert look_up_name(-1) == ''
    assert look_up_name(0) == ''


def test_table_holds_spacecraft_only() -> None:
    """Every entry uses a negative (spacecraft) ID and a non-empty name."""
    assert len(SPACECRAFT_NAMES) == 15
    assert all(object_id < 0 and name for object_id, name in SPACECRAFT_NAMES.items())
