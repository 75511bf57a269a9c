"""Tests for the sys_info helper and the package surface."""

import io

import curveribbon
from curveribbon import sys_info


def test_sys_info_reports_platform_and_dependencies():
    out = io.StringIO()
    sys_info(fid=out)
    text = out.getvalue()
    assert "Platform:" in text
    assert "Dependencies info" in text
    assert "curveribbon:" in text
    assert "numpy:" in text
    assert "pyrr:" in text


def test_sys_info_developer_lists_test_extra():
    out = io.StringIO()
    sys_info(fid=out, developer=True)
    assert "pytest:" in out.getvalue()


def test_public_api():
    for name in curveribbon.__all__:
        assert hasattr(curveribbon, name)
    assert isinstance(curveribbon.__version__, str)
