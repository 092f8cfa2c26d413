from __future__ import annotations

import inspect

from lib_log_leveled.domain.location import CallSite, get_loc


def _primitive(stacklevel: int = 1) -> CallSite:
    return CallSite.capture(stacklevel)


def _wrapper() -> CallSite:
    return _primitive(stacklevel=2)


def test_capture_reports_the_line_calling_the_primitive() -> None:
    expected_line = inspect.currentframe().f_lineno + 1
    site = _primitive()
    assert site.path == __file__
    assert site.line == expected_line


def test_stacklevel_skips_wrapper_frames() -> None:
    expected_line = inspect.currentframe().f_lineno + 1
    site = _wrapper()
    assert site.line == expected_line


def test_call_site_renders_path_colon_line() -> None:
    assert str(CallSite("pkg/mod.py", 12)) == "pkg/mod.py:12"


def test_get_loc_counts_frames_from_itself() -> None:
    line = inspect.currentframe().f_lineno + 1
    location = get_loc(1)
    assert location == f"{__file__}:{line}"


def test_get_loc_beyond_stack_depth_is_unknown() -> None:
    assert get_loc(100_000) == "?:0"


def test_capture_beyond_stack_depth_is_unknown() -> None:
    assert CallSite.capture(100_000) == CallSite("?", 0)
