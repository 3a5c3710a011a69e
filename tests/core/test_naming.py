from datetime import datetime, timedelta

from docwright.core.utils.naming import formatted_date, formatted_datetime, timestamped_name

NOW = datetime(2026, 10, 19, 14, 23, 1)


def test_full_stamp_appended():
    assert timestamped_name("report", "md", now=NOW) == "report_20261019_142301.md"


def test_embedded_date_gets_time_only():
    assert timestamped_name("proj_20261019", "md", now=NOW) == "proj_20261019_142301.md"


def test_nine_digit_run_is_not_a_date():
    assert timestamped_name("build123456789", "txt", now=NOW) == "build123456789_20261019_142301.txt"


def test_leading_dot_extension_tolerated():
    assert timestamped_name("notes", ".md", now=NOW) == "notes_20261019_142301.md"


def test_same_second_may_collide_next_second_differs():
    first = timestamped_name("report", "md", now=NOW)
    assert timestamped_name("report", "md", now=NOW) == first
    assert timestamped_name("report", "md", now=NOW + timedelta(seconds=1)) != first


def test_formatters():
    assert formatted_datetime(NOW) == "20261019_142301"
    assert formatted_date(NOW) == "20261019"
