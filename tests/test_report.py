from datetime import datetime

from core.models import Country, Visit
from core.report import render_report
from core.statistics import calculate_statistics

GENERATED = datetime(2024, 5, 1, 9, 30)


def test_report_sections(small_world):
    report = render_report(calculate_statistics(small_world), generated_at=GENERATED)

    assert "TRAVEL REPORT" in report
    assert "Generated 2024-05-01 09:30" in report
    assert "Countries visited: 3 / 4 (75.0%)" in report
    assert "Territories visited: 1" in report
    assert "Total trips:          4" in report
    assert "Average trip length:  1.8 days" in report
    assert "Leisure" in report and "Transit" in report
    assert "Jan 3, 2024" in report
    assert "VISITED (3)" in report
    assert "BUCKET LIST (1)" in report
    assert "  Germany" in report


def test_continent_bars(small_world):
    report = render_report(calculate_statistics(small_world), generated_at=GENERATED)
    europe = next(line for line in report.splitlines() if line.strip().startswith("Europe"))
    assert "[" + "#" * 10 + "." * 10 + "]" in europe
    assert europe.endswith(" 50.0%")


def test_empty_record():
    report = render_report(calculate_statistics(()), generated_at=GENERATED)
    assert "Countries visited: 0 / 0 (0.0%)" in report
    assert "(none yet)" in report
    assert "TIMELINE" not in report
    assert "By visit type" not in report
    assert "Territories visited" not in report


def test_everything_visited():
    countries = (Country("FRA", "France", "Europe", visits=(Visit("2024-01-01"),)),)
    report = render_report(calculate_statistics(countries), generated_at=GENERATED)
    assert "(everywhere!)" in report
    assert "Jan 1, 2024" in report
