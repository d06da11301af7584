# =============================================================================
# core/report.py  -  Plain-Text Travel Report
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Renders a TravelStatistics snapshot as a plain-text report: headline
#   progress, a continent table, trip metrics, visit types, the timeline,
#   and the visited / bucket lists.
#
#   The report only reads the statistics object.  It never recomputes
#   anything from countries, so what it prints always matches what the
#   statistics tool returns.
# =============================================================================

from datetime import datetime
from typing import Optional

from core.models import TravelStatistics, parse_iso_date

_RULE = "=" * 60
_THIN_RULE = "-" * 60


def _format_day(iso_day: str) -> str:
    """Render "2024-03-05" as "Mar 5, 2024"."""
    day = parse_iso_date(iso_day)
    return f"{day.strftime('%b')} {day.day}, {day.year}"


def _bar(percentage: float, width: int = 20) -> str:
    filled = round(width * min(max(percentage, 0.0), 100.0) / 100)
    return "#" * filled + "." * (width - filled)


def render_report(stats: TravelStatistics, generated_at: Optional[datetime] = None) -> str:
    """Render the statistics as a multi-line plain-text report."""
    generated_at = generated_at or datetime.now()
    lines = [
        _RULE,
        "  TRAVEL REPORT",
        f"  Generated {generated_at.strftime('%Y-%m-%d %H:%M')}",
        _RULE,
        "",
        f"Countries visited: {stats.visited_count} / {stats.total_countries} "
        f"({stats.visited_percentage:.1f}%)",
    ]
    if stats.territories_visited:
        lines.append(f"Territories visited: {stats.territories_visited}")

    # --- Continents ---
    lines += ["", "BY CONTINENT", _THIN_RULE]
    for cs in stats.continent_stats:
        lines.append(
            f"  {cs.continent:<15} {cs.visited:>3} / {cs.total:<3} "
            f"[{_bar(cs.percentage)}] {cs.percentage:5.1f}%"
        )

    # --- Trips ---
    lines += [
        "", "TRIPS", _THIN_RULE,
        f"  Total trips:          {stats.total_trips}",
        f"  Total days traveled:  {stats.total_days_traveled}",
        f"  Average trip length:  {stats.average_trip_length:.1f} days",
    ]
    if stats.total_trips:
        lines.append("  By visit type:")
        for visit_type, count in stats.visit_type_breakdown.items():
            lines.append(f"    {visit_type.capitalize():<10} {count}")

    # --- Timeline ---
    if stats.timeline:
        lines += ["", "TIMELINE (most recent visit)", _THIN_RULE]
        for entry in stats.timeline:
            lines.append(f"  {_format_day(entry.date):<14} {', '.join(entry.country_names)}")

    # --- Lists ---
    lines += ["", f"VISITED ({len(stats.visited_countries)})", _THIN_RULE]
    lines += [f"  {name}" for name in stats.visited_countries] or ["  (none yet)"]
    lines += ["", f"BUCKET LIST ({len(stats.bucket_list)})", _THIN_RULE]
    lines += [f"  {name}" for name in stats.bucket_list] or ["  (everywhere!)"]

    lines.append("")
    return "\n".join(lines)
