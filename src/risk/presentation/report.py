"""
Plain-text rendering of analysis records for the terminal.
"""
from typing import List, Sequence
from ..domain import RiskAnalysis

SEVERITY_MARKERS = {"low": "-", "medium": "!", "high": "!!"}


def format_analysis(analysis: RiskAnalysis) -> str:
    stats = analysis.frame_stats
    lines: List[str] = [
        "=" * 60,
        f"Location:   {analysis.location_name} ({analysis.lat:.4f}, {analysis.lon:.4f})",
        f"Footage:    {analysis.video_name}",
        f"Risk:       {analysis.risk_level.value} ({analysis.risk_score}/100)",
        f"Analyzed:   {analysis.timestamp.strftime('%Y-%m-%d %H:%M:%S')}",
        f"Frames:     {stats.processed_frames} processed of {stats.total_frames}",
        f"Averages:   {stats.avg_vehicles} vehicles, {stats.avg_persons} persons per frame",
        f"Scores:     min {stats.min_score}, max {stats.max_score}",
        "-" * 60,
    ]

    if analysis.violations:
        lines.append("Violations:")
        for v in analysis.violations:
            marker = SEVERITY_MARKERS[v.severity.value]
            lines.append(f"  {marker:<2} {v.type}: {v.count} ({v.severity.value})")
    else:
        lines.append("No violations detected.")

    lines.append("=" * 60)
    return "\n".join(lines)


def format_history(analyses: Sequence[RiskAnalysis]) -> str:
    if not analyses:
        return "No locations analyzed yet"
    header = f"{len(analyses)} location{'s' if len(analyses) != 1 else ''} analyzed"
    rows = [
        f"  {a.timestamp.strftime('%H:%M:%S')}  {a.risk_level.value:<8} {a.risk_score:>3}  {a.location_name}"
        for a in analyses
    ]
    return "\n".join([header, *rows])
