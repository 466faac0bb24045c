"""
report.py - Plain-text reports for syllable and rhyme analysis

The exact layout is what the front end displays verbatim, so keep
line prefixes and punctuation stable.
"""

from decimal import Decimal, ROUND_HALF_UP

from config.settings import DEFAULT_PROFILE, AnalyzerProfile
from models import RhymeScheme, SyllableSummary


def format_average(value: float) -> str:
    """One decimal place, halves rounded up (2.25 -> '2.3')"""
    return str(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def preview(text: str, limit: int = DEFAULT_PROFILE.preview_chars) -> str:
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def format_syllable_report(summary: SyllableSummary,
                           profile: AnalyzerProfile = DEFAULT_PROFILE) -> str:
    header = [
        f"Total Lines: {summary.total_lines}",
        f"Total Syllables: {summary.total_syllables}",
        f"Average Syllables per Line: {format_average(summary.average)}",
        f"Range: {summary.minimum} - {summary.maximum} syllables",
        "",
        "Line-by-Line Breakdown:",
    ]

    breakdown = [
        f'Line {r.line}: {r.syllables} syllable{"s" if r.is_plural else ""} - '
        f'"{preview(r.text, profile.preview_chars)}"'
        for r in summary.records
    ]

    return "\n".join(header + breakdown)


def format_rhyme_report(scheme: RhymeScheme) -> str:
    report = f"Rhyme Scheme: {scheme.pattern}\n\n"

    patterns = scheme.patterns
    if patterns:
        report += "Rhyming Patterns Found:\n"
        for group in patterns:
            numbers = ", ".join(str(n) for n in group.lines)
            report += f"  {group.label}: Lines {numbers} ({group.size} lines)\n"
    else:
        report += "No clear rhyming patterns detected.\n"

    report += "\nDetailed Rhyme Mapping:\n"
    for index, (line, label, word) in enumerate(zip(scheme.lines, scheme.labels, scheme.ending_words)):
        report += f'Line {index + 1} ({label}): "{line}" - ending: "{word}"\n'

    return report
