# utils/report.py
from typing import Dict, List, Optional

from core.analysis_types import AnalysisResult

BAR_CHAR = "*"

def format_bar_chart(result: AnalysisResult, k: Optional[int] = None) -> List[str]:
    """
    One line per ranked value; the top value gets a bar of length k, the next k - 1, and so on.
    """
    k = k or max(len(result.top_frequent), 1)
    width = max((len(str(e.value)) for e in result.top_frequent), default=1)
    width = max(width, 2)
    return [
        f"{str(entry.value).ljust(width)} {BAR_CHAR * (k - rank)}"
        for rank, entry in enumerate(result.top_frequent)
    ]

def format_report(result: AnalysisResult, timings: Optional[Dict[str, float]] = None, k: Optional[int] = None) -> str:
    """Human-readable summary of an analysis run."""
    lines = [f"{len(result.top_frequent)} most frequently appeared numbers in bar chart form:"]
    lines.extend(format_bar_chart(result, k))
    lines += ["", "The count of Prime numbers:", str(result.prime_count)]
    lines += ["", "The count of Armstrong numbers:", str(result.narcissistic_count)]
    for label, elapsed_ms in (timings or {}).items():
        lines += ["", f"Time taken to {label}:", f"{elapsed_ms:.0f} milliseconds"]
    return "\n".join(lines)
