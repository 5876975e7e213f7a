from __future__ import annotations
import textwrap
from typing import Any, BinaryIO, Dict, Iterator, Union
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas
from reportlab.lib.units import inch


MARGIN = 0.75 * inch
LEADING = 14
WRAP_WIDTH = 100


def report_lines(report: Dict[str, Any]) -> Iterator[str]:
    """Plain-text lines of the report, in page order."""
    yield "Future Ready Assessment - Individual Report"
    yield f"Generated: {report.get('generated_at', '')}"
    yield ""
    yield f"Candidate: {report.get('candidate_name', '')}  |  Assessor: {report.get('assessor_name', '')}"
    yield f"Group: {report.get('group_id', '')}  |  Case Study: {report.get('case_study', '')}"
    yield ""
    yield f"Total Score: {report.get('total_score', '')}/100  |  Band: {report.get('performance_band', '')}"
    yield ""
    yield "Competency Scores:"
    for name, score in report.get("competency_scores_named", []):
        yield f" - {name}: {score}/10"
    yield ""
    yield "Observations:"
    observations = report.get("observations", "")
    if not observations:
        yield " - None recorded"
        return
    for para in observations.splitlines():
        for chunk in textwrap.wrap(para, WRAP_WIDTH) or [""]:
            yield f"   {chunk}"


def export_pdf(path: Union[str, BinaryIO], report: Dict[str, Any]) -> None:
    """Write a one-assessment summary; ``report`` is the dict from ``build_report``."""
    c = canvas.Canvas(path if hasattr(path, "write") else str(path), pagesize=letter)
    _, height = letter
    per_page = int((height - 2 * MARGIN) // LEADING)

    lines = list(report_lines(report))
    for start in range(0, len(lines), per_page):
        if start:
            c.showPage()
        text = c.beginText(MARGIN, height - MARGIN)
        text.setLeading(LEADING)
        for ln in lines[start:start + per_page]:
            text.textLine(ln)
        c.drawText(text)
    c.save()
