"""
Preview layout ➜ paginated PDF

– same content and order as the on-screen preview
– page size from config (A4 / Letter), page number in every footer
– an entry is kept on one page whenever it fits
"""

from __future__ import annotations
import io
import logging
from typing import List
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4, LETTER
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.platypus import (
    HRFlowable,
    KeepTogether,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
)

from config import EXPORT_FILENAME, PDF_PAGE_SIZE
from preview import Preview

log = logging.getLogger(__name__)

PAGE_SIZES = {"A4": A4, "LETTER": LETTER}


class ExportError(RuntimeError):
    """The PDF could not be produced."""


def _page_size(name: str):
    size = PAGE_SIZES.get((name or "").upper())
    if size is None:
        log.warning("Unknown page size %r, using A4", name)
        return A4
    return size


def _text(value: str) -> str:
    """Plain text → reportlab paragraph markup."""
    return escape(value).replace("\n", "<br/>")


def _styles() -> dict:
    base = getSampleStyleSheet()
    body = ParagraphStyle("body", parent=base["Normal"], fontSize=10, leading=13)
    return {
        "name": ParagraphStyle("name", parent=base["Heading1"], alignment=TA_CENTER,
                               fontSize=22, leading=26, spaceAfter=4),
        "contact": ParagraphStyle("contact", parent=body, alignment=TA_CENTER,
                                  textColor=colors.grey, spaceAfter=8),
        "section": ParagraphStyle("section", parent=base["Heading2"], fontSize=14,
                                  spaceBefore=10, spaceAfter=2),
        "title": ParagraphStyle("title", parent=body, fontName="Helvetica-Bold",
                                fontSize=12, leading=15),
        "sub": ParagraphStyle("sub", parent=body, fontSize=11, leading=14),
        "dates": ParagraphStyle("dates", parent=body, textColor=colors.grey, fontSize=9),
        "body": body,
    }


def _section(title: str, st: dict) -> list:
    return [
        Paragraph(title, st["section"]),
        HRFlowable(width="100%", thickness=1, color=colors.lightgrey, spaceAfter=6),
    ]


def _story(preview: Preview) -> List:
    st = _styles()
    story: List = [
        Paragraph(_text(preview.name), st["name"]),
        Paragraph(_text(preview.contact_line), st["contact"]),
    ]

    story += _section("Professional Summary", st)
    story.append(Paragraph(_text(preview.summary), st["body"]))

    story += _section("Work Experience", st)
    for e in preview.experience:
        story.append(KeepTogether([
            Paragraph(_text(e.title), st["title"]),
            Paragraph(_text(e.company), st["sub"]),
            Paragraph(_text(e.dates), st["dates"]),
            Paragraph(_text(e.description), st["body"]),
            Spacer(1, 8),
        ]))

    story += _section("Education", st)
    for e in preview.education:
        story.append(KeepTogether([
            Paragraph(_text(e.heading), st["title"]),
            Paragraph(_text(e.school), st["sub"]),
            Paragraph(_text(e.graduation_year), st["dates"]),
            Spacer(1, 6),
        ]))

    story += _section("Skills", st)
    story.append(Paragraph(_text(preview.skills), st["body"]))
    return story


def _footer(canvas, doc) -> None:
    canvas.saveState()
    canvas.setFont("Helvetica", 8)
    canvas.setFillColor(colors.grey)
    canvas.drawCentredString(doc.pagesize[0] / 2, 0.8 * cm, f"Page {doc.page}")
    canvas.restoreState()


def export_pdf(preview: Preview, page_size: str | None = None) -> bytes:
    """Render `preview` to PDF bytes; raises ExportError on failure."""
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=_page_size(page_size or PDF_PAGE_SIZE),
        leftMargin=1.8 * cm,
        rightMargin=1.8 * cm,
        topMargin=1.5 * cm,
        bottomMargin=1.5 * cm,
        title=f"{preview.name} – Résumé",
    )
    try:
        doc.build(_story(preview), onFirstPage=_footer, onLaterPages=_footer)
    except Exception as e:
        raise ExportError(f"Could not build {EXPORT_FILENAME}: {e}") from e
    pdf_bytes = buffer.getvalue()
    buffer.close()
    log.info("Exported %s: %d page(s), %.1f KB", EXPORT_FILENAME, doc.page, len(pdf_bytes) / 1024)
    return pdf_bytes
