"""Statement PDF writer (reportlab).

Lays out pre-formatted ``StatementPdfSection`` rows; page breaks and
table splitting are left to reportlab's flowables.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFError, TTFont
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from osr.application.dto import StatementPdfSection
from osr.application.export_rows import format_money, period_text
from osr.domain.model.statement import StatementResult

logger = logging.getLogger(__name__)

BASE_FONT = "Helvetica"
HEADER_FILL = colors.Color(2 / 255, 132 / 255, 199 / 255)


def register_font(font_path: Path | None) -> str:
    """Register a TrueType font for non-Latin text, or fall back to Helvetica."""
    if font_path is None:
        return BASE_FONT
    name = font_path.stem
    try:
        pdfmetrics.registerFont(TTFont(name, str(font_path)))
    except (OSError, TTFError):
        logger.warning("Could not load font %s, falling back to %s", font_path, BASE_FONT)
        return BASE_FONT
    return name


def write_statement_pdf(
    result: StatementResult,
    sections: Sequence[StatementPdfSection],
    path: Path,
    title: str,
    font_path: Path | None = None,
) -> Path:
    font = register_font(font_path)
    styles = getSampleStyleSheet()
    title_style = ParagraphStyle("StatementTitle", parent=styles["Title"], fontName=font)
    heading_style = ParagraphStyle("StatementHeading", parent=styles["Heading3"], fontName=font)
    body_style = ParagraphStyle("StatementBody", parent=styles["Normal"], fontName=font)

    story = [
        Paragraph(escape(title), title_style),
        Paragraph(period_text(result), body_style),
        Spacer(1, 12),
        Paragraph("Overall Summary", heading_style),
        Paragraph(f"Total Order Value: {format_money(result.grand_total_amount)}", body_style),
        Paragraph(f"Total Paid: {format_money(result.grand_total_paid)}", body_style),
        Paragraph(f"Pending Amount: {format_money(result.grand_total_pending)}", body_style),
        Spacer(1, 12),
    ]

    for section in sections:
        story.append(Paragraph(escape(section.heading), heading_style))
        story.append(Paragraph(section.summary, body_style))
        story.append(Spacer(1, 4))
        table = Table([list(section.header), *[list(r) for r in section.rows]], repeatRows=1)
        table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (0, 0), (-1, -1), font),
                    ("FONTSIZE", (0, 0), (-1, -1), 9),
                    ("BACKGROUND", (0, 0), (-1, 0), HEADER_FILL),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                    ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                ]
            )
        )
        story.append(table)
        story.append(Spacer(1, 15))

    path.parent.mkdir(parents=True, exist_ok=True)
    doc = SimpleDocTemplate(str(path), pagesize=A4, title=title)
    doc.build(story)
    logger.debug("Wrote statement PDF %s (%d customers)", path, len(sections))
    return path
