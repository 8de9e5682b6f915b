"""ReportLab PDF Generation Service Implementation

Renders the print view of an invoice using ReportLab.
"""

from io import BytesIO
from xml.sax.saxutils import escape
from typing import Dict, List

from reportlab.lib import colors
from reportlab.lib.enums import TA_RIGHT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import (
    SimpleDocTemplate,
    Table,
    TableStyle,
    Paragraph,
    Spacer,
    HRFlowable,
)

from src.app.services.pdf_service import PdfService
from src.domain.invoice import Invoice, PaymentStatus
from src.domain.line_item import LineItem

INK = colors.HexColor("#1F2D3D")
MUTED = colors.HexColor("#6B7785")
RULE = colors.HexColor("#D5DBE1")
STRIPE = colors.HexColor("#F4F6F8")

STATUS_COLORS = {
    PaymentStatus.PENDING: colors.HexColor("#D68910"),
    PaymentStatus.PAID: colors.HexColor("#1E8449"),
    PaymentStatus.OVERDUE: colors.HexColor("#C0392B"),
}

COLUMN_WIDTHS = [85 * mm, 20 * mm, 30 * mm, 35 * mm]
LINE_HEADER = ["Description", "Qty", "Unit Price", "Amount"]

DETAILS_TABLE_STYLE = TableStyle(
    [
        ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), 9),
        ("TEXTCOLOR", (0, 0), (0, -1), MUTED),
        ("LEFTPADDING", (0, 0), (-1, -1), 0),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
    ]
)

LINE_TABLE_STYLE = TableStyle(
    [
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), 9),
        ("TEXTCOLOR", (0, 0), (-1, 0), MUTED),
        ("LINEBELOW", (0, 0), (-1, 0), 1, INK),
        ("LINEBELOW", (0, 1), (-1, -1), 0.25, RULE),
        ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, STRIPE]),
        ("TOPPADDING", (0, 0), (-1, -1), 5),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 5),
    ]
)

TOTAL_TABLE_STYLE = TableStyle(
    [
        ("FONTNAME", (2, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (2, 0), (-1, 0), 12),
        ("ALIGN", (2, 0), (-1, 0), "RIGHT"),
        ("LINEABOVE", (2, 0), (-1, 0), 1, INK),
        ("TOPPADDING", (0, 0), (-1, 0), 6),
    ]
)


def format_money(amount) -> str:
    return f"${amount:,.2f}"


def _paragraph_styles(status: PaymentStatus) -> Dict[str, ParagraphStyle]:
    base = getSampleStyleSheet()["Normal"]
    return {
        "company": ParagraphStyle("Company", parent=base, fontName="Helvetica-Bold", fontSize=18, leading=22, textColor=INK),
        "address": ParagraphStyle("Address", parent=base, fontSize=9, textColor=MUTED),
        "title": ParagraphStyle("Title", parent=base, fontName="Helvetica-Bold", fontSize=14, leading=18, textColor=INK),
        "status": ParagraphStyle(
            "Status", parent=base, fontName="Helvetica-Bold", fontSize=11,
            alignment=TA_RIGHT, textColor=STATUS_COLORS[status],
        ),
        "label": ParagraphStyle("Label", parent=base, fontName="Helvetica-Bold", fontSize=9, textColor=MUTED),
        "body": ParagraphStyle("Body", parent=base, fontSize=10),
        "note": ParagraphStyle("Note", parent=base, fontName="Helvetica-Oblique", fontSize=8, textColor=MUTED),
    }


class ReportLabPdfService(PdfService):
    """
    ReportLab implementation of PdfService

    Produces an A4 invoice with issuer header, invoice details, bill-to
    block, line item table, total and VAT note.
    """

    def generate_invoice(
        self,
        invoice: Invoice,
        line_items: List[LineItem],
        company_name: str,
        company_address: str,
        vat_note: str,
    ) -> bytes:
        status = PaymentStatus(invoice.payment_status)
        styles = _paragraph_styles(status)

        elements = []
        elements.extend(self._header(invoice, status, company_name, company_address, styles))
        elements.extend(self._details(invoice, styles))
        elements.append(self._line_table(line_items, styles))
        elements.append(self._total_table(invoice))
        elements.append(Spacer(1, 12 * mm))
        elements.append(Paragraph(escape(vat_note), styles["note"]))

        buffer = BytesIO()
        try:
            doc = SimpleDocTemplate(
                buffer,
                pagesize=A4,
                leftMargin=18 * mm,
                rightMargin=18 * mm,
                topMargin=18 * mm,
                bottomMargin=18 * mm,
                title=f"Invoice #{invoice.id}",
                author=company_name,
            )
            doc.build(elements)
            return buffer.getvalue()
        finally:
            buffer.close()

    def _header(self, invoice, status, company_name, company_address, styles):
        heading = Table(
            [[
                Paragraph(f"Invoice #{invoice.id}", styles["title"]),
                Paragraph(status.value.upper(), styles["status"]),
            ]],
            colWidths=[120 * mm, 50 * mm],
        )
        heading.setStyle(TableStyle([("LEFTPADDING", (0, 0), (0, 0), 0)]))
        return [
            Paragraph(escape(company_name), styles["company"]),
            Paragraph(escape(company_address), styles["address"]),
            Spacer(1, 6 * mm),
            HRFlowable(width="100%", thickness=1, color=INK),
            Spacer(1, 4 * mm),
            heading,
            Spacer(1, 4 * mm),
        ]

    def _details(self, invoice, styles):
        details = Table(
            [
                ["Invoice date", invoice.date.isoformat()],
                ["Due date", invoice.due_date.isoformat()],
                ["Issued", invoice.created_at.strftime("%Y-%m-%d %H:%M UTC")],
            ],
            colWidths=[35 * mm, 60 * mm],
            hAlign="LEFT",
        )
        details.setStyle(DETAILS_TABLE_STYLE)
        return [
            details,
            Spacer(1, 6 * mm),
            Paragraph("BILL TO", styles["label"]),
            Paragraph(escape(invoice.client_name), styles["body"]),
            Spacer(1, 8 * mm),
        ]

    def _line_table(self, line_items, styles):
        rows = [LINE_HEADER]
        rows.extend(
            [
                Paragraph(escape(item.description), styles["body"]),
                str(item.quantity),
                format_money(item.unit_price),
                format_money(item.total),
            ]
            for item in line_items
        )
        if not line_items:
            rows.append(["No line items", "", "", format_money(0)])

        table = Table(rows, colWidths=COLUMN_WIDTHS, repeatRows=1)
        table.setStyle(LINE_TABLE_STYLE)
        return table

    def _total_table(self, invoice):
        table = Table(
            [["", "", "Total", format_money(invoice.total_amount)]],
            colWidths=COLUMN_WIDTHS,
        )
        table.setStyle(TOTAL_TABLE_STYLE)
        return table
