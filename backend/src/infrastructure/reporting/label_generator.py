"""Shipping label PDF generation."""

from datetime import datetime, timezone
from io import BytesIO
from pathlib import Path

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, A5, A6
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from domain.entities import Client, Shipment
from infrastructure.config import get_logger

PAGE_SIZES = {"A4": A4, "A5": A5, "A6": A6}


class ShipmentLabelGenerator:
    """Renders a printable shipping label for a shipment."""
    
    def __init__(self, page_size: str = "A6"):
        self.logger = get_logger(self.__class__.__name__)
        self.page_size = PAGE_SIZES.get(page_size.upper(), A6)
        self._register_fonts()
        self.styles = self._create_styles()

    def _register_fonts(self):
        """Register a font with Cyrillic support when available."""
        font_path = "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf"
        bold_font_path = "/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf"
        
        if Path(font_path).exists() and Path(bold_font_path).exists():
            pdfmetrics.registerFont(TTFont('LabelFont', font_path))
            pdfmetrics.registerFont(TTFont('LabelFont-Bold', bold_font_path))
            self.font_name = 'LabelFont'
            self.bold_font_name = 'LabelFont-Bold'
        else:
            self.logger.warning("LiberationSans not found. Falling back to Helvetica.")
            self.font_name = 'Helvetica'
            self.bold_font_name = 'Helvetica-Bold'

    def _create_styles(self):
        styles = getSampleStyleSheet()
        
        styles.add(ParagraphStyle(
            name='LabelTitle',
            parent=styles['Heading1'],
            fontName=self.bold_font_name,
            fontSize=14,
            textColor=colors.HexColor('#1a237e'),
            spaceAfter=6,
            alignment=1
        ))
        
        styles.add(ParagraphStyle(
            name='TrackingCode',
            parent=styles['Normal'],
            fontName=self.bold_font_name,
            fontSize=16,
            leading=20,
            alignment=1,
            spaceAfter=8
        ))
        
        styles.add(ParagraphStyle(
            name='LabelBody',
            parent=styles['Normal'],
            fontName=self.font_name,
            fontSize=8,
            leading=10
        ))

        return styles

    def generate(self, shipment: Shipment) -> bytes:
        """
        Generate the label PDF.

        Args:
            shipment: Saved shipment with sender, recipient and barcode

        Returns:
            PDF document bytes
        """
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=self.page_size,
            rightMargin=14, leftMargin=14,
            topMargin=14, bottomMargin=14,
            title=f"Shipment {shipment.id}",
        )
        
        story = []
        story.append(Paragraph("Shipping label", self.styles["LabelTitle"]))
        
        tracking_code = shipment.tracking_code
        story.append(Paragraph(str(tracking_code) if tracking_code else "-", self.styles["TrackingCode"]))
        
        self._add_table(story, [
            ["From:", self._describe_client(shipment.sender)],
            ["To:", self._describe_client(shipment.recipient)],
        ])
        
        self._add_table(story, [
            ["Delivery:", str(shipment.delivery_type)],
            ["Parcels:", str(len(shipment.parcels or []))],
            ["Price:", f"{shipment.price:.2f}"],
            ["Post-pay:", f"{shipment.post_pay:.2f}"],
            ["Printed:", datetime.now(timezone.utc).strftime('%d.%m.%Y %H:%M')],
        ])
        
        if shipment.description:
            story.append(Paragraph(shipment.description, self.styles["LabelBody"]))
        
        doc.build(story)
        self.logger.info(f"Label generated for shipment {shipment.id}")
        return buffer.getvalue()

    def _describe_client(self, client: Client) -> Paragraph:
        if client is None:
            return Paragraph("-", self.styles["LabelBody"])
        lines = [client.name]
        if client.address is not None:
            lines.append(str(client.address))
        if client.phone_number:
            lines.append(client.phone_number)
        return Paragraph("<br/>".join(lines), self.styles["LabelBody"])

    def _add_table(self, story, data, col_widths=(50, None)):
        """Helper to add styled key/value table."""
        width = self.page_size[0] - 28
        widths = [col_widths[0], col_widths[1] or width - col_widths[0]]
        t = Table(data, colWidths=widths)
        t.setStyle(TableStyle([
            ('FONTNAME', (0,0), (-1,-1), self.font_name),
            ('FONTNAME', (0,0), (0,-1), self.bold_font_name),
            ('FONTSIZE', (0,0), (-1,-1), 8),
            ('TEXTCOLOR', (0,0), (0,-1), colors.HexColor('#1a237e')),
            ('VALIGN', (0,0), (-1,-1), 'TOP'),
            ('BOTTOMPADDING', (0,0), (-1,-1), 3),
            ('TOPPADDING', (0,0), (-1,-1), 3),
            ('LINEBELOW', (0,0), (-1,-1), 0.5, colors.HexColor('#eeeeee')),
        ]))
        story.append(t)
        story.append(Spacer(1, 6))
