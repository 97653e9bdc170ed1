import io
from datetime import date
from typing import List

from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from mealcart.domain.ShoppingListItem import ShoppingListItem
from mealcart.logic.budget.summary import estimated_total
from mealcart.logic.shopping.list_builder import group_by_category
from mealcart.logic.shopping.units import format_quantity
from mealcart.utilities.dates import week_label
from mealcart.utilities.format import format_currency


def generate_pdf_for_shopping_list(week_start: date, items: List[ShoppingListItem]) -> bytes:
    """Printable shopping list: one table per store section plus the estimated total."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(f"Shopping List – {week_label(week_start)}", styles["Title"]),
        Spacer(1, 16),
    ]

    grouped = group_by_category(items)
    if not grouped:
        elements.append(Paragraph("Nothing to buy this week.", styles["Normal"]))

    for category, category_items in grouped.items():
        elements.append(Paragraph(category.capitalize(), styles["Heading2"]))
        data = [["", "Item", "Quantity", "Est. price"]]
        for item in category_items:
            data.append([
                "[x]" if item.checked else "[ ]",
                item.item,
                f"{format_quantity(item.quantity)} {item.unit}".strip(),
                format_currency(item.estimated_price) if item.estimated_price is not None else "",
            ])
        table = Table(data, repeatRows=1, colWidths=[30, 250, 120, 90])
        table.setStyle(TableStyle([
            ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
            ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
            ("ALIGN", (2,0), (-1,-1), "RIGHT"),
            ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
            ("BOTTOMPADDING", (0,0), (-1,0), 8),
            ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
        ]))
        elements.append(table)
        elements.append(Spacer(1, 12))

    elements.append(Paragraph(f"Estimated total: {format_currency(estimated_total(items))}", styles["Heading3"]))
    doc.build(elements)
    return buf.getvalue()
