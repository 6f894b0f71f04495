import io
from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from mealcart.domain.ShoppingList import ShoppingList


def _qty(value) -> str:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return str(value)
    return str(int(number)) if number.is_integer() else f"{number:g}"


def generate_pdf_for_shopping_list(shopping_list: ShoppingList) -> bytes:
    """Generate a printable checklist: one table section per category, with a grand total row."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(shopping_list.name, styles["Title"]),
        Spacer(1, 16),
    ]

    data = [["", "Item", "Quantity", "Package", "Est. cost"]]
    section_rows = []
    for category, items in shopping_list.items_by_category().items():
        section_rows.append(len(data))
        data.append([category, "", "", "", ""])
        for item in items:
            data.append([
                "[x]" if item.is_purchased else "[ ]",
                item.ingredient_name,
                f"{_qty(item.quantity)} {item.unit}",
                item.notes or "-",
                f"${item.estimated_cost:.2f}",
            ])
    data.append(["", "Total", "", "", f"${shopping_list.total_estimated_cost:.2f}"])

    style = [
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 12),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("ALIGN", (4,1), (4,-1), "RIGHT"),
        ("FONTNAME", (0,-1), (-1,-1), "Helvetica-Bold"),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]
    for row in section_rows:
        style.append(("SPAN", (0,row), (-1,row)))
        style.append(("BACKGROUND", (0,row), (-1,row), colors.HexColor("#E8F5E9")))
        style.append(("FONTNAME", (0,row), (-1,row), "Helvetica-Bold"))

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle(style))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
