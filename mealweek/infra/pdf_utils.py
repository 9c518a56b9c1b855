import io
from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from mealweek.domain.MealPlan import MealPlan


def _styled_table(data, col_widths=None):
    table = Table(data, repeatRows=1, colWidths=col_widths)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#4CAF50")),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
        ("ALIGN", (0, 0), (-1, -1), "LEFT"),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, 0), 12),
        ("BOTTOMPADDING", (0, 0), (-1, 0), 10),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
    ]))
    return table


def generate_pdf_for_plan(plan: MealPlan) -> bytes:
    """Two tables: Day / Recipe / Main, then the shopping list with acquired marks."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=A4, rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20)

    styles = getSampleStyleSheet()
    elements = [
        Paragraph("Weekly Meal Plan", styles["Title"]),
        Spacer(1, 16),
    ]

    days = [["Day", "Recipe", "Main"]]
    for i, recipe in enumerate(plan.recipes, start=1):
        days.append([f"Day {i}", recipe.title, recipe.main])
    elements.append(_styled_table(days))

    elements += [Spacer(1, 24), Paragraph("Shopping List", styles["Heading2"]), Spacer(1, 8)]
    items = [["", "Item", "Count", "Unit"]]
    for item in plan.shopping_list:
        items.append(["[x]" if item.acquired else "[ ]", item.name, str(int(item.quantity)), item.unit])
    elements.append(_styled_table(items, col_widths=[30, 260, 60, 80]))

    doc.build(elements)
    return buf.getvalue()
