# bakeryops/ui/results_view.py
from typing import Sequence

from BakeryOPS.core.reports import CustomerInfo, SalesReport
from BakeryOPS.rules.pricing import BatchQuote, BundlePricing
from BakeryOPS.ui.console_style import signed, styled


# ---------- Helpers de formatage ----------


def format_to_shekel(x: float) -> str:
    try:
        return f"₪{float(x):,.2f}"
    except (TypeError, ValueError):
        return f"₪{x}"


def _pct(x: float) -> str:
    return f"{x:.0f}%"


# ---------- Calculateur ----------


def render_quote(recipe_name: str, q: BatchQuote) -> str:
    lines = [
        styled(f"🧮 {recipe_name} × {q.quantity}", "bold"),
        f"  Matières      : {format_to_shekel(q.ingredients_cost)}",
    ]
    if q.packaging_cost:
        lines.append(f"  + Emballage   : {format_to_shekel(q.packaging_cost)}")
    if q.delivery_cost:
        lines.append(f"  + Livraison   : {format_to_shekel(q.delivery_cost)}")
    lines += [
        f"  Coût total    : {format_to_shekel(q.total_cost)}"
        f"  ({format_to_shekel(q.cost_per_unit)} / unité)",
        f"  Prix calculé  : ₪{q.calculated_price:.0f}",
        f"  Prix rond     : {styled(f'₪{q.rounded_price:.0f}', 'cyan')}",
        "  Bénéfice      : "
        + signed(
            f"{format_to_shekel(q.profit)} ({_pct(q.actual_profit_percent)} du coût)",
            q.profit,
        ),
        f"  Prix / unité  : {format_to_shekel(q.price_per_unit)}",
    ]
    if q.shows_break_even:
        lines.append(f"  Point mort    : {q.break_even_units} unités")
    return "\n".join(lines)


def render_bundle(name: str, b: BundlePricing) -> str:
    stale = styled(" (coût à recalculer)", "yellow") if b.is_stale else ""
    return (
        f"📦 {name}: coût {format_to_shekel(b.live_ingredients_cost)}{stale}"
        f" | conseillé ₪{b.suggested_price:.0f}"
        f" | vendu ₪{b.effective_price:.0f}"
        f" ({_pct(b.realized_profit_percent)})"
    )


# ---------- Rapports ----------


def render_report(report: SalesReport, limit: int = 5) -> str:
    lines = [
        styled("📊 Rapport des ventes", "bold"),
        "═" * 40,
        f"  CA total          : {format_to_shekel(report.total_revenue)}",
        f"  Commandes         : {report.total_orders}"
        f" (livrées : {report.delivered_orders})",
        f"  Panier moyen      : {format_to_shekel(report.average_order_value)}",
        f"  Panier médian     : {format_to_shekel(report.median_order_value)}",
        "",
        styled("  Produits (quantité)", "bold"),
    ]
    for row in report.top_products[:limit]:
        lines.append(f"    {row.name:<24} {row.quantity:>4}  {format_to_shekel(row.revenue)}")
    lines.append(styled("  Clients (CA)", "bold"))
    for row in report.top_customers[:limit]:
        lines.append(f"    {row.name:<24} {row.orders:>4}  {format_to_shekel(row.revenue)}")
    lines.append("═" * 40)
    return "\n".join(lines)


def render_customers(customers: Sequence[CustomerInfo]) -> str:
    return "\n".join(
        f"👤 {c.name} : {c.order_count} commande(s), dernière le {c.last_order_date}"
        + (f", ☎ {c.phone}" if c.phone else "")
        for c in customers
    )
