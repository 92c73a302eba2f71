"""
Rapports de ventes : filtres, chiffres clés, classements produits/clients.

Les commandes annulées sont toujours exclues. Tout est recalculé en une
passe à chaque changement de filtre.
"""

from datetime import date as Date
from typing import Dict, List, Optional, Sequence

import numpy as np
from pydantic import BaseModel

from BakeryOPS.core.orders import UNKNOWN_PRODUCT_LABEL
from BakeryOPS.domain.order import Order
from BakeryOPS.domain.product import Product
from BakeryOPS.domain.types import OrderStatus
from BakeryOPS.utils import find_by_id


class ProductSales(BaseModel):
    key: str  # id produit, ou "custom_<nom>" pour les lignes hors catalogue
    name: str
    quantity: int = 0
    revenue: float = 0.0


class CustomerSales(BaseModel):
    name: str
    orders: int = 0
    revenue: float = 0.0


class OrderStats(BaseModel):
    total_revenue: float
    total_orders: int
    delivered_orders: int


class SalesReport(OrderStats):
    average_order_value: float
    median_order_value: float
    top_products: List[ProductSales]
    top_customers: List[CustomerSales]


class CustomerInfo(BaseModel):
    name: str
    phone: str = ""
    order_count: int = 0
    last_order_date: str = ""


def _valid(orders: Sequence[Order]) -> List[Order]:
    return [o for o in orders if o.status != OrderStatus.CANCELLED]


def filter_orders(
    orders: Sequence[Order],
    month: Optional[str] = None,
    customer: Optional[str] = None,
    product_id: Optional[str] = None,
) -> List[Order]:
    """Commandes non annulées correspondant aux filtres (None = pas de filtre).

    - month      : préfixe `YYYY-MM` de la date ISO
    - customer   : nom exact (sensible à la casse)
    - product_id : au moins une ligne de ce produit
    """
    selected = []
    for order in _valid(orders):
        if month is not None and order.month != month:
            continue
        if customer is not None and order.customer_name != customer:
            continue
        if product_id is not None and not any(
            item.product_id == product_id for item in order.items
        ):
            continue
        selected.append(order)
    return selected


def _stats(orders: Sequence[Order]) -> OrderStats:
    return OrderStats(
        total_revenue=sum((o.total_amount for o in orders), 0.0),
        total_orders=len(orders),
        delivered_orders=sum(1 for o in orders if o.status == OrderStatus.DELIVERED),
    )


def all_time_stats(orders: Sequence[Order]) -> OrderStats:
    """Chiffres clés sur tout l'historique (hors annulées), sans filtre."""
    return _stats(_valid(orders))


def _product_key(item) -> str:
    return f"custom_{item.custom_name}" if item.is_custom else item.product_id


def _product_name(item, products: Sequence[Product]) -> str:
    if item.is_custom and item.custom_name:
        return f"{item.custom_name} (custom)"
    product = find_by_id(products, item.product_id)
    return product.name if product else UNKNOWN_PRODUCT_LABEL


def build_report(
    orders: Sequence[Order],
    products: Sequence[Product],
    month: Optional[str] = None,
    customer: Optional[str] = None,
    product_id: Optional[str] = None,
) -> SalesReport:
    """Rapport complet sur les commandes filtrées.

    Classements
    -----------
    - produits : regroupés par id (ou `custom_<nom>`), triés par quantité
      décroissante ;
    - clients  : regroupés par nom exact, triés par chiffre d'affaires
      décroissant.
    """
    selected = filter_orders(orders, month, customer, product_id)
    stats = _stats(selected)

    by_product: Dict[str, ProductSales] = {}
    by_customer: Dict[str, CustomerSales] = {}
    for order in selected:
        for item in order.items:
            key = _product_key(item)
            row = by_product.get(key)
            if row is None:
                row = by_product[key] = ProductSales(key=key, name=_product_name(item, products))
            row.quantity += item.quantity
            row.revenue += item.total_price

        cust = by_customer.get(order.customer_name)
        if cust is None:
            cust = by_customer[order.customer_name] = CustomerSales(name=order.customer_name)
        cust.orders += 1
        cust.revenue += order.total_amount

    amounts = [o.total_amount for o in selected]
    return SalesReport(
        **stats.model_dump(),
        average_order_value=(
            stats.total_revenue / stats.total_orders if stats.total_orders > 0 else 0.0
        ),
        median_order_value=float(np.median(amounts)) if amounts else 0.0,
        top_products=sorted(by_product.values(), key=lambda r: r.quantity, reverse=True),
        top_customers=sorted(by_customer.values(), key=lambda r: r.revenue, reverse=True),
    )


def available_months(orders: Sequence[Order], today: Optional[Date] = None) -> List[str]:
    """Mois `YYYY-MM` présents dans les commandes + mois courant, du plus récent au plus ancien."""
    today = today or Date.today()
    months = {o.month for o in orders}
    months.add(f"{today.year}-{today.month:02d}")
    return sorted(months, reverse=True)


def customer_directory(orders: Sequence[Order]) -> List[CustomerInfo]:
    """Annuaire clients tiré des commandes (toutes, annulées comprises).

    Le téléphone retenu est celui de la commande la plus récente qui en porte un.
    """
    directory: Dict[str, CustomerInfo] = {}
    for order in orders:
        info = directory.get(order.customer_name)
        if info is None:
            directory[order.customer_name] = CustomerInfo(
                name=order.customer_name,
                phone=order.customer_phone or "",
                order_count=1,
                last_order_date=order.date,
            )
            continue
        info.order_count += 1
        if order.date > info.last_order_date:
            info.last_order_date = order.date
            if order.customer_phone:
                info.phone = order.customer_phone
    return sorted(directory.values(), key=lambda c: c.order_count, reverse=True)
