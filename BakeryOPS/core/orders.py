"""
Commandes clients : lignes à prix figé, total, changement de statut.
"""

from typing import Iterable, List, Optional, Sequence

from BakeryOPS.domain.order import CUSTOM_PRODUCT_ID, Order, OrderItem
from BakeryOPS.domain.product import Product
from BakeryOPS.domain.types import OrderStatus, now_ms
from BakeryOPS.utils import find_by_id

UNKNOWN_PRODUCT_LABEL = "unknown"


def order_total(
    items: Iterable[OrderItem],
    packaging_cost: float = 0.0,
    delivery_cost: float = 0.0,
    discount: float = 0.0,
) -> float:
    """Total d'une commande.

    Formule
    -------
    total = Σ item.total_price + packaging_cost + delivery_cost - discount

    Pas de plancher à 0 : une remise supérieure au total donne un montant
    négatif.
    """
    return sum((item.total_price for item in items), 0.0) + packaging_cost + delivery_cost - discount


# --------- Lignes ---------


def catalog_item(product: Product, quantity: int) -> OrderItem:
    """Ligne catalogue : le prix de vente courant est figé dans la ligne."""
    return OrderItem(
        product_id=product.id,
        quantity=quantity,
        price_per_unit=product.selling_price,
        total_price=product.selling_price * quantity,
    )


def custom_item(name: str, price: float, quantity: int) -> OrderItem:
    """Ligne hors catalogue (nom et prix saisis à la main)."""
    return OrderItem(
        product_id=CUSTOM_PRODUCT_ID,
        custom_name=name,
        quantity=quantity,
        price_per_unit=price,
        total_price=price * quantity,
    )


def item_label(item: OrderItem, products: Sequence[Product]) -> str:
    if item.is_custom:
        return item.custom_name
    product = find_by_id(products, item.product_id)
    return product.name if product else UNKNOWN_PRODUCT_LABEL


# --------- Commandes ---------


def new_order(
    date: str,
    customer_name: str,
    items: List[OrderItem],
    packaging_cost: float = 0.0,
    delivery_cost: float = 0.0,
    discount: float = 0.0,
    status: OrderStatus = OrderStatus.PENDING,
    customer_phone: Optional[str] = None,
    notes: Optional[str] = None,
) -> Order:
    return Order(
        date=date,
        customer_name=customer_name,
        customer_phone=customer_phone,
        items=items,
        packaging_cost=packaging_cost,
        delivery_cost=delivery_cost,
        discount=discount,
        total_amount=order_total(items, packaging_cost, delivery_cost, discount),
        status=status,
        notes=notes,
    )


def revise_order(order: Order, **changes) -> Order:
    """Copie modifiée d'une commande, total recalculé.

    Les lignes existantes gardent leur prix figé : seules les lignes
    ajoutées par l'appelant portent le prix courant du catalogue.
    """
    revised = Order.model_validate({**order.model_dump(), **changes})
    return revised.model_copy(
        update={
            "total_amount": order_total(
                revised.items,
                revised.packaging_cost,
                revised.delivery_cost,
                revised.discount,
            ),
            "updated_at": now_ms(),
        }
    )


def set_status(order: Order, status: OrderStatus) -> Order:
    """Change le statut ; toute transition est permise."""
    return order.model_copy(update={"status": OrderStatus(status), "updated_at": now_ms()})
