from typing import List, Optional

from pydantic import Field, model_validator

from BakeryOPS.domain.types import DocumentModel, OrderStatus, new_id, now_ms

# product_id des lignes hors catalogue
CUSTOM_PRODUCT_ID = "custom"


class OrderItem(DocumentModel):
    """Ligne de commande au prix figé au moment de la commande."""

    product_id: str
    custom_name: Optional[str] = None
    quantity: int = Field(gt=0)
    price_per_unit: float
    total_price: float

    @model_validator(mode="after")
    def _check_custom_name(self):
        if self.is_custom and not self.custom_name:
            raise ValueError("custom order item requires a custom_name")
        if not self.is_custom and self.custom_name:
            raise ValueError(
                f"custom_name is only allowed on '{CUSTOM_PRODUCT_ID}' items"
            )
        return self

    @property
    def is_custom(self) -> bool:
        return self.product_id == CUSTOM_PRODUCT_ID


class Order(DocumentModel):
    id: str = Field(default_factory=new_id)
    date: str  # YYYY-MM-DD
    customer_name: str
    customer_phone: Optional[str] = None
    items: List[OrderItem] = Field(default_factory=list)
    packaging_cost: float = 0.0
    delivery_cost: float = 0.0
    discount: float = 0.0
    total_amount: float = 0.0
    status: OrderStatus = OrderStatus.PENDING
    notes: Optional[str] = None
    created_at: int = Field(default_factory=now_ms)
    updated_at: int = Field(default_factory=now_ms)

    @property
    def month(self) -> str:
        """Préfixe `YYYY-MM` de la date ISO."""
        return self.date[:7]
