"""
models/pedido.py
----------------
Domain model for an order. An order is sold by one Comercial and
delivered by one Repartidor.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class Pedido:
    """
    Represents a customer order.

    Attributes:
        id: Database primary key (None for new records).
        fecha: Order date.
        total: Order amount.
        cliente_id: Customer who placed the order.
        comercial_id: Sales agent credited with the order.
        repartidor_id: Driver in charge of the delivery.
    """
    id: Optional[int] = None
    fecha: Optional[date] = None
    total: float = 0.0
    cliente_id: Optional[int] = None
    comercial_id: Optional[int] = None
    repartidor_id: Optional[int] = None
