"""
models/repartidor.py
--------------------
Domain model for delivery drivers.
"""

from dataclasses import dataclass, field
from typing import Optional

from models.pedido import Pedido


@dataclass
class Repartidor:
    """
    Represents a delivery driver (a row of the `repartidor` table).

    Attributes:
        id: Database primary key (None until inserted).
        nombre: Full name.
        vehiculo: Vehicle used for deliveries.
        email: Contact address.
        pedidos: Orders delivered by this driver (not persisted here).
    """
    id: Optional[int] = None
    nombre: str = ""
    vehiculo: str = ""
    email: str = ""
    pedidos: list[Pedido] = field(default_factory=list)

    def __str__(self) -> str:
        return (
            f"Repartidor{{id={self.id}, nombre='{self.nombre}', "
            f"vehiculo='{self.vehiculo}', email='{self.email}'}}"
        )
