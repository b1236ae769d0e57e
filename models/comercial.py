"""
models/comercial.py
-------------------
Domain model for sales agents.
"""

from dataclasses import dataclass, field
from typing import Optional

from models.cliente import Cliente
from models.pedido import Pedido


@dataclass
class Comercial:
    """
    Represents a sales agent (a row of the `comercial` table).

    Attributes:
        id: Database primary key (None until inserted).
        nombre: Full name.
        zona_venta: Sales zone the agent covers.
        comision: Commission rate, as a percentage.
        clientes_asignados: Customers managed by this agent (not persisted here).
        pedidos: Orders credited to this agent (not persisted here).
    """
    id: Optional[int] = None
    nombre: str = ""
    zona_venta: str = ""
    comision: float = 0.0
    clientes_asignados: list[Cliente] = field(default_factory=list)
    pedidos: list[Pedido] = field(default_factory=list)

    def __str__(self) -> str:
        return (
            f"Comercial{{id={self.id}, nombre='{self.nombre}', "
            f"zona='{self.zona_venta}', comision={self.comision:.2f}%}}"
        )
