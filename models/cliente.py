"""
models/cliente.py
-----------------
Domain model for a customer assigned to a sales agent.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Cliente:
    """A customer; only referenced from `Comercial.clientes_asignados`."""
    id: Optional[int] = None
    nombre: str = ""
    email: Optional[str] = None
    comercial_id: Optional[int] = None

    def __str__(self) -> str:
        return f"Cliente{{id={self.id}, nombre='{self.nombre}'}}"
