"""
models/ - Domain Models
=======================
Plain dataclasses mirroring database rows. They carry no persistence logic.
"""

from models.cliente import Cliente
from models.comercial import Comercial
from models.pedido import Pedido
from models.repartidor import Repartidor

__all__ = ["Cliente", "Comercial", "Pedido", "Repartidor"]
