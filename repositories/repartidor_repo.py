"""
repositories/repartidor_repo.py
-------------------------------
Data access layer for delivery drivers.
"""

from models.repartidor import Repartidor
from repositories.base_repo import BaseRepository


class RepartidorRepository(BaseRepository[Repartidor]):
    """Repository for CRUD operations on the repartidor table."""

    table = "repartidor"
    columns = ("id", "nombre", "vehiculo", "email")
    search_columns = ("id", "nombre", "vehiculo", "email")

    @staticmethod
    def _insert_params(repartidor: Repartidor) -> tuple:
        return (repartidor.nombre, repartidor.vehiculo, repartidor.email)

    @staticmethod
    def _row_to_entity(row: tuple) -> Repartidor:
        return Repartidor(
            id=row[0],
            nombre=row[1],
            vehiculo=row[2],
            email=row[3],
        )
