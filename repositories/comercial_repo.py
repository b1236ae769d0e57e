"""
repositories/comercial_repo.py
------------------------------
Data access layer for sales agents.
All SQL related to the `comercial` table is generated from the metadata below.
"""

from models.comercial import Comercial
from repositories.base_repo import BaseRepository


class ComercialRepository(BaseRepository[Comercial]):
    """Repository for CRUD operations on the comercial table."""

    table = "comercial"
    columns = ("id", "nombre", "zonaVenta", "comision")
    search_columns = ("id", "nombre", "zonaVenta")

    @staticmethod
    def _insert_params(comercial: Comercial) -> tuple:
        return (comercial.nombre, comercial.zona_venta, comercial.comision)

    @staticmethod
    def _row_to_entity(row: tuple) -> Comercial:
        """Convert a database row tuple to a Comercial domain object."""
        return Comercial(
            id=row[0],
            nombre=row[1],
            zona_venta=row[2],
            comision=float(row[3]) if row[3] is not None else 0.0,
        )
