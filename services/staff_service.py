"""
services/staff_service.py
-------------------------
Operations that span both staff tables: registering sales agents and
drivers together in one transaction, and searching both at once.
"""

from typing import Iterable

from db.connection import transaction
from models.comercial import Comercial
from models.repartidor import Repartidor
from repositories.comercial_repo import ComercialRepository
from repositories.repartidor_repo import RepartidorRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class StaffService:
    """Coordinates the comercial and repartidor repositories."""

    def __init__(self):
        self.comercial_repo = ComercialRepository()
        self.repartidor_repo = RepartidorRepository()

    def register_team(
        self,
        comerciales: Iterable[Comercial] = (),
        repartidores: Iterable[Repartidor] = (),
    ) -> dict:
        """
        Insert every given agent and driver atomically.

        If any insert fails, nothing is persisted and the database error is
        re-raised. Ids are written back into the passed objects.

        Returns:
            Dict with keys 'comerciales' and 'repartidores' holding the
            inserted objects.
        """
        comerciales = list(comerciales)
        repartidores = list(repartidores)
        with transaction() as conn:
            for c in comerciales:
                self.comercial_repo.insert(c, conn)
            for r in repartidores:
                self.repartidor_repo.insert(r, conn)
        logger.info(
            f"Registered {len(comerciales)} comerciales and "
            f"{len(repartidores)} repartidores"
        )
        return {"comerciales": comerciales, "repartidores": repartidores}

    def search_all(self, filtro: str) -> dict:
        """Run the same search filter against both tables."""
        return {
            "comerciales": self.comercial_repo.search(filtro),
            "repartidores": self.repartidor_repo.search(filtro),
        }
