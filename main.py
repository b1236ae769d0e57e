"""
main.py
-------
Entry point for the staff data layer.

Responsibilities:
    - Initialize the database connection pool and schema.
    - Log the sales agents and delivery drivers currently stored.
    - Close the pool on exit.
"""

from db.connection import init_pool, close_pool
from db.init_db import create_tables
from repositories.comercial_repo import ComercialRepository
from repositories.repartidor_repo import RepartidorRepository
from utils.logger import get_logger

logger = get_logger(__name__)


def main() -> None:
    """Initialize the database and print the current staff listing."""
    init_pool()
    try:
        create_tables()

        comerciales = ComercialRepository().find_all()
        logger.info(f"{len(comerciales)} comerciales stored")
        for c in comerciales:
            logger.info(str(c))

        repartidores = RepartidorRepository().find_all()
        logger.info(f"{len(repartidores)} repartidores stored")
        for r in repartidores:
            logger.info(str(r))
    finally:
        close_pool()


if __name__ == "__main__":
    main()
