"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Repositories receive raw rows from the database and return domain model objects.
The CRUD logic itself lives once in `BaseRepository`.
"""

from repositories.comercial_repo import ComercialRepository
from repositories.repartidor_repo import RepartidorRepository

__all__ = ["ComercialRepository", "RepartidorRepository"]
