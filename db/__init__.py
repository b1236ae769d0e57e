"""
db/ - Database Layer
====================
PostgreSQL connection pool, transaction helper and schema DDL for the
comercial and repartidor tables. Depends only on config and utils.
"""
