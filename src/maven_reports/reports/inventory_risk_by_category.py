"""Inventory financial risk by film category and store.

film_category is many-to-many, so a film filed under two categories has
each of its inventory copies counted once in each category. Films with no
category land in a NULL category group.

Ordered by total replacement cost, largest first. NULL totals (groups
whose films all lack a replacement cost) sort last on both PostgreSQL and
SQLite because of the explicit NULLS LAST.
"""

import psycopg

from ._registry import report
from ..models import CategoryRisk, from_rows


@report("inventory-risk", "Inventory replacement-cost exposure by category and store", CategoryRisk)
def inventory_risk_by_category(conn: psycopg.Connection) -> list[CategoryRisk]:
    cur = conn.cursor()
    cur.execute(
        """SELECT inventory.store_id,
                  category.name AS category,
                  count(inventory.inventory_id) AS films,
                  avg(film.replacement_cost) AS avg_replacement_cost,
                  sum(film.replacement_cost) AS total_replacement_cost
           FROM inventory
           LEFT JOIN film ON inventory.film_id = film.film_id
           LEFT JOIN film_category ON film.film_id = film_category.film_id
           LEFT JOIN category ON film_category.category_id = category.category_id
           GROUP BY inventory.store_id, category.name
           ORDER BY total_replacement_cost DESC NULLS LAST"""
    )
    rows = cur.fetchall()
    cur.close()
    return from_rows(CategoryRisk, rows)
