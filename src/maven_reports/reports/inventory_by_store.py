"""Inventory per store with film details.

One row per inventory item. Orphaned items (film_id with no film row)
are kept with NULL film columns.
"""

import psycopg

from ._registry import report
from ..models import InventoryItem, from_rows


@report("inventory-by-store", "Inventory items per store with film details", InventoryItem)
def inventory_by_store(conn: psycopg.Connection) -> list[InventoryItem]:
    cur = conn.cursor()
    cur.execute(
        """SELECT inventory.store_id,
                  inventory.inventory_id,
                  film.title,
                  film.rating,
                  film.rental_rate,
                  film.replacement_cost
           FROM inventory
           LEFT JOIN film ON inventory.film_id = film.film_id"""
    )
    rows = cur.fetchall()
    cur.close()
    return from_rows(InventoryItem, rows)
