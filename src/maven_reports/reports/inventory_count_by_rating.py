"""Inventory item counts by film rating and store.

Same inventory -> film join as the inventory listing. Items whose film is
missing, or whose film has no rating, are counted under a NULL rating.
"""

import psycopg

from ._registry import report
from ..models import RatingCount, from_rows


@report("inventory-by-rating", "Inventory item counts by film rating and store", RatingCount)
def inventory_count_by_rating(conn: psycopg.Connection) -> list[RatingCount]:
    cur = conn.cursor()
    cur.execute(
        """SELECT inventory.store_id,
                  film.rating,
                  count(inventory.inventory_id) AS inventory_items
           FROM inventory
           LEFT JOIN film ON inventory.film_id = film.film_id
           GROUP BY inventory.store_id, film.rating"""
    )
    rows = cur.fetchall()
    cur.close()
    return from_rows(RatingCount, rows)
