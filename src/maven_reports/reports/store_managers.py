"""Store managers with their full store addresses.

Relationships used:
    store.manager_staff_id -> staff.staff_id      (manager of the store)
    store.address_id -> address.address_id        (store location)
    address.city_id -> city.city_id -> country    (location hierarchy)

Every join is a LEFT JOIN so a store with no manager, or with a broken
address chain, still produces exactly one row with the missing parts NULL.
"""

import psycopg

from ._registry import report
from ..models import StoreManager, from_rows


@report("store-managers", "Store managers with full store addresses", StoreManager)
def store_managers(conn: psycopg.Connection) -> list[StoreManager]:
    cur = conn.cursor()
    cur.execute(
        """SELECT staff.first_name AS manager_first_name,
                  staff.last_name AS manager_last_name,
                  address.address,
                  address.district,
                  city.city,
                  country.country
           FROM store
           LEFT JOIN staff ON store.manager_staff_id = staff.staff_id
           LEFT JOIN address ON store.address_id = address.address_id
           LEFT JOIN city ON address.city_id = city.city_id
           LEFT JOIN country ON city.country_id = country.country_id"""
    )
    rows = cur.fetchall()
    cur.close()
    return from_rows(StoreManager, rows)
