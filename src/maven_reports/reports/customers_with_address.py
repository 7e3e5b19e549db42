"""Customers with their store and address details."""

import psycopg

from ._registry import report
from ..models import CustomerAddress, from_rows


@report("customers", "Customers with store and address details", CustomerAddress)
def customers_with_address(conn: psycopg.Connection) -> list[CustomerAddress]:
    cur = conn.cursor()
    cur.execute(
        """SELECT customer.first_name,
                  customer.last_name,
                  customer.store_id,
                  customer.active,
                  address.address,
                  city.city,
                  country.country
           FROM customer
           LEFT JOIN address ON customer.address_id = address.address_id
           LEFT JOIN city ON address.city_id = city.city_id
           LEFT JOIN country ON city.country_id = country.country_id"""
    )
    rows = cur.fetchall()
    cur.close()
    return from_rows(CustomerAddress, rows)
