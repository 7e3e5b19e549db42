"""Rental counts and payment totals per customer name.

The GROUP BY is on (first_name, last_name), not customer_id: two customers
who share a name are reported as one row with combined totals. This is the
established behavior of the report and is kept as is.

total_rentals counts rental_id over the rental x payment join, so a rental
with two payments is counted twice. A customer with no rentals gets
total_rentals = 0 and a NULL total_payment_amount (sum over no values).
NULL totals sort after every real amount.
"""

import psycopg

from ._registry import report
from ..models import CustomerPayments, from_rows


@report("customer-payments", "Rental counts and payment totals per customer", CustomerPayments)
def customer_rental_payments(conn: psycopg.Connection) -> list[CustomerPayments]:
    cur = conn.cursor()
    cur.execute(
        """SELECT customer.first_name,
                  customer.last_name,
                  count(rental.rental_id) AS total_rentals,
                  sum(payment.amount) AS total_payment_amount
           FROM customer
           LEFT JOIN rental ON customer.customer_id = rental.customer_id
           LEFT JOIN payment ON rental.rental_id = payment.rental_id
           GROUP BY customer.first_name, customer.last_name
           ORDER BY total_payment_amount DESC NULLS LAST"""
    )
    rows = cur.fetchall()
    cur.close()
    return from_rows(CustomerPayments, rows)
