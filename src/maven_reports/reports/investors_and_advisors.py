"""Investors and advisors in one list, tagged by type.

Advisors have no company, so their company_name is always NULL. UNION
(not UNION ALL) collapses rows that are identical in all four columns.
"""

import psycopg

from ._registry import report
from ..models import Stakeholder, from_rows


@report("investors-advisors", "Investors and advisors with a type indicator", Stakeholder)
def investors_and_advisors(conn: psycopg.Connection) -> list[Stakeholder]:
    cur = conn.cursor()
    cur.execute(
        """SELECT 'investor' AS type, first_name, last_name, company_name
           FROM investor
           UNION
           SELECT 'advisor' AS type, first_name, last_name, NULL
           FROM advisor"""
    )
    rows = cur.fetchall()
    cur.close()
    return from_rows(Stakeholder, rows)
