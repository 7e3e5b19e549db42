"""Actor award coverage, bucketed by number of awards.

The awards column is free text. Buckets are assigned by exact string
comparison against the values the data actually contains:

    'Emmy, Oscar, Tony '                          -> '3 awards'
    'Emmy, Oscar' / 'Emmy, Tony' / 'Oscar, Tony'  -> '2 awards'
    anything else                                 -> '1 award'

Note the trailing space in the three-award value. A reordered pair such
as 'Oscar, Emmy' is not recognised and falls into '1 award'.

pct_w_one_film is the share of rows in the bucket with a non-NULL actor_id.
actor_id is never NULL in actor_award, so the figure is 1 for every bucket.
"""

import psycopg

from ._registry import report
from ..models import AwardBucket, from_rows


@report("actor-awards", "Actor award buckets", AwardBucket)
def actor_award_buckets(conn: psycopg.Connection) -> list[AwardBucket]:
    cur = conn.cursor()
    cur.execute(
        """SELECT CASE
                      WHEN actor_award.awards = 'Emmy, Oscar, Tony ' THEN '3 awards'
                      WHEN actor_award.awards IN ('Emmy, Oscar', 'Emmy, Tony', 'Oscar, Tony')
                          THEN '2 awards'
                      ELSE '1 award'
                  END AS number_of_awards,
                  avg(CASE WHEN actor_award.actor_id IS NULL THEN 0 ELSE 1 END) AS pct_w_one_film
           FROM actor_award
           GROUP BY 1"""
    )
    rows = cur.fetchall()
    cur.close()
    return from_rows(AwardBucket, rows)
