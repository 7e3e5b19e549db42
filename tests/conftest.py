"""Pytest configuration and fixtures."""

import sqlite3
from contextlib import contextmanager

import pytest

# MavenMovies tables, reduced to the columns the reports read. Foreign keys
# are deliberately not enforced so tests can build dangling references.
SCHEMA = """
CREATE TABLE country (country_id INTEGER PRIMARY KEY, country TEXT NOT NULL);
CREATE TABLE city (city_id INTEGER PRIMARY KEY, city TEXT NOT NULL, country_id INTEGER);
CREATE TABLE address (
    address_id INTEGER PRIMARY KEY, address TEXT, district TEXT, city_id INTEGER
);
CREATE TABLE staff (staff_id INTEGER PRIMARY KEY, first_name TEXT, last_name TEXT);
CREATE TABLE store (
    store_id INTEGER PRIMARY KEY, manager_staff_id INTEGER, address_id INTEGER
);
CREATE TABLE film (
    film_id INTEGER PRIMARY KEY, title TEXT, rating TEXT,
    rental_rate NUMERIC, replacement_cost NUMERIC
);
CREATE TABLE category (category_id INTEGER PRIMARY KEY, name TEXT NOT NULL);
CREATE TABLE film_category (
    film_id INTEGER NOT NULL, category_id INTEGER NOT NULL,
    PRIMARY KEY (film_id, category_id)
);
CREATE TABLE inventory (
    inventory_id INTEGER PRIMARY KEY, film_id INTEGER, store_id INTEGER NOT NULL
);
CREATE TABLE customer (
    customer_id INTEGER PRIMARY KEY, store_id INTEGER NOT NULL,
    first_name TEXT NOT NULL, last_name TEXT NOT NULL,
    address_id INTEGER, active INTEGER NOT NULL DEFAULT 1
);
CREATE TABLE rental (rental_id INTEGER PRIMARY KEY, customer_id INTEGER);
CREATE TABLE payment (payment_id INTEGER PRIMARY KEY, rental_id INTEGER, amount NUMERIC);
CREATE TABLE investor (
    investor_id INTEGER PRIMARY KEY, first_name TEXT, last_name TEXT, company_name TEXT
);
CREATE TABLE advisor (advisor_id INTEGER PRIMARY KEY, first_name TEXT, last_name TEXT);
CREATE TABLE actor_award (
    actor_award_id INTEGER PRIMARY KEY, actor_id INTEGER NOT NULL, awards TEXT
);
"""


@pytest.fixture
def conn():
    """Create an in-memory database with the report tables, all empty."""
    db = sqlite3.connect(":memory:", check_same_thread=False)
    db.executescript(SCHEMA)
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def insert(conn):
    """Return a helper that inserts one row: insert("film", film_id=1, title="X")."""
    def _insert(table: str, **values):
        columns = ", ".join(values)
        placeholders = ", ".join("?" for _ in values)
        conn.execute(
            f"INSERT INTO {table} ({columns}) VALUES ({placeholders})",
            tuple(values.values()),
        )
        conn.commit()
    return _insert


@pytest.fixture
def location(insert):
    """Seed one address chain: address 1 -> city 1 -> country 1."""
    insert("country", country_id=1, country="Canada")
    insert("city", city_id=1, city="Lethbridge", country_id=1)
    insert("address", address_id=1, address="47 MySakila Drive", district="Alberta", city_id=1)


@pytest.fixture
def pooled(monkeypatch, conn):
    """Make the runner's pooled connection() hand out the SQLite connection."""
    from maven_reports import runner

    @contextmanager
    def fake_connection():
        yield conn

    monkeypatch.setattr(runner, "connection", fake_connection)
    return conn
