"""Stockroom: stores, products and stock levels behind a REST API."""
