"""Inventory reference-data service: suppliers, products, todos and existence validation."""
