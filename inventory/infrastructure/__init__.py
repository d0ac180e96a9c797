"""Infrastructure: persistence (SQLAlchemy async) and its repositories."""
