"""Infrastructure: persistence (SQLAlchemy, Alembic) and storage exceptions."""
