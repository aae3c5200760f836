from sqlalchemy import Column, String, Float, Index
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import declarative_base
from sqlalchemy.schema import CreateTable, CreateIndex

Base = declarative_base()

class MovieDB(Base):
    """
    ORM Model - Mapping 1-1 with table 'movies' in Postgres.
    The API reads it with raw SQL through asyncpg; this class owns the DDL.
    """
    __tablename__ = 'movies'

    movie_id = Column(String(50), primary_key=True)  # TMDB id
    title = Column(String(500), nullable=False)
    poster_url = Column(String(1000))
    imdb_rating = Column(Float, nullable=False, default=0.0)
    genres = Column(JSONB, nullable=False, default=list)  # [28, 12]
    platforms = Column(JSONB, nullable=False, default=list)  # ["Netflix", "zee5"]
    achievements = Column(JSONB, nullable=False, default=list)

    __table_args__ = (
        # Serves the "platforms ?| array" any-of predicate
        Index("ix_movies_platforms", platforms, postgresql_using="gin"),
        Index("ix_movies_imdb_rating", imdb_rating),
    )


def schema_statements() -> list[str]:
    """CREATE statements for the catalog, compiled for PostgreSQL."""
    dialect = postgresql.dialect()
    table = MovieDB.__table__
    statements = [str(CreateTable(table, if_not_exists=True).compile(dialect=dialect))]
    for index in sorted(table.indexes, key=lambda i: i.name):
        statements.append(str(CreateIndex(index, if_not_exists=True).compile(dialect=dialect)))
    return statements
