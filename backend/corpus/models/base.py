"""Declarative base, enum column helper and the shared async session factory."""

from sqlalchemy import Enum as SAEnum
from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from corpus.config import settings

metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_name)s",
        "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)


def enum_column(enum_class: type, db_name: str, **kwargs: object) -> SAEnum:
    """Enum column stored as the member's text value.

    The corpus store keeps enumerations in plain text columns, so no native
    database enum type is created.
    """
    return SAEnum(
        enum_class,
        name=db_name,
        native_enum=False,
        length=32,
        values_callable=lambda members: [m.value for m in members],
        **kwargs,
    )


class Base(DeclarativeBase):
    """Base class for corpus tables."""

    metadata = metadata


# Created once per process; every lookup borrows a session from it.
engine = create_async_engine(settings.database_url, echo=settings.debug)
async_session_maker = async_sessionmaker(engine, expire_on_commit=False)
