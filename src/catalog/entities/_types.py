"""Column types shared by entity tables."""

from decimal import Decimal

import sqlalchemy as sa
from sqlalchemy.types import TypeDecorator


class ExactDecimal(TypeDecorator):
    """Decimal column that round-trips values exactly, exponent included.

    PostgreSQL stores an unconstrained ``NUMERIC``, which keeps the value as
    written. Other dialects (SQLite) would go through floating point, so the
    canonical string form of the decimal is stored instead.
    """

    impl = sa.String
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "postgresql":
            return dialect.type_descriptor(sa.Numeric(asdecimal=True))
        return dialect.type_descriptor(sa.String())

    def process_bind_param(self, value, dialect):
        if value is None or dialect.name == "postgresql":
            return value
        return str(value)

    def process_result_value(self, value, dialect):
        if value is None or isinstance(value, Decimal):
            return value
        return Decimal(value)
