"""Storage-side counter backing the atomic serial claim."""

from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, mapped_column

from footprint_api.db.session import Base

SERIAL_COUNTER_ID = 1


class SerialCounter(Base):
    """Single-row counter holding the last serial handed out.

    Claims increment ``last_serial`` with one UPDATE ... RETURNING statement so
    the storage layer serializes concurrent registrations.
    """

    __tablename__ = "serial_counter"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=SERIAL_COUNTER_ID)
    last_serial: Mapped[int] = mapped_column(Integer, nullable=False)
