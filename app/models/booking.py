from sqlalchemy import (
    Column, Integer, Date, Time, Float, DateTime, Enum, ForeignKey, UniqueConstraint, func
)
from sqlalchemy.orm import relationship

from app.db.session import Base
from app.models.enums import BookingStatus


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    hall_id = Column(Integer, ForeignKey("event_halls.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    date = Column(Date, nullable=False)
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)

    status = Column(
        Enum(BookingStatus, name="bookingstatus", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=BookingStatus.PENDING,
    )

    # Surcharge on top of the hall price, editable by the owner
    plus_price = Column(Float, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    user = relationship("User", back_populates="bookings")
    hall = relationship("Hall", back_populates="bookings")

    __table_args__ = (
        # One booking per hall/date/time range
        UniqueConstraint("hall_id", "date", "start_time", "end_time", name="uq_booking_slot"),
    )
