from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from app.db.session import Base


class Hall(Base):
    __tablename__ = "event_halls"

    id = Column(Integer, primary_key=True, index=True)

    # Ownership
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    name = Column(String, nullable=False)
    location = Column(String, nullable=True)

    owner = relationship("User", back_populates="halls")

    # Bookings (One-to-Many)
    bookings = relationship("Booking", back_populates="hall")
