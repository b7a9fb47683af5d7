from datetime import date
from typing import NamedTuple

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import Conflict, InternalError
from app.core.logging_config import get_logger
from app.models.booking import Booking
from app.models.enums import BookingStatus
from app.services.slots import TimeRange

logger = get_logger().bind(log_type="booking")


class UpsertResult(NamedTuple):
    booking: Booking
    created: bool


class BookingUpsertEngine:
    """
    Create or re-price the booking for one hall, date and time range.

    The lookup and the write share a single transaction. Two requests racing
    to create the same slot are settled by the ``uq_booking_slot`` constraint:
    the loser gets Conflict and resolves to an update when it retries.
    """

    def __init__(self, db: Session):
        self.db = db

    def _find(self, hall_id: int, booking_date: date, slot: TimeRange):
        return (
            self.db.query(Booking)
            .filter(
                Booking.hall_id == hall_id,
                Booking.date == booking_date,
                Booking.start_time == slot.start,
                Booking.end_time == slot.end,
            )
            .with_for_update()
            .first()
        )

    def upsert(
        self,
        hall_id: int,
        booking_date: date,
        slot: TimeRange,
        price: float | None,
        caller_id: int,
    ) -> UpsertResult:
        try:
            booking = self._find(hall_id, booking_date, slot)

            if booking is not None:
                # Only the surcharge moves; status, owner and times stay put
                booking.plus_price = price
                created = False
            else:
                booking = Booking(
                    hall_id=hall_id,
                    user_id=caller_id,
                    date=booking_date,
                    start_time=slot.start,
                    end_time=slot.end,
                    status=BookingStatus.PENDING,
                    plus_price=price,
                )
                self.db.add(booking)
                created = True

            self.db.commit()

        except IntegrityError as exc:
            self.db.rollback()
            logger.warning(
                f"Booking Conflict | Hall={hall_id} | Date={booking_date} | "
                f"Slot={slot.start:%H:%M}-{slot.end:%H:%M} | User={caller_id}"
            )
            raise Conflict(
                "Booking already exists for this slot", hall_id=hall_id, date=str(booking_date)
            ) from exc

        except SQLAlchemyError as exc:
            self.db.rollback()
            raise InternalError(hall_id=hall_id, date=str(booking_date)) from exc

        self.db.refresh(booking)

        logger.info(
            f"Booking {'Created' if created else 'Updated'} | ID={booking.id} | Hall={hall_id} | "
            f"Date={booking_date} | Slot={slot.start:%H:%M}-{slot.end:%H:%M} | "
            f"PlusPrice={price} | User={caller_id}"
        )

        return UpsertResult(booking, created)
