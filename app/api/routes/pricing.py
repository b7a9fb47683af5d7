from typing import Any

from fastapi import APIRouter, Body, Depends, Header
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.dependencies import get_db, get_slot_resolver
from app.schemas.booking import BookingOut, PricingRequest, PricingResponse
from app.services.booking_upsert import BookingUpsertEngine
from app.services.ownership import HallOwnershipVerifier
from app.services.slots import SlotResolver

router = APIRouter(prefix="/hallowner", tags=["Hall Owner"])


# =====================================================================
# SET SLOT PRICE  (Hall owner only)
# =====================================================================
@router.post("/pricing", response_model=PricingResponse)
def set_slot_price(
    payload: Any = Body(default=None),
    authorization: str | None = Header(default=None),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    slots: SlotResolver = Depends(get_slot_resolver),
):
    data = PricingRequest.parse(payload)

    # Slot is resolved before anything touches the database
    slot = slots.resolve(data.time_slot)

    owner_id = HallOwnershipVerifier(db, settings).verify(authorization, data.hall_id)

    result = BookingUpsertEngine(db).upsert(
        hall_id=data.hall_id,
        booking_date=data.booking_date,
        slot=slot,
        price=data.price,
        caller_id=owner_id,
    )

    return PricingResponse(
        message="Booking processed successfully",
        created=result.created,
        booking=BookingOut.model_validate(result.booking),
    )
