# app/core.py
"""Appointment-slot availability.

Two strategies produce the same answer:

* ``availability_in_memory`` loads the catalog and the day's bookings and
  filters each treatment's slots in Python.
* ``availability_joined`` pushes the join and the set difference into the
  database and only groups the resulting rows.

Both return a list of ``{"name", "price", "slots"}`` dicts in catalog order.
Fully booked treatments are kept with an empty slot list.
"""

from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Set

from sqlalchemy import and_
from sqlmodel import Session, select

from .models import Booking, Treatment, TreatmentSlot


def remaining_slots(slots: Iterable[str], booked: Iterable[str]) -> List[str]:
    """Slots not in ``booked``, original order kept."""
    taken = set(booked)
    return [slot for slot in slots if slot not in taken]


def bookings_on(session: Session, date: Optional[str]) -> List[Booking]:
    # No date means nothing can match; the full catalog stays open.
    if not date:
        return []
    return list(session.exec(select(Booking).where(Booking.appointment_date == date)).all())


def _catalog_slots(session: Session) -> Dict[str, List[str]]:
    rows = session.exec(
        select(TreatmentSlot).order_by(TreatmentSlot.treatment_name, TreatmentSlot.position)
    ).all()
    slots: Dict[str, List[str]] = defaultdict(list)
    for row in rows:
        slots[row.treatment_name].append(row.label)
    return slots


def availability_in_memory(session: Session, date: Optional[str]) -> List[dict]:
    treatments = session.exec(select(Treatment).order_by(Treatment.id)).all()
    catalog_slots = _catalog_slots(session)

    booked_by_treatment: Dict[str, Set[str]] = defaultdict(set)
    for booking in bookings_on(session, date):
        booked_by_treatment[booking.treatment].add(booking.slot)

    options = []
    for treatment in treatments:
        slots = remaining_slots(
            catalog_slots.get(treatment.name, []),
            booked_by_treatment.get(treatment.name, ()),
        )
        options.append({"name": treatment.name, "price": treatment.price, "slots": slots})
    return options


def availability_joined(session: Session, date: Optional[str]) -> List[dict]:
    # Correlated anti-join: a slot is open unless a booking for the date holds it.
    # A missing date compares as IS NULL, which never matches a stored booking.
    is_booked = (
        select(Booking.id)
        .where(Booking.appointment_date == date)
        .where(Booking.treatment == TreatmentSlot.treatment_name)
        .where(Booking.slot == TreatmentSlot.label)
        .correlate(TreatmentSlot)
        .exists()
    )

    # Outer join keeps fully booked treatments as a single row with a NULL label.
    statement = (
        select(Treatment.id, Treatment.name, Treatment.price, TreatmentSlot.label)
        .select_from(Treatment)
        .outerjoin(
            TreatmentSlot,
            and_(TreatmentSlot.treatment_name == Treatment.name, ~is_booked),
        )
        .order_by(Treatment.id, TreatmentSlot.position)
    )

    options: Dict[int, dict] = {}
    for treatment_id, name, price, label in session.exec(statement).all():
        option = options.setdefault(treatment_id, {"name": name, "price": price, "slots": []})
        if label is not None:
            option["slots"].append(label)
    return list(options.values())


def treatment_names(session: Session) -> List[dict]:
    names = session.exec(select(Treatment.name).order_by(Treatment.id)).all()
    return [{"name": name} for name in names]
