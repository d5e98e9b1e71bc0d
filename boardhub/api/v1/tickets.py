"""Ticket endpoints"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from boardhub.api.errors import store_errors
from boardhub.database import get_db
from boardhub.schemas import OutcomeResponse, TicketCreate, TicketResponse, TicketUpdate
from boardhub.stores import tickets as ticket_store

router = APIRouter()


@router.post("", response_model=TicketResponse, status_code=status.HTTP_201_CREATED)
def create_ticket(ticket_in: TicketCreate, db: Session = Depends(get_db)):
    with store_errors():
        return ticket_store.create_ticket(db, ticket_in)


@router.get("/{ticket_id}", response_model=TicketResponse)
def read_ticket(ticket_id: int, db: Session = Depends(get_db)):
    with store_errors():
        return ticket_store.get_ticket_by_id(db, ticket_id)


@router.patch("/{ticket_id}", response_model=TicketResponse)
def update_ticket(ticket_id: int, ticket_update: TicketUpdate, db: Session = Depends(get_db)):
    with store_errors():
        return ticket_store.update_ticket_by_id(db, ticket_id, ticket_update)


@router.delete("/{ticket_id}", response_model=OutcomeResponse)
def delete_ticket(ticket_id: int, db: Session = Depends(get_db)):
    return OutcomeResponse(result=ticket_store.delete_ticket_by_id(db, ticket_id).value)
