"""Panel endpoints"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from boardhub.api.errors import store_errors
from boardhub.database import get_db
from boardhub.schemas import OutcomeResponse, PanelCreate, PanelResponse, PanelUpdate, TicketResponse
from boardhub.stores import panels as panel_store
from boardhub.stores import tickets as ticket_store

router = APIRouter()


@router.post("", response_model=PanelResponse, status_code=status.HTTP_201_CREATED)
def create_panel(panel_in: PanelCreate, db: Session = Depends(get_db)):
    with store_errors():
        return panel_store.create_panel(db, panel_in)


@router.get("/{panel_id}", response_model=PanelResponse)
def read_panel(panel_id: int, db: Session = Depends(get_db)):
    with store_errors():
        return panel_store.get_panel_by_id(db, panel_id)


@router.patch("/{panel_id}", response_model=PanelResponse)
def update_panel(panel_id: int, panel_update: PanelUpdate, db: Session = Depends(get_db)):
    with store_errors():
        return panel_store.update_panel_by_id(db, panel_id, panel_update)


@router.delete("/{panel_id}", response_model=OutcomeResponse)
def delete_panel(panel_id: int, db: Session = Depends(get_db)):
    return OutcomeResponse(result=panel_store.delete_panel_by_id(db, panel_id).value)


@router.get("/{panel_id}/tickets", response_model=List[TicketResponse])
def list_panel_tickets(panel_id: int, db: Session = Depends(get_db)):
    with store_errors():
        return ticket_store.get_tickets_by_panel(db, panel_id)
