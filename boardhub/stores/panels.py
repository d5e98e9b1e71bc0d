"""Panel store. Panels are the columns of a board."""
from typing import Any, List, Mapping, Union

from sqlalchemy.orm import Session

from boardhub.exceptions import ConflictError
from boardhub.logger import get_logger
from boardhub.models import Board, Panel, Ticket
from boardhub.schemas import PanelCreate, PanelResponse, PanelUpdate
from boardhub.stores._common import commit_or_conflict, reject_nulls, require, validate_input
from boardhub.stores.results import Outcome

logger = get_logger(__name__)


def _ensure_name_free(db: Session, name: str, panel_id: int = None) -> None:
    query = db.query(Panel.id).filter(Panel.name == name)
    if panel_id is not None:
        query = query.filter(Panel.id != panel_id)
    if query.first() is not None:
        raise ConflictError(f"Panel name {name!r} already exists")


def create_panel(db: Session, fields: Union[PanelCreate, Mapping[str, Any]]) -> PanelResponse:
    panel_in = validate_input(PanelCreate, fields)
    _ensure_name_free(db, panel_in.name)
    require(db.get(Board, panel_in.board_id), "Board", panel_in.board_id)

    panel = Panel(**panel_in.model_dump())
    db.add(panel)
    commit_or_conflict(db, f"Panel name {panel_in.name!r} already exists")
    db.refresh(panel)
    logger.info("Created panel %s (%s) on board %s", panel.id, panel.name, panel.board_id)
    return PanelResponse.model_validate(panel)


def get_panel_by_id(db: Session, panel_id: int) -> PanelResponse:
    panel = db.query(Panel).filter(Panel.id == panel_id).first()
    return PanelResponse.model_validate(require(panel, "Panel", panel_id))


def get_panels_by_board(db: Session, board_id: int) -> List[PanelResponse]:
    """Panels of a board by due date, soonest first; undated panels come last."""
    require(db.get(Board, board_id), "Board", board_id)
    panels = (
        db.query(Panel)
        .filter(Panel.board_id == board_id)
        .order_by(Panel.due_date.is_(None), Panel.due_date.asc(), Panel.id.asc())
        .all()
    )
    return [PanelResponse.model_validate(panel) for panel in panels]


def update_panel_by_id(
    db: Session, panel_id: int, patch: Union[PanelUpdate, Mapping[str, Any]]
) -> PanelResponse:
    update_data = validate_input(PanelUpdate, patch).model_dump(exclude_unset=True)
    reject_nulls(update_data, ("name", "board_id"))
    panel = require(db.query(Panel).filter(Panel.id == panel_id).first(), "Panel", panel_id)
    if "name" in update_data:
        _ensure_name_free(db, update_data["name"], panel_id)
    if "board_id" in update_data:
        require(db.get(Board, update_data["board_id"]), "Board", update_data["board_id"])

    if update_data.get("board_id", panel.board_id) != panel.board_id:
        # tickets follow their panel to the new board
        db.query(Ticket).filter(Ticket.panel_id == panel_id).update(
            {Ticket.board_id: update_data["board_id"]}, synchronize_session=False
        )

    for field, value in update_data.items():
        setattr(panel, field, value)

    commit_or_conflict(db, f"Update of panel {panel_id} conflicts with an existing panel")
    db.refresh(panel)
    logger.info("Updated panel %s: %s", panel_id, sorted(update_data))
    return PanelResponse.model_validate(panel)


def delete_panel_by_id(db: Session, panel_id: int) -> Outcome:
    deleted = db.query(Panel).filter(Panel.id == panel_id).delete()
    db.commit()
    if not deleted:
        return Outcome.DELETE_ERROR
    logger.info("Deleted panel %s", panel_id)
    return Outcome.SUCCESS
