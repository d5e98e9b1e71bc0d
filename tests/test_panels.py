from datetime import date

import pytest
from sqlalchemy.orm import Session

from boardhub.exceptions import ConflictError, NotFoundError, ValidationError
from boardhub.stores import panels, tickets
from boardhub.stores.results import Outcome


def test_create_panel_then_read_back(db_session: Session, seeded):
    panel = panels.create_panel(
        db_session, {"name": "sprint 1", "due_date": "2017-09-20", "board_id": seeded.board.id}
    )
    fetched = panels.get_panel_by_id(db_session, panel.id)
    assert fetched.name == "sprint 1"
    assert fetched.due_date == date(2017, 9, 20)
    assert fetched.board_id == seeded.board.id


def test_create_panel_errors(db_session: Session, seeded):
    with pytest.raises(ConflictError):
        panels.create_panel(db_session, {"name": "testpanel", "board_id": seeded.board2.id})
    with pytest.raises(NotFoundError):
        panels.create_panel(db_session, {"name": "nowhere", "board_id": 9999})
    with pytest.raises(ValidationError):
        panels.create_panel(db_session, {"name": "bad date", "due_date": "soon", "board_id": seeded.board.id})


def test_get_panel_by_id_missing(db_session: Session):
    with pytest.raises(NotFoundError):
        panels.get_panel_by_id(db_session, 9999)


def test_panels_sorted_by_due_date_with_undated_last(db_session: Session, seeded):
    board_id = seeded.board2.id
    panels.create_panel(db_session, {"name": "B", "due_date": "2017-10-15", "board_id": board_id})
    panels.create_panel(db_session, {"name": "undated", "board_id": board_id})
    panels.create_panel(db_session, {"name": "C", "due_date": "2017-11-01", "board_id": board_id})
    panels.create_panel(db_session, {"name": "A", "due_date": "2017-09-20", "board_id": board_id})

    names = [panel.name for panel in panels.get_panels_by_board(db_session, board_id)]
    assert names == ["A", "B", "C", "undated"]


def test_get_panels_by_board(db_session: Session, seeded):
    assert [p.id for p in panels.get_panels_by_board(db_session, seeded.board.id)] == [seeded.panel.id]
    assert panels.get_panels_by_board(db_session, seeded.board3.id) == []
    with pytest.raises(NotFoundError):
        panels.get_panels_by_board(db_session, 9999)


def test_update_panel(db_session: Session, seeded):
    panel = panels.update_panel_by_id(db_session, seeded.panel.id, {"due_date": "2017-09-20"})
    assert panel.due_date == date(2017, 9, 20)
    assert panel.name == "testpanel"

    panel = panels.update_panel_by_id(db_session, seeded.panel.id, {"due_date": None})
    assert panel.due_date is None


def test_update_panel_errors(db_session: Session, seeded):
    panels.create_panel(db_session, {"name": "other", "board_id": seeded.board.id})
    with pytest.raises(NotFoundError):
        panels.update_panel_by_id(db_session, 9999, {"name": "gone"})
    with pytest.raises(ConflictError):
        panels.update_panel_by_id(db_session, seeded.panel.id, {"name": "other"})
    with pytest.raises(ValidationError):
        panels.update_panel_by_id(db_session, seeded.panel.id, {"name": None})


def test_delete_panel_removes_its_tickets(db_session: Session, seeded):
    assert panels.delete_panel_by_id(db_session, seeded.panel.id) is Outcome.SUCCESS
    with pytest.raises(NotFoundError):
        tickets.get_ticket_by_id(db_session, seeded.ticket.id)
    assert panels.delete_panel_by_id(db_session, seeded.panel.id) is Outcome.DELETE_ERROR


def test_moving_panel_moves_its_tickets(db_session: Session, seeded):
    panel = panels.update_panel_by_id(db_session, seeded.panel.id, {"board_id": seeded.board2.id})
    assert panel.board_id == seeded.board2.id

    assert [t.board_id for t in tickets.get_tickets_by_panel(db_session, seeded.panel.id)] == [seeded.board2.id]
    listed = tickets.get_tickets_by_user_handle_and_board(db_session, "stevepkuo", seeded.board2.id)
    assert [t.id for t in listed] == [seeded.ticket.id]
    with pytest.raises(NotFoundError):
        tickets.get_tickets_by_user_handle_and_board(db_session, "stevepkuo", seeded.board.id)
