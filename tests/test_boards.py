import pytest
from sqlalchemy.orm import Session

from boardhub.exceptions import ConflictError, NotFoundError, ValidationError
from boardhub.stores import boards, memberships, panels, tickets
from boardhub.stores.results import Outcome


def test_create_board_then_read_back(db_session: Session, seeded):
    board = boards.get_board_by_id(db_session, seeded.board.id)
    assert board.board_name == "testboard"
    assert board.repo_name == "thesis"
    assert board.repo_url == "https://github.com/Benevolent-Roosters/thesis"
    assert board.owner_id == seeded.steve.id


def test_create_board_rejects_duplicate_name(db_session: Session, seeded):
    with pytest.raises(ConflictError):
        boards.create_board(db_session, {"board_name": "testboard", "owner_id": seeded.dsc.id})


def test_create_board_requires_existing_owner(db_session: Session):
    with pytest.raises(NotFoundError):
        boards.create_board(db_session, {"board_name": "orphan", "owner_id": 9999})


def test_create_board_validates_name(db_session: Session, seeded):
    with pytest.raises(ValidationError):
        boards.create_board(db_session, {"board_name": "", "owner_id": seeded.steve.id})
    with pytest.raises(ValidationError):
        boards.create_board(db_session, {"board_name": "x" * 51, "owner_id": seeded.steve.id})


def test_get_board_by_id_missing(db_session: Session):
    with pytest.raises(NotFoundError):
        boards.get_board_by_id(db_session, 9999)


def test_get_board_by_repo_url(db_session: Session, seeded):
    board = boards.get_board_by_repo_url(db_session, "https://github.com/Benevolent-Roosters/thesis")
    assert board.id == seeded.board.id

    with pytest.raises(NotFoundError):
        boards.get_board_by_repo_url(db_session, "https://github.com/nobody/nothing")


def test_update_board(db_session: Session, seeded):
    board = boards.update_board_by_id(
        db_session, seeded.board.id, {"board_name": "renamed", "repo_name": "thesis2"}
    )
    assert board.board_name == "renamed"
    assert board.repo_name == "thesis2"
    assert board.repo_url == "https://github.com/Benevolent-Roosters/thesis"

    # keeping its own name is not a collision
    assert boards.update_board_by_id(db_session, seeded.board.id, {"board_name": "renamed"}).id == seeded.board.id


def test_update_board_errors(db_session: Session, seeded):
    with pytest.raises(NotFoundError):
        boards.update_board_by_id(db_session, 9999, {"repo_name": "nothing"})
    with pytest.raises(ConflictError):
        boards.update_board_by_id(db_session, seeded.board.id, {"board_name": "testboard2"})
    with pytest.raises(NotFoundError):
        boards.update_board_by_id(db_session, seeded.board.id, {"owner_id": 9999})
    with pytest.raises(ValidationError):
        boards.update_board_by_id(db_session, seeded.board.id, {"owner_id": None})


def test_transfer_board_ownership(db_session: Session, seeded):
    board = boards.update_board_by_id(db_session, seeded.board.id, {"owner_id": seeded.dsc.id})
    assert board.owner_id == seeded.dsc.id


def test_delete_board_cascades(db_session: Session, seeded):
    assert boards.delete_board_by_id(db_session, seeded.board.id) is Outcome.SUCCESS

    with pytest.raises(NotFoundError):
        boards.get_board_by_id(db_session, seeded.board.id)
    with pytest.raises(NotFoundError):
        panels.get_panel_by_id(db_session, seeded.panel.id)
    with pytest.raises(NotFoundError):
        tickets.get_ticket_by_id(db_session, seeded.ticket.id)
    assert memberships.get_boards_by_user(db_session, seeded.steve.id) == []


def test_delete_missing_board(db_session: Session):
    assert boards.delete_board_by_id(db_session, 9999) == "delete error"
