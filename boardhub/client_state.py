"""Client-side state container.

``ClientState`` is an immutable snapshot of what a board UI shows. Every change
goes through ``reduce(state, action)``, which returns a new snapshot and
leaves the old one untouched. Actions are small frozen dataclasses; each
action type has exactly one reducer registered in ``_REDUCERS``.
"""
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Tuple, Type

Record = Mapping[str, Any]


@dataclass(frozen=True)
class ClientState:
    user: Optional[Record] = None
    boards: Tuple[Record, ...] = ()
    panels: Tuple[Record, ...] = ()
    tickets: Tuple[Record, ...] = ()
    current_board: Optional[Record] = None
    current_panel: Optional[Record] = None
    current_ticket: Optional[Record] = None
    drawer_toggled: bool = False
    create_board_rendered: bool = False
    edit_board_rendered: bool = False
    create_ticket_rendered: bool = False
    edit_ticket_rendered: bool = False
    create_panel_rendered: bool = False
    edit_panel_rendered: bool = False


class Action:
    """Base class for every action understood by ``reduce``."""


@dataclass(frozen=True)
class SetUser(Action):
    user: Record


@dataclass(frozen=True)
class SetCurrentBoard(Action):
    board: Record


@dataclass(frozen=True)
class SetCurrentPanel(Action):
    panel: Record


@dataclass(frozen=True)
class SetCurrentTicket(Action):
    ticket: Record


@dataclass(frozen=True)
class SetBoards(Action):
    boards: Sequence[Record]


@dataclass(frozen=True)
class SetPanels(Action):
    panels: Sequence[Record]


@dataclass(frozen=True)
class SetTickets(Action):
    """Appends to the loaded tickets, since tickets arrive one panel at a time."""

    tickets: Sequence[Record]


@dataclass(frozen=True)
class AddBoard(Action):
    board: Record


@dataclass(frozen=True)
class AddPanel(Action):
    panel: Record


@dataclass(frozen=True)
class AddTicket(Action):
    ticket: Record


@dataclass(frozen=True)
class EditBoards(Action):
    boards: Sequence[Record]


@dataclass(frozen=True)
class EditPanels(Action):
    panels: Sequence[Record]


@dataclass(frozen=True)
class EditTicket(Action):
    index: int
    ticket: Record


@dataclass(frozen=True)
class EditCurrentBoard(Action):
    board: Record


@dataclass(frozen=True)
class EditCurrentPanel(Action):
    panel: Record


@dataclass(frozen=True)
class EditCurrentTicket(Action):
    ticket: Record


@dataclass(frozen=True)
class EmptyPanels(Action):
    pass


@dataclass(frozen=True)
class EmptyTickets(Action):
    pass


@dataclass(frozen=True)
class Toggle(Action):
    """Flip one of the UI flags. Use the subclasses rather than this directly."""

    flag: str = field(init=False, default="")


@dataclass(frozen=True)
class ToggleDrawer(Toggle):
    flag: str = field(init=False, default="drawer_toggled")


@dataclass(frozen=True)
class ToggleCreateBoard(Toggle):
    flag: str = field(init=False, default="create_board_rendered")


@dataclass(frozen=True)
class ToggleEditBoard(Toggle):
    flag: str = field(init=False, default="edit_board_rendered")


@dataclass(frozen=True)
class ToggleCreateTicket(Toggle):
    flag: str = field(init=False, default="create_ticket_rendered")


@dataclass(frozen=True)
class ToggleEditTicket(Toggle):
    flag: str = field(init=False, default="edit_ticket_rendered")


@dataclass(frozen=True)
class ToggleCreatePanel(Toggle):
    flag: str = field(init=False, default="create_panel_rendered")


@dataclass(frozen=True)
class ToggleEditPanel(Toggle):
    flag: str = field(init=False, default="edit_panel_rendered")


def _edit_ticket(state: ClientState, action: EditTicket) -> ClientState:
    if not 0 <= action.index < len(state.tickets):
        raise IndexError(f"No ticket at index {action.index}")
    tickets = tuple(
        action.ticket if i == action.index else ticket for i, ticket in enumerate(state.tickets)
    )
    return replace(state, tickets=tickets)


def _toggle(state: ClientState, action: Toggle) -> ClientState:
    return replace(state, **{action.flag: not getattr(state, action.flag)})


_REDUCERS: Dict[Type[Action], Callable[[ClientState, Any], ClientState]] = {
    SetUser: lambda s, a: replace(s, user=a.user),
    SetCurrentBoard: lambda s, a: replace(s, current_board=a.board),
    SetCurrentPanel: lambda s, a: replace(s, current_panel=a.panel),
    SetCurrentTicket: lambda s, a: replace(s, current_ticket=a.ticket),
    SetBoards: lambda s, a: replace(s, boards=tuple(a.boards)),
    SetPanels: lambda s, a: replace(s, panels=tuple(a.panels)),
    SetTickets: lambda s, a: replace(s, tickets=s.tickets + tuple(a.tickets)),
    AddBoard: lambda s, a: replace(s, boards=s.boards + (a.board,)),
    AddPanel: lambda s, a: replace(s, panels=s.panels + (a.panel,)),
    AddTicket: lambda s, a: replace(s, tickets=s.tickets + (a.ticket,)),
    EditBoards: lambda s, a: replace(s, boards=tuple(a.boards)),
    EditPanels: lambda s, a: replace(s, panels=tuple(a.panels)),
    EditTicket: _edit_ticket,
    EditCurrentBoard: lambda s, a: replace(s, current_board=a.board),
    EditCurrentPanel: lambda s, a: replace(s, current_panel=a.panel),
    EditCurrentTicket: lambda s, a: replace(s, current_ticket=a.ticket),
    EmptyPanels: lambda s, a: replace(s, panels=()),
    EmptyTickets: lambda s, a: replace(s, tickets=()),
    ToggleDrawer: _toggle,
    ToggleCreateBoard: _toggle,
    ToggleEditBoard: _toggle,
    ToggleCreateTicket: _toggle,
    ToggleEditTicket: _toggle,
    ToggleCreatePanel: _toggle,
    ToggleEditPanel: _toggle,
}


def reduce(state: ClientState, action: Action) -> ClientState:
    try:
        reducer = _REDUCERS[type(action)]
    except KeyError:
        raise TypeError(f"Unknown action {type(action).__name__}") from None
    return reducer(state, action)


def reduce_all(state: ClientState, actions: Sequence[Action]) -> ClientState:
    for action in actions:
        state = reduce(state, action)
    return state
