"""Non-error outcomes returned by the stores.

Members are ``str`` subclasses, so callers may branch on the enum member or
compare against the plain string value.
"""
import enum


class Outcome(str, enum.Enum):
    SUCCESS = "success"
    EMPTY = "empty"
    DELETE_ERROR = "delete error"
    DUPLICATE_INVITE = "duplicate invite"
    NOT_INVITED = "user already not in invitee list"
    NONEXISTING_USER = "nonexisting user"

    def __str__(self) -> str:
        return self.value
