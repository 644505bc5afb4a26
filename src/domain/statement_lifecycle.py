"""Statement status lifecycle with transition validation."""

from typing import Union

from src.domain.statement import StatementStatus


class InvalidTransitionError(Exception):
    """Raised when a status change is not forward progress."""

    def __init__(self, from_status: str, to_status: str):
        self.from_status = from_status
        self.to_status = to_status
        super().__init__(f"Invalid transition from '{from_status}' to '{to_status}'")


class StatementLifecycle:
    """State machine for statement status transitions.

    Allowed transitions (forward only):
    - open → approved, invoiced, paid
    - approved → invoiced, paid
    - invoiced → paid
    - paid is terminal
    """

    VALID_TRANSITIONS: dict[StatementStatus, list[StatementStatus]] = {
        StatementStatus.OPEN: [
            StatementStatus.APPROVED,
            StatementStatus.INVOICED,
            StatementStatus.PAID,
        ],
        StatementStatus.APPROVED: [StatementStatus.INVOICED, StatementStatus.PAID],
        StatementStatus.INVOICED: [StatementStatus.PAID],
        StatementStatus.PAID: [],
    }

    # Statuses in which re-aggregation may rewrite the total
    REAGGREGATION_ALLOWED = {StatementStatus.OPEN, StatementStatus.APPROVED}

    @classmethod
    def can_transition(
        cls,
        from_status: Union[StatementStatus, str],
        to_status: Union[StatementStatus, str],
    ) -> bool:
        allowed = cls.VALID_TRANSITIONS.get(StatementStatus(from_status), [])
        return StatementStatus(to_status) in allowed

    @classmethod
    def validate_transition(
        cls,
        from_status: Union[StatementStatus, str],
        to_status: Union[StatementStatus, str],
    ) -> None:
        if not cls.can_transition(from_status, to_status):
            raise InvalidTransitionError(
                StatementStatus(from_status).value, StatementStatus(to_status).value
            )

    @classmethod
    def can_reaggregate(cls, status: Union[StatementStatus, str]) -> bool:
        return StatementStatus(status) in cls.REAGGREGATION_ALLOWED

    @classmethod
    def get_next_statuses(cls, status: Union[StatementStatus, str]) -> list[StatementStatus]:
        return list(cls.VALID_TRANSITIONS.get(StatementStatus(status), []))
