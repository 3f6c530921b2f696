"""Outcome of a single delivery attempt as a two-variant sum type.

A :data:`Result` is either :class:`Success` or :class:`Failure`. The two are
distinct classes so callers can ``match`` on them and static checkers can
verify both arms are handled::

    match mailer.send_mail(message):
        case Success():
            ...
        case Failure(reason, error, kind):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Literal, TypeAlias

from .enums import FailureKind

HOST_REQUIRED: Final[str] = "Host can not be empty"
USERNAME_REQUIRED: Final[str] = "UserName can not be empty"


@dataclass(frozen=True, slots=True)
class Success:
    """The message was handed to the server and the session closed cleanly.

    Example:
        >>> Success().success
        True
        >>> Success() == Success()
        True
    """

    @property
    def success(self) -> Literal[True]:
        return True


@dataclass(frozen=True, slots=True)
class Failure:
    """The delivery sequence stopped early or a transport step failed.

    Attributes:
        reason: Human-readable description.
        error: The captured exception, when the failure came from one.
        kind: Step of the sequence that failed.

    Example:
        >>> failure = Failure("Host can not be empty")
        >>> failure.success
        False
        >>> failure.kind
        <FailureKind.CONFIGURATION: 'configuration'>
        >>> failure.error is None
        True
    """

    reason: str
    error: BaseException | None = None
    kind: FailureKind = FailureKind.CONFIGURATION

    @property
    def success(self) -> Literal[False]:
        return False

    @classmethod
    def from_exception(cls, exc: BaseException, kind: FailureKind = FailureKind.TRANSPORT) -> Failure:
        """Wrap an exception, keeping it for inspection.

        Example:
            >>> failure = Failure.from_exception(ConnectionResetError("peer closed"))
            >>> failure.reason
            'ConnectionResetError: peer closed'
            >>> type(failure.error).__name__
            'ConnectionResetError'
            >>> failure.kind.value
            'transport'
        """
        detail = str(exc)
        reason = f"{type(exc).__name__}: {detail}" if detail else type(exc).__name__
        return cls(reason=reason, error=exc, kind=kind)


Result: TypeAlias = Success | Failure
"""Either :class:`Success` or :class:`Failure`."""


__all__ = [
    "HOST_REQUIRED",
    "USERNAME_REQUIRED",
    "Failure",
    "Result",
    "Success",
]
