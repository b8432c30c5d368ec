"""Run work under an impersonated remote identity.

The identity lives in a :class:`contextvars.ContextVar`, so it is scoped to
the call made through :meth:`RemoteUser.do_as` and never leaks into other
threads or tasks.
"""

from __future__ import annotations

import contextvars
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional, TypeVar

from hdfsctl.core.exceptions import ImpersonationInterruptedError
from hdfsctl.core.validation import validate_username

T = TypeVar("T")

_current_user: contextvars.ContextVar[Optional["RemoteUser"]] = contextvars.ContextVar(
    "hdfsctl_remote_user", default=None
)


@dataclass(frozen=True)
class RemoteUser:
    """Identity presented to the remote filesystem."""

    username: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "username", validate_username(self.username))

    def do_as(self, action: Callable[[], T]) -> T:
        """Run ``action`` with this user as the current identity.

        Args:
            action: Zero-argument callable.

        Returns:
            Whatever ``action`` returns.

        Raises:
            ImpersonationInterruptedError: If ``action`` raised InterruptedError.
        """
        ctx = contextvars.copy_context()
        try:
            return ctx.run(self._run, action)
        except InterruptedError as e:
            raise ImpersonationInterruptedError(self.username, str(e) or None) from e

    def _run(self, action: Callable[[], T]) -> T:
        _current_user.set(self)
        return action()


def current_user() -> Optional[RemoteUser]:
    """Return the identity of the enclosing ``do_as`` call, if any."""
    return _current_user.get()
