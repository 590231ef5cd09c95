"""
Caller identity as supplied by the upstream identity collaborator.

Dependencies: None
System role: Per-request caller value used for ownership and usage decisions
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Caller:
    """
    Who is making a request.

    Attributes:
        id: User id, None when no identity was supplied
        is_anonymous: True for guest identities
    """

    id: str | None = None
    is_anonymous: bool = True

    @property
    def is_authenticated(self) -> bool:
        return self.id is not None

    @property
    def is_registered(self) -> bool:
        """Authenticated and not a guest account."""
        return self.id is not None and not self.is_anonymous


ANONYMOUS = Caller()
