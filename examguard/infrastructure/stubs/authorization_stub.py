"""Authorization stub implementation."""

from __future__ import annotations

from examguard.application.ports.authorization import AuthorizationProtocol


class AuthorizationStub(AuthorizationProtocol):
    """Grant-list authorization (testing only).

    Site admins pass every capability check, as on the host.
    """

    def __init__(self) -> None:
        self._grants: set[tuple[int, int, str]] = set()
        self._site_admins: set[int] = set()

    async def can_manage_overrides(
        self, context_id: int, user_id: int, capability: str
    ) -> bool:
        if user_id in self._site_admins:
            return True
        return (context_id, user_id, capability) in self._grants

    async def is_site_admin(self, user_id: int) -> bool:
        return user_id in self._site_admins

    def grant(self, context_id: int, user_id: int, capability: str) -> None:
        self._grants.add((context_id, user_id, capability))

    def revoke(self, context_id: int, user_id: int, capability: str) -> None:
        self._grants.discard((context_id, user_id, capability))

    def make_site_admin(self, user_id: int) -> None:
        self._site_admins.add(user_id)
