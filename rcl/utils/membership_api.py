from typing import Any

import httpx

from rcl.config import config
from rcl.models.db.user import LegacyMember
from rcl.utils.logging import logger

MEMBER_BY_USERNAME_QUERY = "SELECT * FROM club_membership_data WHERE m_username = ? LIMIT 1"


class MembershipApiError(Exception):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MembershipApiClient:
    """
    Thin client for the legacy membership database, which exposes a single
    parameterised query endpoint guarded by an API key.
    """

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout_s: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url or config.membership_api_url
        self.api_key = api_key if api_key is not None else config.membership_api_key
        self.timeout_s = timeout_s or config.membership_api_timeout_seconds
        self._transport = transport

    async def query(self, sql: str, params: list[Any]) -> list[dict[str, Any]]:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_s, transport=self._transport
            ) as client:
                response = await client.post(
                    self.base_url,
                    json={"sql": sql, "params": params},
                    headers={"x-api-key": self.api_key},
                )
        except httpx.HTTPError as exc:
            logger.error("Membership API request failed: %s", exc)
            raise MembershipApiError("Membership API is unreachable") from exc

        if response.is_error:
            logger.error(
                "Membership API returned %s: %s", response.status_code, response.text[:200]
            )
            raise MembershipApiError("Authentication service error", response.status_code)

        try:
            payload = response.json()
        except ValueError as exc:
            raise MembershipApiError("Membership API returned invalid JSON") from exc

        results = payload.get("results") if isinstance(payload, dict) else None
        return results if isinstance(results, list) else []

    async def fetch_member_by_username(self, username: str) -> LegacyMember | None:
        rows = await self.query(MEMBER_BY_USERNAME_QUERY, [username])
        if len(rows) < 1:
            return None
        return LegacyMember.model_validate(rows[0])


def get_membership_api_client() -> MembershipApiClient:
    return MembershipApiClient()
