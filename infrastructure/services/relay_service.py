from typing import Any, Dict, Optional
from urllib.parse import urlparse

from loguru import logger

from core.interfaces.services import IRelayService
from other.config_reader import config
from other.web_tools import HTTPSessionManager, http_session_manager


class LobstrVaultRelay(IRelayService):
    """
    LOBSTR Vault keeps the transaction until the other signers approve it and
    then forwards it to the network.
    """

    def __init__(self, url: Optional[str] = None, session_manager: Optional[HTTPSessionManager] = None):
        self.url = url or config.lobstr_vault_url
        self.session_manager = session_manager or http_session_manager

    @property
    def domain(self) -> str:
        return urlparse(self.url).hostname or self.url

    async def send(self, xdr: str) -> Dict[str, Any]:
        response = await self.session_manager.get_web_request('POST', url=self.url, json={"xdr": xdr})
        logger.debug(f"Vault response: {response.status} {response.data}")

        body = response.data if isinstance(response.data, dict) else {}
        if response.status in (200, 201):
            return {**body, "relayed": True}

        message = body.get("detail") or body.get("message") or body.get("error")
        if not message:
            message = response.data if isinstance(response.data, str) and response.data else response.reason
        return {"status": "error", "message": str(message) if message else None}
