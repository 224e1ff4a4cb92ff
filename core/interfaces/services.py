from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict


class IStellarService(ABC):
    @abstractmethod
    async def submit_transaction(self, xdr: str) -> Dict[str, Any]:
        """
        Submit a signed transaction XDR to the Stellar network.
        Horizon rejections are raised as stellar_sdk exceptions.
        """
        pass


class IRelayService(ABC):
    @property
    @abstractmethod
    def domain(self) -> str:
        """Domain the relay is known by, e.g. ``vault.lobstr.co``."""
        pass

    @abstractmethod
    async def send(self, xdr: str) -> Dict[str, Any]:
        """
        Hand a signed transaction XDR to the relay.
        Returns the relay response; transport failures are raised.
        """
        pass
