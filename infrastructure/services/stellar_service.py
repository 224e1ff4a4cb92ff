from typing import Any, Dict, Optional

from loguru import logger
from stellar_sdk import AiohttpClient, FeeBumpTransactionEnvelope, ServerAsync, TransactionEnvelope

from core.interfaces.services import IStellarService
from other.config_reader import config


class StellarService(IStellarService):
    def __init__(self, horizon_url: Optional[str] = None, network_passphrase: Optional[str] = None):
        self.horizon_url = horizon_url or config.horizon_url
        self.network_passphrase = network_passphrase or config.network_passphrase

    def _parse_envelope(self, xdr: str):
        if FeeBumpTransactionEnvelope.is_fee_bump_transaction_envelope(xdr):
            return FeeBumpTransactionEnvelope.from_xdr(xdr, network_passphrase=self.network_passphrase)
        return TransactionEnvelope.from_xdr(xdr, network_passphrase=self.network_passphrase)

    async def submit_transaction(self, xdr: str) -> Dict[str, Any]:
        transaction = self._parse_envelope(xdr)
        async with ServerAsync(horizon_url=self.horizon_url, client=AiohttpClient()) as server:
            logger.info(['submit_transaction', transaction.hash_hex()])
            response = await server.submit_transaction(transaction)
            return response
