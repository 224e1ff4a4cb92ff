import asyncio
from typing import Any, Mapping, Optional
from urllib.parse import urlparse

import aiohttp
from loguru import logger

from core.domain.exceptions import TxResultError
from core.domain.value_objects import PreparedTransaction, SubmissionChannel, TxRejected, TxResult, TxValidated
from core.interfaces.services import IRelayService, IStellarService
from core.use_cases.tx_result.build_result import from_response, from_submission
from other.web_tools import HTTPSessionManager, http_session_manager

RELAY_CONFIRMED_FLAG = "relayed"
RELAY_ERROR_STATUSES = ("error", "rejected", "failed")
CALLBACK_FAILED_MESSAGE = "The callback request failed"

TRANSPORT_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError, OSError)


def sent_title(domain: str) -> str:
    return f"The transaction has been sent to {domain}"


def rejected_title(domain: str) -> str:
    return f"{domain} rejected the transaction"


def _url_matches_domain(url: Any, domain: Optional[str]) -> bool:
    if not isinstance(url, str) or not domain:
        return False
    host = urlparse(url).hostname or ""
    return host == domain or host.endswith("." + domain)


def _relay_url(response: Mapping[str, Any]) -> Optional[str]:
    return response.get("url") or response.get("href")


def _relay_message(response: Mapping[str, Any]) -> Optional[str]:
    for key in ("message", "detail", "error"):
        value = response.get(key)
        if isinstance(value, str) and value:
            return value
    return None


def select_channel(prepared: PreparedTransaction, relay_response: Optional[Mapping[str, Any]] = None,
                   relay_domain: Optional[str] = None) -> SubmissionChannel:
    """
    Decides how a submission ended up, first match wins:
    relay confirmation flag, relay URL, relay error, callback url, direct.
    A relay that already answered is never followed by the callback.
    """
    if isinstance(relay_response, Mapping):
        if relay_response.get(RELAY_CONFIRMED_FLAG) is True:
            return SubmissionChannel.RELAY_CONFIRMED
        if _url_matches_domain(_relay_url(relay_response), relay_domain):
            return SubmissionChannel.RELAY_CONFIRMED
        if relay_response.get("status") in RELAY_ERROR_STATUSES or "error" in relay_response:
            return SubmissionChannel.RELAY_REJECTED
    if relay_response is None and prepared.callback_url:
        return SubmissionChannel.CALLBACK
    return SubmissionChannel.DIRECT


def _relay_confirmed(prepared: PreparedTransaction, response: Mapping[str, Any], domain: str) -> TxValidated:
    url = _relay_url(response)
    return TxValidated(
        title=sent_title(domain),
        hash=prepared.hash,
        link=url if _url_matches_domain(url, domain) else None,
    )


def _relay_rejected(response: Mapping[str, Any], domain: str) -> TxRejected:
    message = _relay_message(response)
    return TxRejected(title=rejected_title(domain), errors=(message,) if message else ())


async def _send_to_callback(prepared: PreparedTransaction, session_manager: HTTPSessionManager) -> TxResult:
    host = urlparse(prepared.callback_url).hostname or prepared.callback_url
    try:
        response = await session_manager.get_web_request('POST', url=prepared.callback_url,
                                                         data={"xdr": prepared.xdr})
    except TRANSPORT_ERRORS as ex:
        logger.warning(['callback failed', host, ex])
        return TxRejected(title=rejected_title(host), errors=(str(ex) or CALLBACK_FAILED_MESSAGE,))

    logger.debug(f"Callback response: {response.status} {response.data}")
    if response.status == 200:
        return TxValidated(title=sent_title(host), hash=prepared.hash)
    return TxRejected(title=rejected_title(host), errors=(response.reason or CALLBACK_FAILED_MESSAGE,))


async def from_relay_submission(prepared: PreparedTransaction,
                                relay: Optional[IRelayService] = None,
                                stellar_service: Optional[IStellarService] = None,
                                session_manager: Optional[HTTPSessionManager] = None) -> TxResult:
    """
    Submits a signed transaction through a relay, a callback or Horizon and
    collapses the outcome into a transaction result.

    Relay and callback transport failures come back as rejected results.
    """
    relay_response = None
    relay_domain = None
    if relay is not None:
        relay_domain = relay.domain
        try:
            relay_response = await relay.send(prepared.xdr)
        except TRANSPORT_ERRORS as ex:
            logger.warning(['relay failed', relay_domain, ex])
            return TxRejected(title=rejected_title(relay_domain), errors=(str(ex) or type(ex).__name__,))

    channel = select_channel(prepared, relay_response, relay_domain)
    logger.info(['from_relay_submission', channel.value, relay_domain])

    if channel is SubmissionChannel.RELAY_CONFIRMED:
        return _relay_confirmed(prepared, relay_response, relay_domain)
    if channel is SubmissionChannel.RELAY_REJECTED:
        return _relay_rejected(relay_response, relay_domain)
    if channel is SubmissionChannel.CALLBACK:
        return await _send_to_callback(prepared, session_manager or http_session_manager)
    if relay_response is not None:
        # the relay passed Horizon's answer through
        return from_response(relay_response)
    if stellar_service is None:
        raise TxResultError("Direct submission needs a Stellar service")
    return await from_submission(stellar_service.submit_transaction(prepared.xdr))
