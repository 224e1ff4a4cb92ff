from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from loguru import logger
from stellar_sdk.exceptions import BaseHorizonError

from core.domain.exceptions import InvalidResponseShape


class ResponseKind(Enum):
    SUCCESS = "success"
    REJECTION = "rejection"


@dataclass(frozen=True)
class ClassifiedResponse:
    kind: ResponseKind
    payload: Mapping[str, Any]


def unwrap_response(raw: Any) -> Any:
    """
    Returns the response carried by an exception, or ``raw`` itself.

    stellar_sdk raises ``BaseHorizonError`` subclasses whose attributes hold the
    Horizon problem document; other HTTP clients attach the response under
    ``.response``.
    """
    if isinstance(raw, BaseHorizonError):
        return {
            "status": raw.status,
            "title": raw.title,
            "detail": raw.detail,
            "extras": raw.extras,
        }
    if isinstance(raw, BaseException):
        response = getattr(raw, "response", None)
        if isinstance(response, Mapping):
            return response
    return raw


def get_extras(payload: Mapping[str, Any]):
    extras = payload.get("extras")
    if extras is None:
        data = payload.get("data")
        if isinstance(data, Mapping):
            extras = data.get("extras")
    return extras if isinstance(extras, Mapping) else None


def _has_result_codes(payload: Mapping[str, Any]) -> bool:
    extras = get_extras(payload)
    if extras is None:
        return False
    result_codes = extras.get("result_codes")
    return isinstance(result_codes, Mapping) and isinstance(result_codes.get("transaction"), str)


def classify(raw: Any) -> ClassifiedResponse:
    payload = unwrap_response(raw)

    kind = None
    if isinstance(payload, Mapping):
        tx_hash = payload.get("hash")
        if isinstance(tx_hash, str) and tx_hash:
            kind = ResponseKind.SUCCESS
        elif _has_result_codes(payload):
            kind = ResponseKind.REJECTION

    if kind is not None:
        logger.debug(['classify', kind.value])
        return ClassifiedResponse(kind, payload)

    error = InvalidResponseShape(f"Not a Horizon transaction response: {raw!r}", raw)
    if isinstance(raw, BaseException):
        raise error from raw
    raise error
