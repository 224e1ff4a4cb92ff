from typing import Any, Awaitable, List, Mapping

from loguru import logger

from core.domain.exceptions import InvalidResponseShape
from core.domain.value_objects import CodeBundle, TxRejected, TxResult, TxValidated
from core.use_cases.tx_result.classify_response import ResponseKind, classify, get_extras
from other.config_reader import config
from other.stellar_error_codes import OP_SUCCESS, describe_op_code, describe_tx_code

VALIDATED_TITLE = "The transaction has been validated"
REJECTED_TITLE = "The transaction has been rejected"


def describe_errors(codes: CodeBundle) -> List[str]:
    """
    Human-readable errors for a rejected transaction.

    One "Operation N: ..." line per failed operation, in operation order. When
    no operation failed (or the transaction was rejected before operations
    were evaluated), the transaction code description alone.
    """
    errors = []
    for index, code in enumerate(codes.operation_codes or ()):
        if code != OP_SUCCESS:
            errors.append(f"Operation {index + 1}: {describe_op_code(code)}.")
    if not errors:
        errors.append(describe_tx_code(codes.transaction_code))
    return errors


def _transaction_link(payload: Mapping[str, Any], tx_hash: str) -> str:
    try:
        return payload["_links"]["transaction"]["href"]
    except (KeyError, TypeError):
        return config.transaction_link_base + tx_hash


def _validated(payload: Mapping[str, Any]) -> TxValidated:
    tx_hash = payload["hash"]
    ledger = payload.get("ledger")
    if isinstance(ledger, bool) or not isinstance(ledger, int) or ledger <= 0:
        raise InvalidResponseShape(f"Bad ledger in transaction response: {ledger!r}", payload)
    return TxValidated(
        title=VALIDATED_TITLE,
        hash=tx_hash,
        ledger=ledger,
        offer_metadata=payload.get("offerResults", payload.get("offer_results")),
        link=_transaction_link(payload, tx_hash),
    )


def _rejected(payload: Mapping[str, Any]) -> TxRejected:
    codes = CodeBundle.from_result_codes(get_extras(payload)["result_codes"])
    errors = describe_errors(codes)
    logger.info(['transaction rejected', codes.as_dict()])
    return TxRejected(title=REJECTED_TITLE, errors=tuple(errors), codes=codes)


def from_response(raw: Any) -> TxResult:
    """
    Builds the result of a Horizon submission.

    ``raw`` is whatever the submission produced: the success response, the
    rejection problem document, or the exception raised by the client.
    Raises ``InvalidResponseShape`` for anything else.
    """
    classified = classify(raw)
    if classified.kind is ResponseKind.SUCCESS:
        return _validated(classified.payload)
    if classified.kind is ResponseKind.REJECTION:
        return _rejected(classified.payload)
    raise InvalidResponseShape(f"Unhandled response kind {classified.kind}", raw)


async def from_submission(submission: Awaitable[Any]) -> TxResult:
    """
    Awaits a pending submission and builds its result.

    A failed submission is not propagated: the raised exception is read as
    the response.
    """
    try:
        response = await submission
    except Exception as ex:
        logger.info(['from_submission', type(ex).__name__])
        response = ex
    return from_response(response)
