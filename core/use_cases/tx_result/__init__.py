from core.use_cases.tx_result.build_result import describe_errors, from_response, from_submission
from core.use_cases.tx_result.classify_response import ResponseKind, classify
from core.use_cases.tx_result.relay_submission import from_relay_submission, select_channel
from other.stellar_error_codes import describe_op_code, describe_tx_code

__all__ = [
    "ResponseKind",
    "classify",
    "describe_errors",
    "describe_op_code",
    "describe_tx_code",
    "from_relay_submission",
    "from_response",
    "from_submission",
    "select_channel",
]
