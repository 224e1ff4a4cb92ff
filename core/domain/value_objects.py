from dataclasses import dataclass, replace
from enum import Enum
from functools import cached_property
from typing import Any, Mapping, Optional, Tuple, Union

from stellar_sdk import FeeBumpTransactionEnvelope, TransactionEnvelope


class SubmissionChannel(Enum):
    DIRECT = "direct"
    RELAY_CONFIRMED = "relay_confirmed"
    RELAY_REJECTED = "relay_rejected"
    CALLBACK = "callback"


@dataclass(frozen=True)
class CodeBundle:
    transaction_code: str
    operation_codes: Optional[Tuple[str, ...]] = None

    @classmethod
    def from_result_codes(cls, result_codes: Mapping[str, Any]) -> "CodeBundle":
        """Build from Horizon ``extras.result_codes``."""
        operations = result_codes.get("operations")
        return cls(
            transaction_code=result_codes["transaction"],
            operation_codes=None if operations is None else tuple(operations),
        )

    def as_dict(self) -> dict:
        result = {"transaction": self.transaction_code}
        if self.operation_codes is not None:
            result["operations"] = list(self.operation_codes)
        return result


@dataclass(frozen=True)
class TxValidated:
    title: str
    hash: str
    ledger: Optional[int] = None
    offer_metadata: Any = None
    link: Optional[str] = None

    def __post_init__(self):
        if not self.hash:
            raise ValueError("validated result needs a transaction hash")
        if self.ledger is not None and self.ledger <= 0:
            raise ValueError(f"ledger must be positive, got {self.ledger}")

    @property
    def validated(self) -> bool:
        return True


@dataclass(frozen=True)
class TxRejected:
    title: str
    errors: Tuple[str, ...] = ()
    codes: Optional[CodeBundle] = None

    def __post_init__(self):
        # lists are accepted and frozen
        object.__setattr__(self, "errors", tuple(self.errors))

    @property
    def validated(self) -> bool:
        return False

    def with_error(self, message: str) -> "TxRejected":
        return replace(self, errors=self.errors + (message,))


TxResult = Union[TxValidated, TxRejected]


@dataclass(frozen=True)
class PreparedTransaction:
    """A signed transaction ready to be handed to Horizon, a relay or a callback."""
    xdr: str
    network_passphrase: str
    callback_url: Optional[str] = None

    @cached_property
    def envelope(self) -> Union[TransactionEnvelope, FeeBumpTransactionEnvelope]:
        if FeeBumpTransactionEnvelope.is_fee_bump_transaction_envelope(self.xdr):
            return FeeBumpTransactionEnvelope.from_xdr(self.xdr, self.network_passphrase)
        return TransactionEnvelope.from_xdr(self.xdr, self.network_passphrase)

    @property
    def hash(self) -> str:
        return self.envelope.hash_hex()
