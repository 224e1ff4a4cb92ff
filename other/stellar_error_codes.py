# Mapping of Stellar Horizon result codes to human-readable English messages.
# Keys are stored without the "tx_" / "op_" prefix.
from types import MappingProxyType
from typing import Mapping

OP_SUCCESS = "op_success"

TRANSACTION_CODE_DESCRIPTIONS: Mapping[str, str] = MappingProxyType({
    "failed": "The transaction failed",
    "too_early": "The transaction is not valid yet",
    "too_late": "The transaction is not valid anymore",
    "missing_operation": "The transaction does not have any operation",
    "bad_seq": "The transaction sequence number is invalid",
    "bad_auth": "The transaction doesn't have enough signatures",
    "insufficient_balance": "There are not enough funds to pay for the transaction fees",
    "no_account": "The source account does not exist",
    "no_source_account": "The source account does not exist",
    "insufficient_fee": "The transaction fees are too small",
    "bad_auth_extra": "The transaction has too many signatures",
    "internal_error": "An unknown error occurred",
    "success": "The transaction has been validated",
    "fee_bump_inner_success": "The fees have been bumped",
    "fee_bump_inner_failed": "The fees failed to get bumped",
    "not_supported": "This transaction type is not supported",
    "bad_sponsorship": "The sponsorship is not confirmed",
    "bad_min_seq_age_or_gap": "The transaction minimum sequence age or gap is not met",
    "malformed": "The transaction is malformed",
    "soroban_invalid": "The smart contract transaction is invalid",
})

OPERATION_CODE_DESCRIPTIONS: Mapping[str, str] = MappingProxyType({
    # Generic
    "success": "The operation has been validated",
    "not_supported": "This feature is not supported anymore",
    "bad_auth": "The operation doesn't have enough signatures",
    "no_account": "The source account of the operation does not exist",
    "no_source_account": "The source account of the operation does not exist",
    "too_many_subentries": "The source has too many subentries",
    "exceeded_work_limit": "The operation did too much work",
    "too_many_sponsoring": "The account is sponsoring too many entries",
    # Create account
    "malformed": "The operation has invalid inputs",
    "underfunded": "The source does not have enough funds",
    "low_reserve": "The source does not have enough funds to pay for reserve fee",
    "already_exist": "The destination account already exists",
    "already_exists": "The destination account already exists",
    # Payment
    "src_no_trust": "The source does not trust this asset",
    "src_not_authorized": "The source is not authorized to send this asset",
    "no_destination": "The destination does not exist",
    "no_trust": "The destination does not trust this asset",
    "not_authorized": "The destination is not authorized to receive this asset",
    "line_full": "The trust limit for this asset is too low",
    "no_issuer": "The issuer of the asset does not exist",
    # Path payments
    "too_few_offers": "There is no path connecting `send asset` to `destination asset`",
    "offer_cross_self": "The source would cross its own offer",
    "cross_self": "The source would cross its own offer",
    "under_destmin": "The destination amount would be under the requested minimum",
    "over_sendmax": "The send amount would be over the requested maximum",
    # Offers
    "sell_no_trust": "The source does not trust `selling asset`",
    "buy_no_trust": "The source does not trust `buying asset`",
    "buy_not_authorized": "The source is not authorized to buy this asset",
    "sell_not_authorized": "The source is not authorized to sell this asset",
    "sell_no_issuer": "The issuer of `selling asset` does not exist",
    "buy_no_issuer": "The issuer of `buying asset` does not exist",
    "offer_not_found": "There is no offer with that `offerId`",
    # Set options
    "too_many_signers": "The source already has the maximum of 20 signers",
    "too_may_signers": "The source already has the maximum of 20 signers",
    "bad_flags": "The flags set and/or cleared are invalid by themselves or in combination",
    "invalid_inflation": "The inflation destination does not exist",
    "options_cant_change": "The source can no longer change this option",
    "unknown_flag": "This flag is unknown",
    "threshold_out_of_range": "The value of a key weight or threshold is out of range",
    "bad_signer": "The master key cannot be added as an additional signer",
    "invalid_home_domain": "The home domain is malformed",
    "auth_revocable_required": "The `auth_revocable` flag is required for clawback",
    # Change trust
    "invalid_limit": "The limit is too low for the current balance and liabilities",
    "self_not_allowed": "The source already trust its own asset",
    "cannot_delete": "The trustline cannot be deleted",
    "not_auth_maintain_liabilities": "The asset is not authorized to maintain liabilities",
    # Allow trust
    "no_trust_line": "The target account does not trust the source",
    "trust_not_required": "The source has not set the `auth_required` flag",
    "trust_cant_revoke": "The source is not allowed to revoke this trustline",
    "cant_revoke": "The source is not allowed to revoke this trustline",
    # Account merge
    "immutable_set": "The source has the `auth_immutable` flag set",
    "has_sub_entries": "The source account still has opened trustlines or offers",
    "seqnum_too_far": "The source sequence number is too high",
    "merge_seqnum_too_far": "The source sequence number is too high",
    "dest_full": "The destination cannot receive the source Lumens",
    "merge_dest_full": "The destination cannot receive the source Lumens",
    "is_sponsor": "The source account is sponsoring other entries",
    # Inflation
    "not_time": "Inflation can only run once a week",
    # Manage data
    "not_supported_yet": "The network does not support this feature yet",
    "not_found": "The entry does not exist",
    "invalid_name": "The data entry name is not valid",
    # Bump sequence
    "bad_seq": "The sequence number is invalid",
    # Claimable balances
    "cannot_claim": "The claimable balance cannot be claimed by the source",
    "does_not_exist": "The claimable balance does not exist",
    "not_issuer": "The source is not the issuer of the asset",
    # Sponsorship
    "already_sponsored": "The account is already sponsored",
    "recursive": "The sponsorship is recursive",
    "only_transferable": "Only the sponsorship of this entry can be transferred",
    "not_sponsor": "The source is not the sponsor of this entry",
    "not_clawback_enabled": "Clawback is not enabled for this asset",
    # Liquidity pools
    "bad_price": "The price is out of the accepted bounds",
    "pool_full": "The liquidity pool is full",
    "under_minimum": "The amount would be under the requested minimum",
    "low_reserves": "The liquidity pool does not have enough reserves",
    # Soroban
    "trapped": "The smart contract execution failed",
    "resource_limit_exceeded": "The smart contract exceeded its resource limits",
    "entry_archived": "The smart contract entry is archived",
    "insufficient_refundable_fee": "The refundable fee is too small",
})


def describe_code(dictionary: Mapping[str, str], code) -> str:
    """
    Returns the description of a prefixed result code from ``dictionary``.

    Codes missing from the table (newer network versions) degrade to an
    "unknown error" message that carries the original code.
    """
    code = str(code)
    description = dictionary.get(code[3:])
    if description is None:
        return f"An unknown error occurred: {code}"
    return description


def describe_tx_code(code: str) -> str:
    """Description of a transaction result code, e.g. ``tx_bad_seq``."""
    return describe_code(TRANSACTION_CODE_DESCRIPTIONS, code)


def describe_op_code(code: str) -> str:
    """Description of an operation result code, e.g. ``op_underfunded``."""
    return describe_code(OPERATION_CODE_DESCRIPTIONS, code)
