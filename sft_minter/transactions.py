"""
Transaction builders for the three SFT minter calls, and the submit
sequence they all share.

Builders are pure: they only describe the call. Signing, fees and
broadcasting happen in common_tx_operations().
"""

import copy
import logging
from dataclasses import dataclass
from typing import Any, Optional

from algosdk import abi
from algosdk.atomic_transaction_composer import (
    AccountTransactionSigner,
    AtomicTransactionComposer,
    AtomicTransactionResponse,
    TransactionWithSigner,
)
from algosdk.transaction import PaymentTxn
from algosdk.util import algos_to_microalgos
from algosdk.v2client import algod
from rich.console import Console

from sft_minter import config
from sft_minter.contract import SftMinterContract

log = logging.getLogger(__name__)

console = Console(highlight=False)


@dataclass(frozen=True)
class SftTransaction:
    """An SFT minter app call, ready to be signed and sent."""

    app_id:      int
    app_address: str
    method:      abi.Method
    args:        tuple
    fee:         int        # flat fee in microAlgos
    value:       int = 0    # payment to the app account, microAlgos


# ─────────────────────────────────────────────
#  BUILDERS
# ─────────────────────────────────────────────
def build_issue_transaction(
    contract: SftMinterContract,
    fee: int,
    value: int,
    token_name: str,
    token_ticker: str,
) -> SftTransaction:
    """Issue the collection token, paying `value` microAlgos to the app."""
    return SftTransaction(
        app_id      = contract.app_id,
        app_address = contract.app_address,
        method      = contract.method("issue_token"),
        args        = (token_name.strip(), token_ticker.strip()),
        fee         = fee,
        value       = value,
    )


# For now only the minting role, more will come with contract improvements
def build_assign_roles_transaction(contract: SftMinterContract, fee: int) -> SftTransaction:
    return SftTransaction(
        app_id      = contract.app_id,
        app_address = contract.app_address,
        method      = contract.method("set_local_roles"),
        args        = (),
        fee         = fee,
    )


def build_create_transaction(
    contract: SftMinterContract,
    fee: int,
    display_name: str,
    selling_price: float,
    metadata_cid: str,
    metadata_file_name: str,
    initial_supply: int,
    royalties: Optional[float],
    tags: str,
    uris: list[str],
) -> SftTransaction:
    """
    Create a new SFT instance with its metadata attached.

    Args:
        selling_price:  Price per unit in ALGO
        initial_supply: Number of units minted to the app
        royalties:      Royalty percentage (5.5 = 5.5%), None when omitted
        tags:           Comma separated tags, stored as given
        uris:           Media URIs, at least one
    """
    # (has_royalties, royalty_bps)
    royalty_arg = [False, 0] if royalties is None else [True, round(royalties * 100)]

    return SftTransaction(
        app_id      = contract.app_id,
        app_address = contract.app_address,
        method      = contract.method("create_token"),
        args        = (
            display_name.strip(),
            algos_to_microalgos(selling_price),
            metadata_cid.strip(),
            metadata_file_name.strip(),
            int(initial_supply),
            royalty_arg,
            tags.strip(),
            [uri.strip() for uri in uris],
        ),
        fee         = fee,
    )


# ─────────────────────────────────────────────
#  SUBMIT
# ─────────────────────────────────────────────
def common_tx_operations(
    tx: SftTransaction,
    account: str,
    signer: AccountTransactionSigner,
    provider: algod.AlgodClient,
) -> AtomicTransactionResponse:
    """
    Sign, send and wait for an SFT minter call.

    Any SDK error (rejected call, node error, confirmation timeout)
    propagates to the caller.
    """
    sp = provider.suggested_params()

    call_sp = copy.copy(sp)
    call_sp.flat_fee = True
    call_sp.fee      = tx.fee

    method_args: list[Any] = list(tx.args)
    if tx.value > 0:
        payment_txn = PaymentTxn(
            sender=account,
            sp=sp,
            receiver=tx.app_address,
            amt=tx.value,
        )
        method_args.append(TransactionWithSigner(txn=payment_txn, signer=signer))

    atc = AtomicTransactionComposer()
    atc.add_method_call(
        app_id=tx.app_id,
        method=tx.method,
        sender=account,
        sp=call_sp,
        signer=signer,
        method_args=method_args,
    )

    log.debug("Submitting %s to app %s (fee %s, value %s)", tx.method.name, tx.app_id, tx.fee, tx.value)
    with console.status("Processing the transaction..."):
        result = atc.execute(provider, config.WAIT_ROUNDS)

    tx_id = result.tx_ids[-1]
    console.print(f"✅ Transaction confirmed in round {result.confirmed_round}")
    console.print(f"   Tx: {tx_id}")
    console.print(f"   View on explorer: {config.EXPLORER_URL}/transaction/{tx_id}")

    return_value = result.abi_results[-1].return_value if result.abi_results else None
    if return_value is not None:
        console.print(f"   Returned: {return_value}")
    return result
