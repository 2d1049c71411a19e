"""
Resolves the deployed SFT minter app and binds it to the operator's
account, signer and algod client.
"""

import json
import logging
import os
from pathlib import Path
from typing import NamedTuple

from algosdk import account, error, mnemonic
from algosdk.atomic_transaction_composer import AccountTransactionSigner
from algosdk.v2client import algod

from sft_minter import config
from sft_minter.contract import SftMinterContract
from sft_minter.errors import SetupError

log = logging.getLogger(__name__)


class SftSession(NamedTuple):
    contract: SftMinterContract
    account: str
    signer: AccountTransactionSigner
    provider: algod.AlgodClient


# ─────────────────────────────────────────────
#  CLIENTS
# ─────────────────────────────────────────────
def get_algod() -> algod.AlgodClient:
    return algod.AlgodClient(config.ALGOD_TOKEN, config.ALGOD_ADDRESS)


# ─────────────────────────────────────────────
#  APP ID
# ─────────────────────────────────────────────
def resolve_app_id() -> int:
    """
    Find the SFT minter app id.

    Looks at the SFT_MINTER_APP_ID env variable first, then at the output
    file written by the deploy tool.

    Raises:
        SetupError: when neither source holds a valid app id
    """
    raw = os.environ.get(config.APP_ID_ENV_VAR)
    source = config.APP_ID_ENV_VAR

    if not raw:
        output = Path(config.OUTPUT_FILE)
        if output.is_file():
            try:
                data = json.loads(output.read_text(encoding="utf-8"))
            except json.JSONDecodeError as e:
                raise SetupError(f"Can't read {output}: {e}") from e
            if isinstance(data, dict):
                raw = data.get(config.OUTPUT_APP_ID_KEY)
            source = str(output)

    if raw is None or raw == "":
        raise SetupError(
            "No SFT minter app id found. Deploy the contract first or "
            f"set {config.APP_ID_ENV_VAR}."
        )

    try:
        app_id = int(raw)
    except (TypeError, ValueError):
        raise SetupError(f"Invalid app id {raw!r} in {source}") from None
    if app_id <= 0:
        raise SetupError(f"Invalid app id {app_id} in {source}")

    log.debug("Using app id %s from %s", app_id, source)
    return app_id


# ─────────────────────────────────────────────
#  ACCOUNT
# ─────────────────────────────────────────────
def load_account() -> tuple[str, str]:
    """
    Load the operator account from a mnemonic.

    Reads SFT_MINTER_MNEMONIC, falling back to the wallet file.
    Returns (private_key, address)
    """
    mn = os.environ.get(config.MNEMONIC_ENV_VAR)
    if not mn:
        wallet = Path(config.WALLET_FILE)
        if not wallet.is_file():
            raise SetupError(
                f"No {config.MNEMONIC_ENV_VAR} set and no {wallet} file found. "
                "Provide the 25-word mnemonic of the operator account."
            )
        mn = wallet.read_text(encoding="utf-8")

    try:
        private_key = mnemonic.to_private_key(" ".join(mn.split()))
    except (KeyError, ValueError, error.WrongChecksumError, error.WrongMnemonicLengthError) as e:
        raise SetupError(f"Invalid wallet mnemonic: {e}") from e
    address = account.address_from_private_key(private_key)
    return private_key, address


def setup_sft_sc(app_id: int) -> SftSession:
    """Bind the SFT minter app to the operator's account and an algod client."""
    private_key, address = load_account()
    log.debug("Operator account %s", address)
    return SftSession(
        contract=SftMinterContract(app_id),
        account=address,
        signer=AccountTransactionSigner(private_key),
        provider=get_algod(),
    )
