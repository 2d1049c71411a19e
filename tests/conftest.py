import pytest
from algosdk import account
from algosdk.atomic_transaction_composer import AccountTransactionSigner

from sft_minter.contract import SftMinterContract


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """No real deployment output, wallet or env overrides leak into tests."""
    monkeypatch.delenv("SFT_MINTER_APP_ID", raising=False)
    monkeypatch.delenv("SFT_MINTER_MNEMONIC", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def contract():
    return SftMinterContract(1234)


@pytest.fixture
def operator():
    private_key, address = account.generate_account()
    return private_key, address, AccountTransactionSigner(private_key)
