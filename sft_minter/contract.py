"""
ARC-4 interface of the SFT minter application and the handle the
transaction builders work against.
"""

from dataclasses import dataclass, field

from algosdk import abi, logic


SFT_MINTER_METHODS = [
    # Issue the collection token; the payment funds its minimum balance.
    # Returns the collection asset id.
    "issue_token(string,string,pay)uint64",
    # Grant the app the minting role on the collection
    "set_local_roles()void",
    # name, price, cid, file name, supply, (has royalties, royalty bps), tags, uris
    "create_token(string,uint64,string,string,uint64,(bool,uint64),string,string[])uint64",
]


def sft_minter_contract() -> abi.Contract:
    return abi.Contract(
        "SftMinter",
        [abi.Method.from_signature(sig) for sig in SFT_MINTER_METHODS],
        desc="Issue an SFT collection and mint SFT instances with metadata",
    )


@dataclass(frozen=True)
class SftMinterContract:
    """A deployed SFT minter application."""

    app_id: int
    abi_contract: abi.Contract = field(default_factory=sft_minter_contract, compare=False)

    @property
    def app_address(self) -> str:
        return logic.get_application_address(self.app_id)

    def method(self, name: str) -> abi.Method:
        return self.abi_contract.get_method_by_name(name)
