"""
Static configuration: network endpoints, prompt labels, fee budgets and
value amounts for the SFT minter calls.
"""

import os

# ─────────────────────────────────────────────
#  NETWORK
# ─────────────────────────────────────────────

# Algorand Testnet endpoints (free public nodes)
ALGOD_ADDRESS = os.environ.get("ALGOD_ADDRESS", "https://testnet-api.algonode.cloud")
ALGOD_TOKEN   = os.environ.get("ALGOD_TOKEN", "")   # AlgoNode doesn't need a token
EXPLORER_URL  = os.environ.get("EXPLORER_URL", "https://lora.algokit.io/testnet")

# Rounds to wait for confirmation before giving up
WAIT_ROUNDS = 4


# ─────────────────────────────────────────────
#  DEPLOYMENT & WALLET
# ─────────────────────────────────────────────

APP_ID_ENV_VAR   = "SFT_MINTER_APP_ID"
MNEMONIC_ENV_VAR = "SFT_MINTER_MNEMONIC"

# Written by the deploy tool; holds {"sftMinterAppId": <int>}
OUTPUT_FILE        = os.environ.get("SFT_MINTER_OUTPUT_FILE", "output.json")
OUTPUT_APP_ID_KEY  = "sftMinterAppId"
WALLET_FILE        = os.environ.get("SFT_MINTER_WALLET_FILE", "wallet.mnemonic")


# ─────────────────────────────────────────────
#  FEES & VALUES (microAlgos)
# ─────────────────────────────────────────────

# Flat fee budgets; they cover the app call plus its inner transactions
ISSUE_SFT_MINTER_FEE        = 3_000
ASSIGN_ROLES_SFT_MINTER_FEE = 2_000
CREATE_SFT_MINTER_FEE       = 3_000

# Paid to the app account to fund the collection's minimum balance
ISSUE_SFT_MINTER_VALUE = 100_000   # 0.1 ALGO


# ─────────────────────────────────────────────
#  PROMPT LABELS
# ─────────────────────────────────────────────

COLLECTION_TOKEN_NAME_LABEL   = "Enter the name for the collection token (ex. MyTokenName)"
COLLECTION_TOKEN_TICKER_LABEL = "Enter the ticker for the collection token (ex. MYTOKEN)"
SFT_TOKEN_DISPLAY_NAME_LABEL  = "Provide the display name for the SFT token"
MINTER_SELLING_PRICE_LABEL    = "Provide the selling price in ALGO (ex. 0.5)"
METADATA_IPFS_CID_LABEL       = "Provide the metadata IPFS CID (ex. bafybei...)"
METADATA_IPFS_FILE_NAME_LABEL = "Provide the metadata file name on IPFS (ex. metadata.json)"
INITIAL_SFT_SUPPLY_LABEL      = "Provide the initial SFT supply (ex. 1000)"
MINTER_ROYALTIES_LABEL        = "Provide the royalties percentage, optional (0-100, ex. 5.5)"
MINTER_TAGS_LABEL             = "Provide the tags (ex. art,sft)"
LIST_OF_SFT_URIS_LABEL        = "Provide the media URIs, comma separated (ex. ipfs://CID/image.png)"
ARE_YOU_SURE_LABEL            = "Are you sure?"
