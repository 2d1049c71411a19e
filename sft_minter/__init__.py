"""
SFT Minter CLI: issue, configure and mint semi-fungible tokens through
an Algorand SFT minter application.
"""

__version__ = "0.1.0"
