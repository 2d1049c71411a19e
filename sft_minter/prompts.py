"""
Interactive prompts for the SFT minter flows.

Each flow declares an ordered list of PromptField records. ask_questions()
asks them one by one with click, re-asking a field until its validator
passes. A validator returns True or the message to show the operator.
"""

import math
import re
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

import click
from algosdk.util import algos_to_microalgos

from sft_minter import config

TEXT   = "text"
NUMBER = "number"
LIST   = "list"

Validator = Callable[[Any], Union[bool, str]]

_NAME_RE   = re.compile(r"[a-zA-Z0-9]+")
_TICKER_RE = re.compile(r"[A-Z0-9]+")


@dataclass(frozen=True)
class PromptField:
    name:     str
    label:    str
    kind:     str
    validate: Validator
    round_to: Optional[int] = None   # decimals kept for numbers


# ─────────────────────────────────────────────
#  VALIDATORS
# ─────────────────────────────────────────────
def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        try:
            number = float(str(value).strip())
        except ValueError:
            return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def validate_required(value: Any) -> Union[bool, str]:
    return True if value else "Required!"


def validate_token_name(value: Optional[str]) -> Union[bool, str]:
    if not value:
        return "Required!"
    if len(value) > 20 or len(value) < 3:
        return "Length between 3 and 20 characters!"
    if not _NAME_RE.fullmatch(value):
        return "Alphanumeric characters only!"
    return True


def validate_token_ticker(value: Optional[str]) -> Union[bool, str]:
    if not value:
        return "Required!"
    if len(value) > 10 or len(value) < 3:
        return "Length between 3 and 10 characters!"
    if not _TICKER_RE.fullmatch(value):
        return "Alphanumeric UPPERCASE only!"
    return True


def validate_selling_price(value: Any) -> Union[bool, str]:
    number = _as_number(value)
    # must still be at least 1 microAlgo once converted
    if number is None or number <= 0 or algos_to_microalgos(number) < 1:
        return "Required and min 0!"
    return True


def validate_initial_supply(value: Any) -> Union[bool, str]:
    number = _as_number(value)
    if number is None or number < 1 or not number.is_integer():
        return "Required and min 1!"
    return True


def validate_royalties(value: Any) -> Union[bool, str]:
    """Royalties are optional: empty means omitted."""
    if value is None or value == "":
        return True
    number = _as_number(value)
    if number is None or not 0 <= number <= 100:
        return "Should be a number in range 0-100"
    return True


def validate_uris(value: Optional[list]) -> Union[bool, str]:
    return True if value else "Requires at least one address!"


# ─────────────────────────────────────────────
#  FIELD SETS
# ─────────────────────────────────────────────
ISSUE_COLLECTION_TOKEN_FIELDS = [
    PromptField("token_name",   config.COLLECTION_TOKEN_NAME_LABEL,   TEXT, validate_token_name),
    PromptField("token_ticker", config.COLLECTION_TOKEN_TICKER_LABEL, TEXT, validate_token_ticker),
]

# Order matches build_create_transaction's positional arguments
CREATE_FIELDS = [
    PromptField("display_name",       config.SFT_TOKEN_DISPLAY_NAME_LABEL,  TEXT,   validate_required),
    PromptField("selling_price",      config.MINTER_SELLING_PRICE_LABEL,    NUMBER, validate_selling_price),
    PromptField("metadata_cid",       config.METADATA_IPFS_CID_LABEL,       TEXT,   validate_required),
    PromptField("metadata_file_name", config.METADATA_IPFS_FILE_NAME_LABEL, TEXT,   validate_required),
    PromptField("initial_supply",     config.INITIAL_SFT_SUPPLY_LABEL,      NUMBER, validate_initial_supply),
    PromptField("royalties",          config.MINTER_ROYALTIES_LABEL,        NUMBER, validate_royalties, round_to=2),
    PromptField("tags",               config.MINTER_TAGS_LABEL,             TEXT,   validate_required),
    PromptField("uris",               config.LIST_OF_SFT_URIS_LABEL,        LIST,   validate_uris),
]


# ─────────────────────────────────────────────
#  ENGINE
# ─────────────────────────────────────────────
def parse_answer(field: PromptField, raw: str) -> Any:
    """
    Turn the raw text typed by the operator into the field's value.

    Numbers that can't be parsed come back as the raw text so the
    validator can reject them.
    """
    text = raw.strip()
    if field.kind == LIST:
        return [item.strip() for item in text.split(",") if item.strip()]
    if field.kind == NUMBER:
        if not text:
            return None
        number = _as_number(text)
        if number is None:
            return text
        if field.round_to is not None:
            number = round(number, field.round_to)
        return int(number) if number.is_integer() else number
    return text


def _value_proc(field: PromptField) -> Callable[[str], Any]:
    def convert(raw: str) -> Any:
        value = parse_answer(field, raw)
        outcome = field.validate(value)
        if outcome is not True:
            raise click.BadParameter(str(outcome))
        return value

    return convert


def ask_questions(fields: list[PromptField]) -> Optional[dict[str, Any]]:
    """
    Ask every field in order.

    Returns the answers keyed by field name, or None when the operator
    aborts (Ctrl-C / end of input).
    """
    answers: dict[str, Any] = {}
    try:
        for field in fields:
            answers[field.name] = click.prompt(
                field.label,
                default="",
                show_default=False,
                value_proc=_value_proc(field),
            )
    except click.Abort:
        click.echo()
        return None
    return answers


def are_you_sure() -> bool:
    """Final confirmation gate; anything but an explicit yes declines."""
    try:
        return click.confirm(config.ARE_YOU_SURE_LABEL, default=False)
    except click.Abort:
        click.echo()
        return False
