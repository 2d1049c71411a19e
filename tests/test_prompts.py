import click
import pytest
from click.testing import CliRunner

from sft_minter import prompts
from sft_minter.prompts import (
    CREATE_FIELDS,
    ISSUE_COLLECTION_TOKEN_FIELDS,
    are_you_sure,
    ask_questions,
    parse_answer,
    validate_initial_supply,
    validate_royalties,
    validate_selling_price,
    validate_token_name,
    validate_token_ticker,
    validate_uris,
)


# ─────────────────────────────────────────────
#  VALIDATORS
# ─────────────────────────────────────────────
@pytest.mark.parametrize("name", ["abc", "MyToken1", "a" * 20, "ABC123xyz"])
def test_token_name_accepts(name):
    assert validate_token_name(name) is True


@pytest.mark.parametrize(
    "name, message",
    [
        ("", "Required!"),
        (None, "Required!"),
        ("AB", "Length between 3 and 20 characters!"),
        ("a" * 21, "Length between 3 and 20 characters!"),
        ("My Token", "Alphanumeric characters only!"),
        ("token-1", "Alphanumeric characters only!"),
        ("tökén", "Alphanumeric characters only!"),
        ("ab\n", "Alphanumeric characters only!"),
    ],
)
def test_token_name_rejects(name, message):
    assert validate_token_name(name) == message


@pytest.mark.parametrize("ticker", ["ABC", "MYTOKEN1", "A" * 10, "123"])
def test_token_ticker_accepts(ticker):
    assert validate_token_ticker(ticker) is True


@pytest.mark.parametrize(
    "ticker, message",
    [
        ("", "Required!"),
        ("AB", "Length between 3 and 10 characters!"),
        ("A" * 11, "Length between 3 and 10 characters!"),
        ("MyToken", "Alphanumeric UPPERCASE only!"),
        ("MY-TKN", "Alphanumeric UPPERCASE only!"),
        ("ABC\n", "Alphanumeric UPPERCASE only!"),
    ],
)
def test_token_ticker_rejects(ticker, message):
    assert validate_token_ticker(ticker) == message


@pytest.mark.parametrize("price", [0.000001, 0.5, 1, 250, "3.5"])
def test_selling_price_accepts_positive(price):
    assert validate_selling_price(price) is True


@pytest.mark.parametrize("price", [0, -1, -0.5, None, "", "abc", "nan", float("inf"), 0.0000004, "0.0000004"])
def test_selling_price_rejects(price):
    assert validate_selling_price(price) == "Required and min 0!"


@pytest.mark.parametrize("supply", [1, 2, 1000, "7"])
def test_initial_supply_accepts(supply):
    assert validate_initial_supply(supply) is True


@pytest.mark.parametrize("supply", [0, -5, 0.5, 1.5, None, "x"])
def test_initial_supply_rejects(supply):
    assert validate_initial_supply(supply) == "Required and min 1!"


@pytest.mark.parametrize("royalties", [None, "", 0, 5.5, 100, 99.99])
def test_royalties_accepts_range_or_empty(royalties):
    assert validate_royalties(royalties) is True


@pytest.mark.parametrize("royalties", [-0.01, 100.01, 150, "abc"])
def test_royalties_rejects_out_of_range(royalties):
    assert validate_royalties(royalties) == "Should be a number in range 0-100"


def test_uris_require_one_entry():
    assert validate_uris([]) == "Requires at least one address!"
    assert validate_uris(None) == "Requires at least one address!"
    assert validate_uris(["ipfs://a"]) is True
    assert validate_uris(["ipfs://a", "https://b"]) is True


# ─────────────────────────────────────────────
#  PARSING
# ─────────────────────────────────────────────
def _field(name):
    return next(f for f in CREATE_FIELDS if f.name == name)


def test_parse_list_splits_and_drops_blanks():
    uris = _field("uris")
    assert parse_answer(uris, " ipfs://a , https://b ,, ") == ["ipfs://a", "https://b"]
    assert parse_answer(uris, "") == []


def test_parse_numbers():
    assert parse_answer(_field("initial_supply"), "1000") == 1000
    assert parse_answer(_field("selling_price"), "0.05") == 0.05
    assert parse_answer(_field("royalties"), "") is None
    assert parse_answer(_field("royalties"), "5.5") == 5.5
    assert parse_answer(_field("royalties"), "12.345678") == pytest.approx(12.35)
    assert parse_answer(_field("selling_price"), "abc") == "abc"


def test_parse_text_is_stripped():
    assert parse_answer(_field("tags"), "  art,sft ") == "art,sft"


def test_field_order_matches_create_builder():
    assert [f.name for f in CREATE_FIELDS] == [
        "display_name",
        "selling_price",
        "metadata_cid",
        "metadata_file_name",
        "initial_supply",
        "royalties",
        "tags",
        "uris",
    ]


# ─────────────────────────────────────────────
#  ENGINE
# ─────────────────────────────────────────────
def test_ask_questions_reprompts_until_valid():
    runner = CliRunner()
    with runner.isolation(input="AB\nMyToken1\nmytoken\nMYTOKEN1\n") as streams:
        answers = ask_questions(ISSUE_COLLECTION_TOKEN_FIELDS)
        output = streams[0].getvalue().decode()

    assert answers == {"token_name": "MyToken1", "token_ticker": "MYTOKEN1"}
    assert "Length between 3 and 20 characters!" in output
    assert "Alphanumeric UPPERCASE only!" in output


def test_ask_questions_collects_create_answers():
    runner = CliRunner()
    typed = "My SFT\n0.5\nbafybeic\nmetadata.json\n0\n1000\n\nart,sft\n\nipfs://a\n"
    with runner.isolation(input=typed) as streams:
        answers = ask_questions(CREATE_FIELDS)
        output = streams[0].getvalue().decode()

    assert answers == {
        "display_name": "My SFT",
        "selling_price": 0.5,
        "metadata_cid": "bafybeic",
        "metadata_file_name": "metadata.json",
        "initial_supply": 1000,
        "royalties": None,
        "tags": "art,sft",
        "uris": ["ipfs://a"],
    }
    assert "Required and min 1!" in output
    assert "Requires at least one address!" in output


def test_ask_questions_returns_none_on_abort(monkeypatch):
    def interrupted(*args, **kwargs):
        raise click.Abort()

    monkeypatch.setattr(prompts.click, "prompt", interrupted)
    assert ask_questions(ISSUE_COLLECTION_TOKEN_FIELDS) is None


@pytest.mark.parametrize("typed, expected", [("y\n", True), ("yes\n", True), ("n\n", False), ("\n", False)])
def test_are_you_sure(typed, expected):
    with CliRunner().isolation(input=typed):
        assert are_you_sure() is expected


def test_are_you_sure_declines_on_abort(monkeypatch):
    def interrupted(*args, **kwargs):
        raise click.Abort()

    monkeypatch.setattr(prompts.click, "confirm", interrupted)
    assert are_you_sure() is False
