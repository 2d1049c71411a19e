"""
One flow per subcommand: prompt, confirm, bind the session, build the
call and submit it. Any error ends the flow with its message printed;
nothing is retried.
"""

import enum
import logging
from typing import Any, Callable

import click

from sft_minter import config
from sft_minter.prompts import (
    CREATE_FIELDS,
    ISSUE_COLLECTION_TOKEN_FIELDS,
    PromptField,
    are_you_sure,
    ask_questions,
)
from sft_minter.session import resolve_app_id, setup_sft_sc
from sft_minter.transactions import (
    SftTransaction,
    build_assign_roles_transaction,
    build_create_transaction,
    build_issue_transaction,
    common_tx_operations,
)

log = logging.getLogger(__name__)


class FlowResult(enum.Enum):
    DONE    = "done"
    ABORTED = "aborted"
    FAILED  = "failed"


def _run_flow(
    fields: list[PromptField],
    builder: Callable[..., SftTransaction],
    *fixed_args: Any,
) -> FlowResult:
    """
    Shared flow: collect answers, confirm, then submit.

    Answers are handed to the builder positionally in field order,
    after the contract handle and `fixed_args`.
    """
    try:
        app_id = resolve_app_id()

        answers = ask_questions(fields) if fields else {}
        if answers is None or not are_you_sure():
            log.debug("Flow aborted by the operator")
            return FlowResult.ABORTED

        session = setup_sft_sc(app_id)
        tx = builder(session.contract, *fixed_args, *(answers[f.name] for f in fields))
        common_tx_operations(tx, session.account, session.signer, session.provider)
    except Exception as e:
        log.debug("Flow failed", exc_info=True)
        click.echo(f"❌ {str(e) or type(e).__name__}")
        return FlowResult.FAILED
    return FlowResult.DONE


# ─────────────────────────────────────────────
#  FLOWS
# ─────────────────────────────────────────────
def issue_collection_token() -> FlowResult:
    """Issue the collection token the SFT instances will be minted under."""
    return _run_flow(
        ISSUE_COLLECTION_TOKEN_FIELDS,
        build_issue_transaction,
        config.ISSUE_SFT_MINTER_FEE,
        config.ISSUE_SFT_MINTER_VALUE,
    )


def set_local_roles() -> FlowResult:
    """Give the contract the minting role on the collection."""
    return _run_flow([], build_assign_roles_transaction, config.ASSIGN_ROLES_SFT_MINTER_FEE)


def create() -> FlowResult:
    """Mint a new SFT instance with its metadata."""
    return _run_flow(CREATE_FIELDS, build_create_transaction, config.CREATE_SFT_MINTER_FEE)
