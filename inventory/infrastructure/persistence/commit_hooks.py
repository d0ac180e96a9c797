"""Callbacks that run only once the session's transaction commits.

Repositories queue validation-store updates here so the process-wide
reference sets change together with the database. Callbacks queued in a
transaction that ends any other way (rollback, close) are dropped.
"""

import logging
from collections.abc import Callable
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session, SessionTransaction

logger = logging.getLogger(__name__)

_PENDING_KEY = "inventory.after_commit"


def run_after_commit(session: AsyncSession | Session, callback: Callable[[], Any]) -> None:
    """Queue callback to run after the current transaction on session commits."""
    session.info.setdefault(_PENDING_KEY, []).append(callback)


def pending_after_commit(session: AsyncSession | Session) -> int:
    return len(session.info.get(_PENDING_KEY, ()))


@event.listens_for(Session, "after_commit")
def _run_pending(session: Session) -> None:
    callbacks = session.info.pop(_PENDING_KEY, [])
    for callback in callbacks:
        callback()


@event.listens_for(Session, "after_transaction_end")
def _drop_pending(session: Session, transaction: SessionTransaction) -> None:
    # after_commit has already drained the queue for committed transactions
    if transaction.parent is not None:
        return
    dropped = session.info.pop(_PENDING_KEY, None)
    if dropped:
        logger.debug("Dropped %d store update(s) from an uncommitted transaction", len(dropped))
