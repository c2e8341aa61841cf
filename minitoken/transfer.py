import logging

from minitoken.allowance import spend_allowance
from minitoken.amount import ZERO, checked_add, checked_sub
from minitoken.errors import AmountMustBeHigherThanZero, CallerBalanceNotEnough
from minitoken.result import NewState

logger = logging.getLogger(__name__)


def _move(state, source, target, amount):
    source_balance = state.get_balance(source)
    if source_balance < amount:
        raise CallerBalanceNotEnough(source_balance)

    state.set_balance(source, checked_sub(source_balance, amount))
    # Read after the debit so that source == target nets to zero
    state.set_balance(target, checked_add(state.get_balance(target), amount))


def transfer(state, context, to, amount):
    """Move amount from the caller's balance to `to`."""
    logger.debug("token transfer caller %s", context.caller)
    logger.debug("token transfer transaction owner %s", context.transaction_owner)

    if amount == ZERO:
        raise AmountMustBeHigherThanZero()

    caller = context.resolve_caller()

    new_state = state.copy()
    _move(new_state, caller, to, amount)
    return NewState(new_state)


def transfer_from(state, context, from_, to, amount):
    """
    Move amount from `from_` to `to` on behalf of the caller.

    Unless the caller is `from_`, the caller's allowance on `from_` is
    spent first, so a short allowance is reported before a short balance.
    """
    logger.debug("token transfer_from caller %s", context.caller)
    logger.debug("token transfer_from transaction owner %s", context.transaction_owner)

    if amount == ZERO:
        raise AmountMustBeHigherThanZero()

    caller = context.resolve_caller()

    new_state = state.copy()
    if caller != from_:
        spend_allowance(new_state, from_, caller, amount)

    _move(new_state, from_, to, amount)
    return NewState(new_state)
