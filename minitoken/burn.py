import logging

from minitoken.allowance import spend_allowance
from minitoken.amount import ZERO, checked_sub
from minitoken.errors import AmountMustBeHigherThanZero, InvalidBalance
from minitoken.result import NewState

logger = logging.getLogger(__name__)


def _destroy(state, holder, amount):
    balance = state.get_balance(holder)
    if balance < amount:
        raise InvalidBalance(balance)

    state.set_balance(holder, checked_sub(balance, amount))
    state.total_supply = checked_sub(state.total_supply, amount)


def burn(state, context, amount):
    """Destroy amount of the caller's own balance."""
    logger.debug("token burn caller %s", context.caller)
    logger.debug("token burn transaction owner %s", context.transaction_owner)

    if amount == ZERO:
        raise AmountMustBeHigherThanZero()

    caller = context.resolve_caller()

    new_state = state.copy()
    _destroy(new_state, caller, amount)
    return NewState(new_state)


def burn_from(state, context, from_, amount):
    """Destroy amount of `from_`'s balance, spending the caller's allowance unless caller is `from_`."""
    logger.debug("token burn_from caller %s", context.caller)
    logger.debug("token burn_from transaction owner %s", context.transaction_owner)

    if amount == ZERO:
        raise AmountMustBeHigherThanZero()

    caller = context.resolve_caller()

    new_state = state.copy()
    if caller != from_:
        spend_allowance(new_state, from_, caller, amount)

    _destroy(new_state, from_, amount)
    return NewState(new_state)
