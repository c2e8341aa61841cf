import logging

from minitoken.amount import checked_sub
from minitoken.errors import CallerAllowanceNotEnough
from minitoken.result import NewState

logger = logging.getLogger(__name__)


def spend_allowance(state, owner, spender, amount):
    """
    Take amount out of allowances[owner][spender].

    Mutates and returns the state it is given, so callers pass their own
    working copy. Raises CallerAllowanceNotEnough carrying the current
    allowance if it does not cover amount. Balances are not touched.
    """
    allowance = state.get_allowance(owner, spender)
    if allowance < amount:
        logger.debug("Allowance of %s on %s is %s, needs %s", spender[:8], owner[:8], allowance, amount)
        raise CallerAllowanceNotEnough(allowance)

    state.set_allowance(owner, spender, checked_sub(allowance, amount))
    return state


def approve(state, context, spender, amount):
    """Set how much spender may move out of the caller's balance."""
    caller = context.resolve_caller()

    new_state = state.copy()
    new_state.set_allowance(caller, spender, amount)

    logger.debug("Allowance of %s on %s set to %s", spender[:8], caller[:8], amount)
    return NewState(new_state)
