import logging

from minitoken import queries
from minitoken.allowance import approve
from minitoken.burn import burn, burn_from
from minitoken.transfer import transfer, transfer_from
from minitoken.address import parse_address
from minitoken.amount import parse_amount
from minitoken.errors import ContractError, ParseError, UnknownFunction

logger = logging.getLogger(__name__)

# function name -> (handler, [(argument, parser), ...])
FUNCTIONS = {
    "transfer": (transfer, [("to", parse_address), ("amount", parse_amount)]),
    "transferFrom": (transfer_from, [("from", parse_address), ("to", parse_address), ("amount", parse_amount)]),
    "burn": (burn, [("amount", parse_amount)]),
    "burnFrom": (burn_from, [("from", parse_address), ("amount", parse_amount)]),
    "approve": (approve, [("spender", parse_address), ("amount", parse_amount)]),
    "name": (queries.name, []),
    "symbol": (queries.symbol, []),
    "decimals": (queries.decimals, []),
    "totalSupply": (queries.total_supply, []),
    "balanceOf": (queries.balance_of, [("target", parse_address)]),
    "allowance": (queries.allowance, [("owner", parse_address), ("spender", parse_address)]),
}


class ContractMachine:
    """
    Routes JSON-shaped actions to the token handlers.

    The machine holds no state of its own: every call receives the
    current State and yields a HandlerResult, so the same (state, action,
    context) always gives the same answer.
    """

    def handle(self, state, action, context):
        """
        Run one action against state.

        Returns NewState or QueryResponse. Raises ContractError on
        rejection; state is left as it was.
        """
        if not isinstance(action, dict):
            raise ParseError("action must be an object")

        function = action.get("function")
        if not isinstance(function, str) or function not in FUNCTIONS:
            raise UnknownFunction(function)

        handler, params = FUNCTIONS[function]

        args = []
        for param, parse in params:
            if param not in action:
                raise ParseError(f"{function} is missing argument {param!r}")
            args.append(parse(action[param]))

        return handler(state, context, *args)

    def evaluate(self, state, interactions):
        """
        Replay (context, action) interactions in order starting from state.

        A rejected interaction is logged and skipped. Returns the final
        state and one outcome per interaction: the HandlerResult, or the
        ContractError it was rejected with.
        """
        outcomes = []

        for index, (context, action) in enumerate(interactions):
            try:
                result = self.handle(state, action, context)
            except ContractError as e:
                logger.warning("Interaction %d rejected: %s", index, e)
                outcomes.append(e)
                continue

            if not result.is_query:
                state = result.state
                logger.info("Interaction %d accepted: %s", index, action.get("function"))
            outcomes.append(result)

        return state, outcomes


def serialize_result(result):
    """Host-facing form of a HandlerResult (new state dict or query payload)."""
    return result.payload()
