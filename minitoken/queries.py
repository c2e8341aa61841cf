from minitoken.result import QueryResponse


def name(state, context):
    return QueryResponse(state.name)


def symbol(state, context):
    return QueryResponse(state.ticker)


def decimals(state, context):
    return QueryResponse(state.decimals)


def total_supply(state, context):
    return QueryResponse(str(state.total_supply))


def balance_of(state, context, target):
    return QueryResponse({
        "balance": str(state.get_balance(target)),
        "ticker": state.ticker,
        "target": target,
    })


def allowance(state, context, owner, spender):
    return QueryResponse({
        "allowance": str(state.get_allowance(owner, spender)),
        "ticker": state.ticker,
        "owner": owner,
        "spender": spender,
    })
