from minitoken.address import parse_address


class Context:
    """
    What the host knows about the interaction being evaluated.

    caller is the identity invoking the action; transaction_owner is the
    signer of the carrying transaction and is only logged.
    """

    def __init__(self, caller: str, transaction_owner: str = None):
        self.caller = caller
        self.transaction_owner = transaction_owner if transaction_owner is not None else caller

    def resolve_caller(self) -> str:
        """Caller as an address. Raises ParseError if it is not one."""
        return parse_address(self.caller)

    def __repr__(self):
        return f"Context(caller={self.caller!r})"
