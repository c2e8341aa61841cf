class HandlerResult:
    """
    Outcome of an accepted action: either NewState or QueryResponse.

    payload() is what the host stores (new state) or returns (query).
    """

    is_query = False

    def payload(self):
        raise NotImplementedError


class NewState(HandlerResult):
    def __init__(self, state):
        self.state = state

    def payload(self):
        return self.state.to_dict()

    def __eq__(self, other):
        return isinstance(other, NewState) and self.state == other.state

    def __repr__(self):
        return f"NewState({self.state!r})"


class QueryResponse(HandlerResult):
    is_query = True

    def __init__(self, result):
        self.result = result

    def payload(self):
        return self.result

    def __eq__(self, other):
        return isinstance(other, QueryResponse) and self.result == other.result

    def __repr__(self):
        return f"QueryResponse({self.result!r})"
