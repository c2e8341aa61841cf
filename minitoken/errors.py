class ContractError(Exception):
    """Base class for every rejection raised by a token handler."""

    kind = "ContractError"

    def __init__(self, message=None, detail=None):
        self.detail = detail
        super().__init__(message or self.kind)

    def to_dict(self):
        return {"error": self.kind, "detail": self.detail}


class AmountMustBeHigherThanZero(ContractError):
    kind = "AmountMustBeHigherThanZero"

    def __init__(self):
        super().__init__("Amount must be higher than zero")


class ParseError(ContractError):
    kind = "ParseError"

    def __init__(self, detail):
        super().__init__(f"Parse error: {detail}", detail=detail)


class InsufficientFunds(ContractError):
    """Debit larger than the balance it is taken from."""

    kind = "InsufficientFunds"

    def __init__(self, balance):
        self.balance = balance
        super().__init__(f"{self.kind}: balance is {balance}", detail=str(balance))


class CallerBalanceNotEnough(InsufficientFunds):
    kind = "CallerBalanceNotEnough"


class InvalidBalance(InsufficientFunds):
    kind = "InvalidBalance"


class CallerAllowanceNotEnough(ContractError):
    kind = "CallerAllowanceNotEnough"

    def __init__(self, allowance):
        self.allowance = allowance
        super().__init__(f"Caller allowance not enough: allowance is {allowance}", detail=str(allowance))


class UnknownFunction(ContractError):
    kind = "UnknownFunction"

    def __init__(self, name):
        super().__init__(f"Unknown function: {name!r}", detail=name)
