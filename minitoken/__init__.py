# Core modules
from .state import State, create_genesis_state
from .context import Context
from .result import HandlerResult, NewState, QueryResponse
from .contract import ContractMachine, serialize_result

# Handlers
from .transfer import transfer, transfer_from
from .burn import burn, burn_from
from .allowance import approve, spend_allowance

# Types
from .address import Address, parse_address, address_from_verify_key
from .amount import ZERO, parse_amount
from .wallet import create_wallet, load_wallet

# Errors
from .errors import (
    ContractError,
    AmountMustBeHigherThanZero,
    ParseError,
    InsufficientFunds,
    CallerBalanceNotEnough,
    InvalidBalance,
    CallerAllowanceNotEnough,
    UnknownFunction,
)

__all__ = [
    # Core
    "State",
    "create_genesis_state",
    "Context",
    "HandlerResult",
    "NewState",
    "QueryResponse",
    "ContractMachine",
    "serialize_result",
    # Handlers
    "transfer",
    "transfer_from",
    "burn",
    "burn_from",
    "approve",
    "spend_allowance",
    # Types
    "Address",
    "parse_address",
    "address_from_verify_key",
    "ZERO",
    "parse_amount",
    "create_wallet",
    "load_wallet",
    # Errors
    "ContractError",
    "AmountMustBeHigherThanZero",
    "ParseError",
    "InsufficientFunds",
    "CallerBalanceNotEnough",
    "InvalidBalance",
    "CallerAllowanceNotEnough",
    "UnknownFunction",
]
