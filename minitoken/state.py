import copy
import json
import logging

from nacl.hash import sha256
from nacl.encoding import HexEncoder

from minitoken.address import parse_address
from minitoken.amount import ZERO, parse_amount
from minitoken.config import MAX_DECIMALS
from minitoken.errors import ParseError

logger = logging.getLogger(__name__)


def _check_decimals(decimals):
    # decimals is an unsigned byte; bool is an int subclass
    if isinstance(decimals, bool) or not isinstance(decimals, int) or not 0 <= decimals <= MAX_DECIMALS:
        raise ParseError(f"invalid decimals {decimals!r}")


class State:
    """
    Snapshot of a token contract: metadata, supply, balances and allowances.

    Handlers never mutate a State they are given. They work on copy()
    and hand the copy back as the next state.
    """

    def __init__(self, ticker, owner, total_supply=ZERO, decimals=0, name=None,
                 balances=None, allowances=None):
        self.ticker = ticker
        self.name = name
        self.decimals = decimals
        self.total_supply = total_supply
        self.owner = owner
        # { address: amount }
        self.balances = balances if balances is not None else {}
        # { owner: { spender: amount } }
        self.allowances = allowances if allowances is not None else {}

    # =========================================================================
    # ACCESSORS (absent entries read as zero)
    # =========================================================================

    def get_balance(self, address: str) -> int:
        """Get balance of address (0 if there is no entry)."""
        return self.balances.get(address, ZERO)

    def get_allowance(self, owner: str, spender: str) -> int:
        """Get what spender may still move out of owner's balance (0 if unset)."""
        return self.allowances.get(owner, {}).get(spender, ZERO)

    def set_balance(self, address: str, amount: int):
        self.balances[address] = amount

    def set_allowance(self, owner: str, spender: str, amount: int):
        self.allowances.setdefault(owner, {})[spender] = amount

    def copy(self):
        """
        Return an independent copy of state for a handler to work on.
        """
        return copy.deepcopy(self)

    # =========================================================================
    # COMPARISON
    # =========================================================================

    def _normalized(self):
        balances = {a: v for a, v in self.balances.items() if v != ZERO}
        allowances = {}
        for owner, spenders in self.allowances.items():
            entries = {s: v for s, v in spenders.items() if v != ZERO}
            if entries:
                allowances[owner] = entries
        return (self.ticker, self.name, self.decimals, self.total_supply,
                self.owner, balances, allowances)

    def __eq__(self, other):
        # Zero entries are equivalent to missing ones
        if not isinstance(other, State):
            return NotImplemented
        return self._normalized() == other._normalized()

    def __repr__(self):
        return f"State({self.ticker}, supply={self.total_supply}, holders={len(self.balances)})"

    # =========================================================================
    # SERIALIZATION
    # =========================================================================

    def to_dict(self):
        return {
            "ticker": self.ticker,
            "name": self.name,
            "decimals": self.decimals,
            "totalSupply": str(self.total_supply),
            "owner": self.owner,
            "balances": {
                address: str(amount) for address, amount in self.balances.items()
            },
            "allowances": {
                owner: {spender: str(amount) for spender, amount in spenders.items()}
                for owner, spenders in self.allowances.items()
            },
        }

    @staticmethod
    def from_dict(data: dict) -> "State":
        """Create state from dictionary, validating every address and amount."""
        if not isinstance(data, dict):
            raise ParseError("state must be an object")

        try:
            ticker = data["ticker"]
            decimals = data["decimals"]
            total_supply = parse_amount(data["totalSupply"])
            owner = parse_address(data["owner"])
        except KeyError as e:
            raise ParseError(f"state is missing field {e.args[0]!r}")

        if not isinstance(ticker, str):
            raise ParseError("ticker must be a string")

        name = data.get("name")
        if name is not None and not isinstance(name, str):
            raise ParseError("name must be a string or null")

        _check_decimals(decimals)

        raw_balances = data.get("balances") or {}
        if not isinstance(raw_balances, dict):
            raise ParseError("balances must be an object")

        balances = {
            parse_address(address): parse_amount(amount)
            for address, amount in raw_balances.items()
        }

        # Supply is the sum of all balances
        if sum(balances.values()) != total_supply:
            raise ParseError(f"balances add up to {sum(balances.values())}, totalSupply is {total_supply}")

        raw_allowances = data.get("allowances") or {}
        if not isinstance(raw_allowances, dict):
            raise ParseError("allowances must be an object")

        allowances = {}
        for owner_address, spenders in raw_allowances.items():
            if not isinstance(spenders, dict):
                raise ParseError(f"allowances of {owner_address!r} must be an object")
            allowances[parse_address(owner_address)] = {
                parse_address(spender): parse_amount(amount)
                for spender, amount in spenders.items()
            }

        return State(
            ticker=ticker,
            name=name,
            decimals=decimals,
            total_supply=total_supply,
            owner=owner,
            balances=balances,
            allowances=allowances,
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)

    @staticmethod
    def from_json(text: str) -> "State":
        try:
            data = json.loads(text)
        except ValueError as e:
            raise ParseError(f"state is not valid JSON: {e}")
        return State.from_dict(data)

    def hash(self) -> str:
        """Hash of the canonical JSON form; equal on every evaluator."""
        return sha256(self.to_json().encode("utf-8"), encoder=HexEncoder).decode()


def create_genesis_state(ticker, name, decimals, total_supply, owner) -> State:
    """Create the deployment state: the owner holds the whole supply."""
    owner = parse_address(owner)
    total_supply = parse_amount(total_supply)
    _check_decimals(decimals)
    logger.info("Genesis state for %s: %s units to %s", ticker, total_supply, owner)
    return State(
        ticker=ticker,
        name=name,
        decimals=decimals,
        total_supply=total_supply,
        owner=owner,
        balances={owner: total_supply},
    )
