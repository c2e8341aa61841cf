import json
import unittest

from nacl.signing import SigningKey

from minitoken import (
    Context,
    ParseError,
    State,
    address_from_verify_key,
    create_genesis_state,
    create_wallet,
    load_wallet,
    parse_address,
    parse_amount,
)
from minitoken.amount import checked_add, checked_sub
from minitoken.config import MAX_AMOUNT
from minitoken.wallet import private_key_hex


class TestAddress(unittest.TestCase):
    def test_derived_address_parses(self):
        """An address derived from a key is 43 characters and canonical."""
        _, address = create_wallet()
        self.assertEqual(len(address), 43)
        self.assertEqual(parse_address(address), address)

    def test_derivation_is_deterministic(self):
        sk = SigningKey(b"\x01" * 32)
        self.assertEqual(
            address_from_verify_key(sk.verify_key),
            address_from_verify_key(SigningKey(b"\x01" * 32).verify_key),
        )
        self.assertNotEqual(
            address_from_verify_key(sk.verify_key),
            address_from_verify_key(SigningKey(b"\x02" * 32).verify_key),
        )

    def test_load_wallet_roundtrip(self):
        sk, address = create_wallet()
        _, loaded = load_wallet(private_key_hex(sk))
        self.assertEqual(loaded, address)

    def test_rejects_bad_addresses(self):
        _, address = create_wallet()
        for bad in ["", "alice", address[:-1], address + "A", address[:-1] + "=", address[:-1] + "+", 42, None]:
            with self.assertRaises(ParseError):
                parse_address(bad)

    def test_rejects_non_canonical_tail(self):
        """The last character of a 32-byte digest only carries 4 bits."""
        _, address = create_wallet()
        alphabet = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
        last = alphabet.index(address[-1])
        tweaked = address[:-1] + alphabet[last | 1]
        self.assertNotEqual(tweaked, address)
        with self.assertRaises(ParseError):
            parse_address(tweaked)


    def test_context_repr_with_any_caller(self):
        for caller in (None, 42, "short"):
            self.assertIn(repr(caller), repr(Context(caller)))
            with self.assertRaises(ParseError):
                Context(caller).resolve_caller()

class TestAmount(unittest.TestCase):
    def test_parse_amount(self):
        self.assertEqual(parse_amount("555"), 555)
        self.assertEqual(parse_amount(0), 0)
        self.assertEqual(parse_amount(str(MAX_AMOUNT)), MAX_AMOUNT)

    def test_parse_amount_rejects(self):
        for bad in ["-1", -1, "1.5", 1.5, "", "abc", True, None, MAX_AMOUNT + 1, "١٢"]:
            with self.assertRaises(ParseError):
                parse_amount(bad)

    def test_checked_arithmetic(self):
        self.assertEqual(checked_sub(10, 10), 0)
        self.assertEqual(checked_add(1, 2), 3)
        with self.assertRaises(OverflowError):
            checked_sub(1, 2)
        with self.assertRaises(OverflowError):
            checked_add(MAX_AMOUNT, 1)


class TestState(unittest.TestCase):
    def setUp(self):
        _, self.alice = create_wallet()
        _, self.bob = create_wallet()
        self.state = State(
            ticker="TST",
            name="Test Token",
            decimals=10,
            total_supply=100,
            owner=self.alice,
            balances={self.alice: 100},
            allowances={self.alice: {self.bob: 40}},
        )

    def test_accessors_default_to_zero(self):
        self.assertEqual(self.state.get_balance(self.alice), 100)
        self.assertEqual(self.state.get_balance(self.bob), 0)
        self.assertEqual(self.state.get_allowance(self.alice, self.bob), 40)
        self.assertEqual(self.state.get_allowance(self.bob, self.alice), 0)

    def test_copy_is_independent(self):
        copied = self.state.copy()
        copied.set_balance(self.bob, 5)
        copied.set_allowance(self.alice, self.bob, 1)
        self.assertEqual(self.state.get_balance(self.bob), 0)
        self.assertEqual(self.state.get_allowance(self.alice, self.bob), 40)

    def test_zero_entries_equal_missing(self):
        other = self.state.copy()
        other.set_balance(self.bob, 0)
        other.set_allowance(self.bob, self.alice, 0)
        self.assertEqual(other, self.state)

    def test_dict_layout_is_camel_case(self):
        data = self.state.to_dict()
        self.assertEqual(data["totalSupply"], "100")
        self.assertEqual(data["balances"], {self.alice: "100"})
        self.assertEqual(data["allowances"], {self.alice: {self.bob: "40"}})
        self.assertEqual(State.from_dict(data), self.state)

    def test_from_dict_accepts_integer_amounts(self):
        data = self.state.to_dict()
        data["totalSupply"] = 100
        data["balances"] = {self.alice: 100}
        self.assertEqual(State.from_dict(data), self.state)

    def test_from_dict_rejects_bad_input(self):
        data = self.state.to_dict()
        del data["owner"]
        with self.assertRaises(ParseError):
            State.from_dict(data)

        data = self.state.to_dict()
        data["balances"] = {"alice": "1"}
        with self.assertRaises(ParseError):
            State.from_dict(data)

        data = self.state.to_dict()
        data["decimals"] = 256
        with self.assertRaises(ParseError):
            State.from_dict(data)

        for field in ("balances", "allowances"):
            for bad in (["x"], "x", 7):
                data = self.state.to_dict()
                data[field] = bad
                with self.assertRaises(ParseError):
                    State.from_dict(data)

        with self.assertRaises(ParseError):
            State.from_json("{not json")

    def test_json_is_canonical(self):
        text = self.state.to_json()
        self.assertEqual(json.loads(text), self.state.to_dict())
        self.assertEqual(State.from_json(text).hash(), self.state.hash())

    def test_hash_changes_with_balances(self):
        other = self.state.copy()
        other.set_balance(self.alice, 99)
        self.assertNotEqual(other.hash(), self.state.hash())

    def test_genesis_state(self):
        state = create_genesis_state("TST", "Test Token", 10, "10000000000000000000", self.alice)
        self.assertEqual(state.total_supply, 10000000000000000000)
        self.assertEqual(state.get_balance(self.alice), 10000000000000000000)
        self.assertEqual(state.owner, self.alice)
        self.assertEqual(state.allowances, {})

        with self.assertRaises(ParseError):
            create_genesis_state("TST", None, 10, 1, "not-an-address")

        for bad in (True, "10", 1.0, 256, -1):
            with self.assertRaises(ParseError):
                create_genesis_state("TST", None, bad, 1, self.alice)

    def test_from_dict_rejects_supply_mismatch(self):
        """Balances must add up to totalSupply."""
        data = self.state.to_dict()
        data["totalSupply"] = "50"
        with self.assertRaises(ParseError):
            State.from_dict(data)

        data["totalSupply"] = "101"
        with self.assertRaises(ParseError):
            State.from_dict(data)

    def test_mismatched_state_file_never_reaches_handlers(self):
        """A replay over a file with supply below balances is rejected up front."""
        text = json.dumps({
            "ticker": "TST", "decimals": 0, "totalSupply": "50",
            "owner": self.alice, "balances": {self.alice: "100"},
        })
        with self.assertRaises(ParseError):
            State.from_json(text)


if __name__ == '__main__':
    unittest.main()
