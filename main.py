#!/usr/bin/env python3
"""
MiniToken CLI

Evaluate token contract actions against a JSON state file.

Usage:
    # New wallet (address + private key)
    minitoken wallet

    # Genesis state, owner holds the full supply
    minitoken init --owner <address> --out state.json

    # Transfer 555 units from the caller to another address
    minitoken interact --state state.json --caller <address> --write \
        --action '{"function": "transfer", "to": "<address>", "amount": "555"}'

    # Read-only query
    minitoken interact --state state.json --caller <address> \
        --action '{"function": "balanceOf", "target": "<address>"}'
"""

import argparse
import json
import logging
import sys

from minitoken import Context, ContractError, ContractMachine, State, create_genesis_state, create_wallet, serialize_result
from minitoken.config import (
    DEFAULT_DECIMALS,
    DEFAULT_NAME,
    DEFAULT_TICKER,
    DEFAULT_TOTAL_SUPPLY,
    LOG_DATEFMT,
    LOG_FORMAT,
)
from minitoken.wallet import private_key_hex

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="MiniToken - token contract state transitions",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("wallet", help="Generate a new wallet")

    init = subparsers.add_parser("init", help="Write a genesis state")
    init.add_argument("--ticker", default=DEFAULT_TICKER)
    init.add_argument("--name", default=DEFAULT_NAME)
    init.add_argument("--decimals", type=int, default=DEFAULT_DECIMALS)
    init.add_argument("--supply", default=str(DEFAULT_TOTAL_SUPPLY), help="Total supply in smallest units")
    init.add_argument("--owner", required=True, help="Address receiving the whole supply")
    init.add_argument("--out", default=None, help="Output file (stdout if omitted)")

    interact = subparsers.add_parser("interact", help="Run one action against a state")
    interact.add_argument("--state", required=True, help="State JSON file")
    interact.add_argument("--caller", required=True, help="Address invoking the action")
    interact.add_argument("--tx-owner", default=None, help="Transaction owner (defaults to caller)")
    interact.add_argument("--action", required=True, help="Action as JSON, e.g. '{\"function\": \"name\"}'")
    interact.add_argument("--write", action="store_true", help="Store an accepted new state back to --state")

    return parser.parse_args(argv)


def cmd_wallet(args):
    sk, address = create_wallet()
    print(json.dumps({"address": address, "privateKey": private_key_hex(sk)}, indent=2))
    return 0


def cmd_init(args):
    state = create_genesis_state(
        ticker=args.ticker,
        name=args.name,
        decimals=args.decimals,
        total_supply=args.supply,
        owner=args.owner,
    )
    text = json.dumps(state.to_dict(), indent=2, sort_keys=True)

    if args.out:
        with open(args.out, "w") as f:
            f.write(text + "\n")
        logger.info("Genesis state written to %s", args.out)
    else:
        print(text)
    return 0


def cmd_interact(args):
    with open(args.state) as f:
        state = State.from_json(f.read())

    try:
        action = json.loads(args.action)
    except ValueError as e:
        logger.error("Action is not valid JSON: %s", e)
        return 2

    context = Context(caller=args.caller, transaction_owner=args.tx_owner)
    result = ContractMachine().handle(state, action, context)

    print(json.dumps(serialize_result(result), indent=2, sort_keys=True))

    if args.write and not result.is_query:
        with open(args.state, "w") as f:
            f.write(json.dumps(result.state.to_dict(), indent=2, sort_keys=True) + "\n")
        logger.info("State written to %s", args.state)
    return 0


COMMANDS = {
    "wallet": cmd_wallet,
    "init": cmd_init,
    "interact": cmd_interact,
}


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    # Setup logging
    level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT
    )

    try:
        return COMMANDS[args.command](args)
    except ContractError as e:
        logger.warning("Rejected: %s", e)
        print(json.dumps(e.to_dict()), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
