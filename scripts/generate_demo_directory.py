#!/usr/bin/env python3
"""Open a batch of demo accounts and print the directory as JSON.

Useful for eyeballing what ``atm-sim --demo N`` will create for a seed.
PINs are printed separately so the accounts can be logged into.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from atm_sim.bank import Bank
from atm_sim.config import BankConfig
from atm_sim.logging import get_logger, setup_logging
from atm_sim.serialization import summaries_to_json

logger = get_logger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate demo ATM accounts")
    parser.add_argument("--accounts", type=int, default=10, help="Number of accounts (default: 10)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument("--output", type=Path, default=None, help="Write JSON here instead of stdout")
    args = parser.parse_args()

    setup_logging("INFO")
    bank = Bank(BankConfig(seed=args.seed))
    opened = bank.populate_demo(args.accounts)
    for kind, count in bank.directory.summary().items():
        logger.info("%s accounts: %d", kind, count)

    summaries = sorted(
        (account.summary() for account in bank.directory.accounts()),
        key=lambda s: s.account_number,
    )
    rendered = summaries_to_json(summaries, pretty=True)

    if args.output:
        args.output.write_text(rendered, encoding="utf-8")
        logger.info("Saved %d accounts to %s", len(summaries), args.output)
    else:
        print(rendered)

    for number, pin in opened:
        print(f"#{number}  PIN {pin}", file=sys.stderr)


if __name__ == "__main__":
    main()
