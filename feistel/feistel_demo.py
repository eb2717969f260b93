import argparse
import logging
import sys
from typing import List, Optional
from Feistel_network import MalformedInputError
from feistel_cipher import FeistelCipher
from key_schedule import DEFAULT_ROUNDS
from tracing import LoggingObserver, format_block


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Feistel cipher round-trip demo")
    p.add_argument("--message", default="Secret!!", help="text to encrypt (even length)")
    p.add_argument("--rounds", type=int, default=DEFAULT_ROUNDS)
    p.add_argument("--verbose", action="store_true", help="log every round")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )
    observer = LoggingObserver() if args.verbose else None
    cipher = FeistelCipher(rounds=args.rounds, observer=observer)

    block = args.message.encode("utf-8")
    print(f"Original:  {format_block(block)}")
    try:
        encrypted = cipher.encrypt_block(block)
    except MalformedInputError as e:
        print(f"ERROR: {e}")
        return 2
    print(f"Encrypted: {format_block(encrypted)}")

    decrypted = cipher.decrypt_block(encrypted)
    print(f"Decrypted: {format_block(decrypted)}")

    ok = decrypted == block
    print(f"Success: {'YES' if ok else 'NO'}")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
