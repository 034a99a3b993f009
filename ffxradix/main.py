import sys
import logging
import argparse
from typing import Optional

from ffxradix.models import (CIPHERS, FFXError, FFXParams, bcolors)
from ffxradix.core import (FFXCipher)

def _add_common_arguments(parser: argparse.ArgumentParser):
    parser.add_argument("text", help="Message over the radix alphabet")
    parser.add_argument("--key", required=True, help="AES key (hex, 16/24/32 bytes)")
    parser.add_argument("--radix", type=int, default=10, help="Alphabet size 2..62 (default 10)")
    tweak = parser.add_mutually_exclusive_group()
    tweak.add_argument("--tweak", default="", help="Tweak as text (UTF-8)")
    tweak.add_argument("--tweak-hex", dest="tweak_hex", help="Tweak as hex")
    parser.add_argument("--cipher", choices=list(CIPHERS), default=FFXParams.cipher,
                        help="AES variant; must match the key length (default: from key length)")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="FFXRadix - Format-preserving encryption over radix 2..62")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log round values")
    subparsers = parser.add_subparsers(dest="command")

    encrypt_parser = subparsers.add_parser("encrypt", help="Encrypt a message")
    _add_common_arguments(encrypt_parser)

    decrypt_parser = subparsers.add_parser("decrypt", help="Decrypt a message")
    _add_common_arguments(decrypt_parser)
    return parser

def _decode_hex(value: str, what: str) -> bytes:
    try:
        return bytes.fromhex(value)
    except ValueError:
        raise FFXError(f"{what} is not valid hex")

def main(argv: Optional[list] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        match args.command:
            case "encrypt" | "decrypt":
                key = _decode_hex(args.key, "Key")
                if args.tweak_hex is not None:
                    tweak = _decode_hex(args.tweak_hex, "Tweak")
                else:
                    tweak = args.tweak.encode("utf-8")
                ffx = FFXCipher.for_cipher(args.cipher)
                operation = ffx.encrypt if args.command == "encrypt" else ffx.decrypt
                print(operation(args.text, args.radix, key, tweak))
            case _:
                parser.print_help()
    except FFXError as e:
        print(f"{bcolors.FAIL}ERROR:{bcolors.ENDC}", e)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
