"""walletkit-cli entry point.

Verbs:
    build       Build a signed .pkpass or .order bundle
    sign-token  Sign a personalization token
    bundle      Combine passes into a .pkpasses collection
"""

import argparse
import logging
import sys
from typing import List, Optional

from walletkit.cli.verbs import build, bundle, sign_token


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="walletkit",
        description="Build signed Apple Wallet pass and order bundles",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    signing = parser.add_argument_group(
        "signing", "Override WALLETKIT_* settings for this run"
    )
    signing.add_argument("--wwdr", dest="wwdr_certificate_path",
                         help="WWDR intermediate certificate (PEM)")
    signing.add_argument("--certificate", dest="certificate_path",
                         help="Pass/order type certificate (PEM)")
    signing.add_argument("--key", dest="private_key_path",
                         help="Private key for the certificate (PEM)")
    signing.add_argument("--password", dest="private_key_password",
                         help="Password of an encrypted private key")
    signing.add_argument("--openssl", dest="openssl_path",
                         help="openssl executable used for encrypted keys")

    sub = parser.add_subparsers(dest="verb", required=True)

    build.register(sub)
    sign_token.register(sub)
    bundle.register(sub)

    return parser


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="[%(name)s] %(levelname)s: %(message)s",
            stream=sys.stderr,
        )
    else:
        from walletkit.cli.output import die
        from walletkit.runtime.settings import get_settings
        try:
            logging.basicConfig(
                level=get_settings().log_level.upper(),
                format="[%(name)s] %(levelname)s: %(message)s",
                stream=sys.stderr,
            )
        except ValueError as e:
            die(f"invalid WALLETKIT_* settings: {e}")

    # Dispatch to verb handler
    handler = args.handler
    handler(args)


if __name__ == "__main__":
    main()
