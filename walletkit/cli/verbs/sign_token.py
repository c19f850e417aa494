"""walletkit sign-token --input FILE --output FILE"""

from pathlib import Path

from walletkit.cli.output import die, print_result
from walletkit.cli.verbs._identity import identity_from_args


def register(subparsers):
    p = subparsers.add_parser("sign-token", help="Sign a personalization token")
    p.add_argument("--input", "-i", required=True, help="Token file to sign")
    p.add_argument("--output", "-o", required=True, help="Signature output path")
    p.set_defaults(handler=handle)


def handle(args):
    from walletkit.primitives.errors import WalletKitError
    from walletkit.runtime.builder import PassBuilder

    builder = PassBuilder(identity_from_args(args))
    try:
        token = Path(args.input).read_bytes()
        signature = builder.signature(token)
    except WalletKitError as e:
        die(e.message)
    except OSError as e:
        die(str(e))

    try:
        Path(args.output).write_bytes(signature)
    except OSError as e:
        die(f"cannot write {args.output}: {e}")
    print_result({"status": "signed", "output": args.output, "size": len(signature)})
