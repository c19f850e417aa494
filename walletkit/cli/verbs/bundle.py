"""walletkit bundle --output FILE PASS.pkpass [PASS.pkpass ...]"""

from pathlib import Path

from walletkit.cli.output import die, print_result


def register(subparsers):
    p = subparsers.add_parser("bundle", help="Combine passes into a .pkpasses collection")
    p.add_argument("passes", nargs="+", help=".pkpass files (at most 10)")
    p.add_argument("--output", "-o", required=True, help="Output .pkpasses path")
    p.set_defaults(handler=handle)


def handle(args):
    from walletkit.primitives.errors import WalletKitError
    from walletkit.runtime.builder import bundle_passes
    from walletkit.runtime.kinds import PASS_COLLECTION_MEDIA_TYPE

    try:
        passes = [Path(path).read_bytes() for path in args.passes]
        data = bundle_passes(passes)
    except WalletKitError as e:
        die(e.message)
    except OSError as e:
        die(str(e))

    try:
        Path(args.output).write_bytes(data)
    except OSError as e:
        die(f"cannot write {args.output}: {e}")
    print_result({
        "status": "bundled",
        "passes": len(passes),
        "output": args.output,
        "media_type": PASS_COLLECTION_MEDIA_TYPE,
    })
