"""walletkit build --kind pass|order --properties FILE --source DIR [--personalization FILE] [--output FILE]"""

from pathlib import Path

from walletkit.cli.output import die, load_document, print_result
from walletkit.cli.verbs._identity import identity_from_args


def register(subparsers):
    p = subparsers.add_parser("build", help="Build a signed pass or order bundle")
    p.add_argument("--kind", default="pass", choices=["pass", "order"],
                   help="Bundle kind (default: pass)")
    p.add_argument("--properties", required=True,
                   help="pass.json / order.json content as a JSON or YAML file")
    p.add_argument("--source", required=True,
                   help="Directory of asset files to bundle")
    p.add_argument("--personalization",
                   help="personalization.json content (passes only)")
    p.add_argument("--output", "-o",
                   help="Output path (default: <properties stem>.pkpass or .order)")
    p.set_defaults(handler=handle)


def handle(args):
    from walletkit.models import Personalization
    from walletkit.primitives.errors import WalletKitError
    from walletkit.runtime.builder import BuildRequest, BundleBuilder
    from walletkit.runtime.kinds import KINDS

    kind = KINDS[args.kind]
    if args.personalization and not kind.supports_personalization:
        die(f"{kind.name} bundles do not support personalization")

    properties = load_document(args.properties)
    personalization = None
    if args.personalization:
        try:
            personalization = Personalization.model_validate(
                load_document(args.personalization)
            )
        except ValueError as e:
            die(f"invalid personalization: {e}")

    output = Path(args.output or f"{Path(args.properties).stem}.{kind.extension}")

    builder = BundleBuilder(kind, identity_from_args(args))
    try:
        data = builder.build(
            BuildRequest(properties, args.source, personalization=personalization)
        )
    except WalletKitError as e:
        die(e.message)
    except (TypeError, ValueError) as e:
        die(f"cannot build {kind.name} bundle: {e}")
    except OSError as e:
        die(str(e))

    try:
        output.write_bytes(data)
    except OSError as e:
        die(f"cannot write {output}: {e}")
    print_result({
        "status": "built",
        "kind": kind.name,
        "output": str(output),
        "media_type": kind.media_type,
        "size": len(data),
    })
