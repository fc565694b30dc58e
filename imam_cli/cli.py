import argparse, logging, sys

from imam_cli.cfg import load_env, setup_logging
from imam_cli.datafiles import add_header_to_data_file, create_osh_sidecar, table_name_for
from imam_cli.errors import ImamError
from imam_cli.import_areas import refresh_import_areas
from imam_cli.ingest import load_metadata
from imam_cli.template import build_bridge_template


def _report(result, *_):
    if result.code == 0:
        print(result.stdout)
    else:
        print(result.stdout, file=sys.stderr)


def cmd_add_header(args):
    add_header_to_data_file(args.file, args.sql, args.delimiter)
    print(f"✅ Injected heading for table {table_name_for(args.file)} into {args.file}")
    return 0


def cmd_create_sidecar(args):
    sidecar = create_osh_sidecar(args.file, args.sql, args.delimiter, args.header, args.escape)
    print(f"✅ Created side-car for table {table_name_for(args.file)} into {sidecar}")
    return 0


def cmd_bridge_template(args):
    build_bridge_template(args.file)
    return 0


def cmd_ingest(args):
    results = load_metadata(load_env(args.authfile), args.file, callback=_report)
    failed = [r for _, r in results if r.code != 0]
    return failed[0].code if failed else 0


def cmd_refresh(args):
    results = refresh_import_areas(load_env(args.authfile), args.name, args.time)
    for _, result in results:
        _report(result)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(prog="imam-cli", description="Automate IMAM metadata imports")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("add-header", help="Prepend an IMAM-importable header row to a data file")
    p.add_argument("-f", "--file", required=True, help="Path to data file that should have header injected")
    p.add_argument("-s", "--sql", help="Path to SQL file containing DDL to convert")
    p.add_argument("-d", "--delimiter", default="|", help="Delimiter to use between columns")
    p.set_defaults(func=cmd_add_header)

    p = sub.add_parser("create-sidecar", help="Create an OSH schema sidecar (<file>.osh) for a data file")
    p.add_argument("-f", "--file", required=True, help="Path to data file for which sidecar should be created")
    p.add_argument("-s", "--sql", help="Path to SQL file containing DDL to convert")
    p.add_argument("-d", "--delimiter", default="|", help="Delimiter to use between columns")
    p.add_argument("--header", action="store_true", help="Data file already has a header row")
    p.add_argument("--escape", help="Escape sequence for the delimiter, e.g. a double-quote")
    p.set_defaults(func=cmd_create_sidecar)

    p = sub.add_parser("bridge-template", help="Write the Excel template of bridge parameters")
    p.add_argument("-f", "--file", default="BridgeTemplate.xlsx", help="Path to output file to produce")
    p.set_defaults(func=cmd_bridge_template)

    p = sub.add_parser("ingest", help="Create or re-import every import area listed in a filled-in template")
    p.add_argument("-f", "--file", required=True, help="Path to Excel file containing description of sources")
    p.add_argument("-a", "--authfile", help="Authorisation file containing environment context")
    p.set_defaults(func=cmd_ingest)

    p = sub.add_parser("refresh", help="Re-import stale import areas")
    p.add_argument("-n", "--name", help="Name of the Import Area to refresh")
    p.add_argument("-t", "--time", type=float, help="Refresh anything more stale than this time in hours")
    p.add_argument("-a", "--authfile", help="Authorisation file containing environment context")
    p.set_defaults(func=cmd_refresh)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging()
    try:
        return args.func(args)
    except (ImamError, ValueError, OSError) as e:
        logging.error("%s failed: %s", args.command, e)
        print(f"❌ {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
