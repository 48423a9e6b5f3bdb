# --- START OF FILE src/pyzpool/main.py ---
import sys
import json
import argparse
import dataclasses
from typing import Dict, List, Optional

from . import config_manager
from . import constants
from . import zpool_core
from .debug_logging import set_debug_mode, log_error
from .errors import ZfsError
from .version import __version__, __app_name__


def _parse_properties(parser: argparse.ArgumentParser, items: Optional[List[str]]) -> Dict[str, str]:
    properties: Dict[str, str] = {}
    for item in items or []:
        key, sep, value = item.partition('=')
        if not sep or not key:
            parser.error(f"invalid property '{item}', expected key=value")
        properties[key] = value
    return properties


def _emit(obj) -> None:
    if dataclasses.is_dataclass(obj):
        obj = dataclasses.asdict(obj)
    elif isinstance(obj, list):
        obj = [dataclasses.asdict(o) for o in obj]
    elif isinstance(obj, dict):
        obj = {k: dataclasses.asdict(v) for k, v in obj.items()}
    print(json.dumps(obj, indent=2, sort_keys=True))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="Query and manage ZFS pools through the zpool utility.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    parser.add_argument('--debug', action='store_true', help="Log executed commands and parser details to stderr")
    sub = parser.add_subparsers(dest='command', required=True)

    sub.add_parser('list', help="List pools with their attributes")

    get_p = sub.add_parser('get', help="Show attributes of one pool")
    get_p.add_argument('name')

    status_p = sub.add_parser('status', help="Show pool status and vdev tree")
    status_p.add_argument('name', nargs='?', help="Pool name (all pools when omitted)")
    status_p.add_argument('--exact', action='store_true', help="Report exact byte values (zpool -p)")

    create_p = sub.add_parser('create', help="Create a pool")
    create_p.add_argument('-o', dest='properties', action='append', metavar='KEY=VALUE', help="Pool property, repeatable")
    create_p.add_argument('-O', dest='fs_properties', action='append', metavar='KEY=VALUE', help="Root dataset property, repeatable")
    create_p.add_argument('-f', dest='force', action='store_true', help="Force use of in-use or mismatched vdevs")
    create_p.add_argument('-n', dest='dry_run', action='store_true', help="Show the configuration without creating the pool")
    create_p.add_argument('-m', dest='mountpoint', help="Root dataset mountpoint")
    create_p.add_argument('-R', dest='altroot', help="Alternate root")
    create_p.add_argument('name')
    create_p.add_argument('args', nargs=argparse.REMAINDER, help="Vdev specification and extra arguments (options go before NAME)")

    destroy_p = sub.add_parser('destroy', help="Destroy a pool")
    destroy_p.add_argument('name')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    set_debug_mode(args.debug or config_manager.get_bool_setting("debug_logging", constants.DEFAULT_DEBUG_LOGGING))

    try:
        if args.command == 'list':
            _emit(zpool_core.list_pools())
        elif args.command == 'get':
            _emit(zpool_core.get_pool(args.name))
        elif args.command == 'status':
            if args.name:
                _emit(zpool_core.get_pool_status(args.name, exact_bytes=args.exact))
            else:
                _emit(zpool_core.list_pool_status(exact_bytes=args.exact))
        elif args.command == 'create':
            properties = _parse_properties(parser, args.properties)
            _emit(zpool_core.create_pool(
                args.name, properties, *args.args,
                force=args.force, dry_run=args.dry_run,
                fs_properties=_parse_properties(parser, args.fs_properties),
                mountpoint=args.mountpoint, altroot=args.altroot))
        elif args.command == 'destroy':
            zpool_core.destroy_pool(args.name)
    except ZfsError as e:
        log_error("MAIN", str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

# --- END OF FILE src/pyzpool/main.py ---
