# src/cli.py
from __future__ import annotations

import os
import sys
import json
import argparse
import traceback

# Ensure our package is importable regardless of CWD
sys.path.insert(0, os.path.dirname(__file__))

# ---------------------------
# Commands
# ---------------------------

def cmd_serve(port: int, host: str, debug: bool):
    from app import config, create_app
    from app.logging_config import setup_logging
    setup_logging("DEBUG" if debug else config.LOG_LEVEL)
    app = create_app()
    app.run(host=host, port=port, debug=debug)


def cmd_db_ping() -> None:
    from app.db import mongo
    results = {store: mongo.ping(store) for store in mongo.STORES}
    for store, ok in results.items():
        print(f"mongo ping ({store}):", "ok" if ok else "failed")
    if not all(results.values()):
        raise SystemExit(2)


def cmd_db_indexes() -> None:
    from app.db.mongo import ensure_indexes
    ensure_indexes()
    print("indexes ensured")


def cmd_enrollment(action: str) -> None:
    """
    action: show | open | close
    """
    from app.api.enrollment import get_enrollment, set_enrollment

    if action == "show":
        enabled = get_enrollment()
    elif action == "open":
        enabled = set_enrollment(True)
    elif action == "close":
        enabled = set_enrollment(False)
    else:
        raise SystemExit("enrollment action must be one of: show|open|close")
    print(json.dumps({"enabled": enabled}))


# ---------------------------
# Parser / main
# ---------------------------

def build_parser() -> argparse.ArgumentParser:
    # Importing config loads .env before the defaults below are read
    from app import config

    p = argparse.ArgumentParser(description="Registration & news API CLI")
    sub = p.add_subparsers(dest="cmd", required=True)

    # serve
    sp = sub.add_parser("serve", help="Run Flask server")
    sp.add_argument("--port", type=int, default=config.PORT)
    sp.add_argument("--host", default=config.HOST)
    sp.add_argument("--debug", action="store_true")
    sp.set_defaults(func=lambda a: cmd_serve(a.port, a.host, a.debug))

    # db
    sc = sub.add_parser("db", help="Database utilities")
    sc_sub = sc.add_subparsers(dest="dbcmd", required=True)
    scp = sc_sub.add_parser("ping", help="Ping both MongoDB stores")
    scp.set_defaults(func=lambda a: cmd_db_ping())
    sci = sc_sub.add_parser("indexes", help="Create missing indexes")
    sci.set_defaults(func=lambda a: cmd_db_indexes())

    # enrollment
    se = sub.add_parser("enrollment", help="Show or toggle the registration gate")
    se.add_argument("action", choices=["show", "open", "close"])
    se.set_defaults(func=lambda a: cmd_enrollment(a.action))

    return p


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except SystemExit:
        raise
    except Exception as e:
        # Surface trace on CLI errors
        print("ERROR:", e)
        traceback.print_exc()
        raise SystemExit(1)


if __name__ == "__main__":
    main()
