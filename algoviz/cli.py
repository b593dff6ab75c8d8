# cli.py
"""
Command line entry point.

    algoviz run INTENT.json [--state STATE.json] [-o OUT.json] [--validate] [--render]
    algoviz say "insert 5 at head" "insert 3 at tail" [--structure list] [--render]
    algoviz validate TRACE.json [TRACE.json ...] [--schema SCHEMA.json]
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from .command_parser import parse_command
from .config import load_config
from .dispatcher import dispatch
from .renderer import TextRenderer
from .session import VisualizerSession
from .trace import final_description, to_json_compatible
from .validate import validate_trace, validate_trace_file

logger = logging.getLogger("algoviz")


def setup_logging(level="INFO", log_file=None):
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s: %(message)s",
        handlers=handlers,
    )


def _read_json(path):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _write_json(obj, path):
    with open(path, "w", encoding="utf-8") as f:
        json.dump(to_json_compatible(obj), f, indent=2, ensure_ascii=False)


def cmd_run(args, config):
    intent = _read_json(args.intent_file)
    state = _read_json(args.state) if args.state else intent.get("state")
    result = dispatch(
        intent,
        state,
        list_kind=intent.get("list_kind", config.list_kind),
        tree_type=intent.get("tree_type", config.tree_type),
        dataset_type=intent.get("dataset_type", config.dataset_type),
    )
    logger.info(f"{result['algorithm']['name']}: {len(result['steps'])} steps, committed={result['committed']}")

    if args.validate and not validate_trace(to_json_compatible(result)):
        return 1
    if args.render:
        print(TextRenderer(result).render())
    if args.output:
        _write_json(result, args.output)
        logger.info(f"Trace saved to: {Path(args.output).resolve()}")
    elif not args.render:
        print(json.dumps(to_json_compatible(result), indent=2, ensure_ascii=False))
    return 0


def cmd_say(args, config):
    session = VisualizerSession(args.structure, config=config)
    for text in args.commands:
        intent = parse_command(text, session.structure)
        if intent is None:
            print(f"> {text}\n  (not understood)")
            continue
        result = session.execute(intent)
        if "algorithm" not in result:
            print(f"> {text}\n  {result['description']}")
            continue
        if args.render:
            print(f"> {text}\n{TextRenderer(result).render()}")
        else:
            print(f"> {text}\n  {final_description(result)}")
    print(json.dumps(to_json_compatible(session.stats()), ensure_ascii=False))
    return 0


def cmd_validate(args, config):
    results = [validate_trace_file(path, args.schema) for path in args.trace_files]
    logger.info(f"Total: {len(results)} files, Success: {sum(results)}, Failed: {len(results) - sum(results)}.")
    return 0 if all(results) else 1


def build_parser():
    parser = argparse.ArgumentParser(prog="algoviz", description="Step traces for linked lists, trees and graphs")
    parser.add_argument("--config", type=str, default=None, help="JSON config file")
    parser.add_argument("--log-level", type=str, default="INFO", help="DEBUG, INFO, WARNING or ERROR")
    parser.add_argument("--log-file", type=str, default=None, help="Also write the log to this file")
    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="Run one intent JSON file and emit its trace")
    run.add_argument("intent_file", type=str, help="Path to intent JSON file")
    run.add_argument("--state", type=str, default=None, help="JSON file holding the current structure")
    run.add_argument("-o", "--output", type=str, default=None, help="Write the trace to this file")
    run.add_argument("--validate", action="store_true", help="Validate the trace against the schema")
    run.add_argument("--render", action="store_true", help="Print every frame as text")
    run.set_defaults(func=cmd_run)

    say = sub.add_parser("say", help="Run text commands in a fresh session")
    say.add_argument("commands", nargs="+", help='Commands such as "insert 5 at head"')
    say.add_argument("--structure", type=str, default="list", choices=["list", "tree", "graph"])
    say.add_argument("--render", action="store_true", help="Print every frame as text")
    say.set_defaults(func=cmd_say)

    validate = sub.add_parser("validate", help="Validate trace JSON files")
    validate.add_argument("trace_files", nargs="+", help="Trace JSON files")
    validate.add_argument("--schema", type=str, default=None, help="Schema file to use instead of the built-in one")
    validate.set_defaults(func=cmd_validate)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)
    try:
        config = load_config(args.config)
        return args.func(args, config)
    except (OSError, json.JSONDecodeError, ValueError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
