"""CLI for PassGen — generate, score, serve, config."""

import argparse
import logging
from rich import print
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .config import config_path, load_config, set_option
from .errors import PasswordGenError
from .evaluator import score_password
from .generator import generate_many
from .models import StrengthLevel
from .service import resolve_policy, validate_count

LEVEL_STYLES = {
    StrengthLevel.WEAK: "red",
    StrengthLevel.MEDIUM: "yellow",
    StrengthLevel.STRONG: "green",
    StrengthLevel.VERY_STRONG: "bold green",
}

def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )

def cmd_generate(args):
    count = validate_count(args.copies)
    policy = resolve_policy({
        "length": args.length,
        "includeUppercase": not args.no_upper,
        "includeLowercase": not args.no_lower,
        "includeNumbers": not args.no_digits,
        "includeSymbols": not args.no_symbols,
        "excludeAmbiguous": args.exclude_ambiguous,
    })
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#", width=4)
    table.add_column("Password")
    table.add_column("Strength")
    for i, pw in enumerate(generate_many(policy, count)):
        report = score_password(pw)
        style = LEVEL_STYLES[report.level]
        table.add_row(str(i + 1), escape(pw), f"[{style}]{report.level.value}[/{style}] ({report.score}/7)")
    print(table)

def cmd_score(args):
    report = score_password(args.password)
    style = LEVEL_STYLES[report.level]
    header = f"Score: {report.score} / 7 — [{style}]{report.level.value}[/{style}]"
    body = "\n".join(f" • {remark}" for remark in report.feedback)
    print(Panel(body, title=header))

def cmd_serve(args):
    from .web.api import create_app

    cfg = load_config()
    host = args.host or cfg["host"]
    port = args.port or cfg["port"]
    logging.getLogger(__name__).info("serving on http://%s:%s", host, port)
    create_app(cfg).run(host=host, port=port, debug=args.debug or cfg["debug"])

def cmd_config(args):
    if args.key is not None:
        if args.value is None:
            print("[red]Please provide a value to store.[/red]")
            return 1
        value = set_option(args.key, args.value)
        print(f"[green]Saved {args.key} = {escape(repr(value))} to[/green] {escape(config_path())}")
        return 0
    table = Table(show_header=True, header_style="bold cyan", title=escape(config_path()))
    table.add_column("Setting")
    table.add_column("Value")
    for key, value in load_config().items():
        table.add_row(key, escape(repr(value)))
    print(table)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="passgen")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--length", type=int, default=12, help="Password length (4-128)")
    gen.add_argument("--no-symbols", action="store_true", help="Disable symbols")
    gen.add_argument("--no-upper", action="store_true", help="Disable uppercase")
    gen.add_argument("--no-lower", action="store_true", help="Disable lowercase")
    gen.add_argument("--no-digits", action="store_true", help="Disable digits")
    gen.add_argument("--exclude-ambiguous", action="store_true", help="Leave out i l 1 L o 0 O")
    gen.add_argument("--copies", type=int, default=1, help="How many passwords to generate (1-20)")
    gen.set_defaults(func=cmd_generate)

    sc = sub.add_parser("score", help="Score a password and show feedback")
    sc.add_argument("password", type=str, help="Password to evaluate (wrap in quotes)")
    sc.set_defaults(func=cmd_score)

    srv = sub.add_parser("serve", help="Run the HTTP API")
    srv.add_argument("--host", type=str, help="Bind address")
    srv.add_argument("--port", type=int, help="Listen port")
    srv.add_argument("--debug", action="store_true", help="Enable Flask debug mode")
    srv.set_defaults(func=cmd_serve)

    cfg = sub.add_parser("config", help="Show settings, or store one with KEY VALUE")
    cfg.add_argument("key", nargs="?", help="Setting name (host, port, debug, log_level, cors_origin)")
    cfg.add_argument("value", nargs="?", help="New value; JSON literals such as 8080 or false keep their type")
    cfg.set_defaults(func=cmd_config)
    return parser

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging(load_config()["log_level"])
    try:
        return args.func(args) or 0
    except PasswordGenError as e:
        print(f"[red]{e.message}[/red]")
        return 1

if __name__ == "__main__":
    raise SystemExit(main())
