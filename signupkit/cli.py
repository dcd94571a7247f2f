"""CLI for signupkit: score, generate, check-email, validate, draft, serve, gui."""

import argparse
import asyncio
from getpass import getpass

from rich import print
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .availability import check_email_availability, status_text
from .config import load_config, configure_logging, seconds
from .drafts import DraftStore
from .errors import ConfigurationError, StorageError
from .generator import generate_signup_password
from .strength import evaluate
from .suggestions import suggest
from .validation import validate_form, is_form_valid

TIER_STYLE = {"low": "red", "mid": "yellow", "high": "green"}


def cmd_score(args):
    sugg = suggest(args.password)
    report = sugg["report"]
    style = TIER_STYLE[report.tier.value]
    header = f"Strength: {report.percent}% — [{style}]{report.tier.value}[/{style}]"
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Criterion")
    table.add_column("Met")
    for name, ok in report.criteria.items():
        table.add_row(name, "[green]yes[/green]" if ok else "[red]no[/red]")
    print(Panel(f"Passed {report.passed} of {len(report.criteria)} criteria", title=header))
    print(table)
    if sugg["suggestions"]:
        print("\n[bold]Suggestions:[/bold]")
        for s in sugg["suggestions"]:
            print(f" • {s}")
        print(f"\n[bold]Example:[/bold] {escape(sugg['examples'][0])}")
    return 0


def cmd_generate(args):
    if args.copies < 1:
        print("[red]--copies must be at least 1[/red]")
        return 1
    for i in range(args.copies):
        pw = generate_signup_password()
        print(f"[bold green]Password #{i+1}:[/bold green] {escape(pw)}")
    return 0


def cmd_check_email(args):
    email = args.email.strip()
    if not email:
        print("[red]Email is required[/red]")
        return 1
    available = asyncio.run(check_email_availability(email, args.delay))
    colour = "green" if available else "red"
    print(f"[{colour}]{status_text(available)}[/{colour}]")
    return 0 if available else 1


def cmd_validate(args):
    password = args.password if args.password is not None else getpass("Password: ")
    confirm = args.confirm if args.confirm is not None else getpass("Confirm password: ")
    errors = validate_form(args.email, password, confirm, args.terms)
    for field, msg in errors.items():
        if msg:
            print(f"[red]{field}:[/red] {msg}")
        else:
            print(f"[green]{field}:[/green] ok")
    report = evaluate(password)
    print(f"Password strength: {report.percent}% ({report.tier.value})")
    return 0 if is_form_valid(errors) else 1


def cmd_draft_show(args):
    draft = DraftStore(args.file).load()
    if not draft:
        print("[yellow]No saved draft.[/yellow]")
        return 0
    print(f"Email: {escape(draft.get('email', ''))}")
    print(f"Terms accepted: {draft.get('terms', False)}")
    return 0


def cmd_draft_clear(args):
    DraftStore(args.file).clear()
    print("[green]Draft cleared.[/green]")
    return 0


def cmd_serve(args):
    from .spweb.api import app
    app.run(host=args.host, port=args.port, debug=args.debug)
    return 0


def cmd_gui(args):
    from .gui import main as gui_main
    gui_main()
    return 0


def build_parser(cfg=None):
    cfg = cfg or load_config()
    parser = argparse.ArgumentParser(prog="signupkit")
    parser.add_argument("--log-level", default=cfg.get("log_level"), help="Logging level (DEBUG, INFO, ...)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    sc = sub.add_parser("score", help="Score a password against the signup criteria")
    sc.add_argument("password", type=str, help="Password to evaluate (wrap in quotes)")
    sc.set_defaults(func=cmd_score)

    gen = sub.add_parser("generate", help="Generate signup passwords (16 chars, every criterion met)")
    gen.add_argument("--copies", type=int, default=1, help="How many passwords to generate")
    gen.set_defaults(func=cmd_generate)

    ce = sub.add_parser("check-email", help="Simulated email availability check")
    ce.add_argument("email", type=str)
    ce.add_argument("--delay", type=float, default=seconds(cfg, "availability_delay_ms"),
                    help="Simulated latency in seconds")
    ce.set_defaults(func=cmd_check_email)

    va = sub.add_parser("validate", help="Validate signup fields")
    va.add_argument("--email", type=str, default="")
    va.add_argument("--password", type=str, help="Password (prompted when omitted)")
    va.add_argument("--confirm", type=str, help="Password confirmation (prompted when omitted)")
    va.add_argument("--terms", action="store_true", help="Accept the terms")
    va.set_defaults(func=cmd_validate)

    d = sub.add_parser("draft", help="Saved signup draft")
    dsub = d.add_subparsers(dest="dcmd", required=True)
    d_show = dsub.add_parser("show", help="Show the saved draft")
    d_show.add_argument("--file", "-f", type=str, default=cfg.get("draft_path"), help="Draft file path")
    d_show.set_defaults(func=cmd_draft_show)
    d_clear = dsub.add_parser("clear", help="Delete the saved draft")
    d_clear.add_argument("--file", "-f", type=str, default=cfg.get("draft_path"), help="Draft file path")
    d_clear.set_defaults(func=cmd_draft_clear)

    sv = sub.add_parser("serve", help="Run the signup web app")
    sv.add_argument("--host", default="127.0.0.1")
    sv.add_argument("--port", type=int, default=5000)
    sv.add_argument("--debug", action="store_true")
    sv.set_defaults(func=cmd_serve)

    gui = sub.add_parser("gui", help="Open the desktop signup window")
    gui.set_defaults(func=cmd_gui)
    return parser


def main(argv=None):
    try:
        parser = build_parser()
    except ConfigurationError as e:
        print(f"[red]Bad configuration:[/red] {escape(str(e))}")
        return 2
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    try:
        return args.func(args)
    except StorageError as e:
        print(f"[red]{escape(str(e))}[/red]")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
