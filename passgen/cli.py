"""passgen command-line interface.

Usage examples:
    python -m passgen generate -n 20 -m allChars --no-symbols -c 5
    python -m passgen score mypassword -f passwords.txt
    python -m passgen watch
"""

import argparse
import asyncio
import sys

from pydantic import ValidationError

from passgen.config import config, configure_logging
from passgen.generator import generate_password
from passgen.session import PasswordSession
from passgen.settings import Mode, PasswordSettings
from passgen.store import SETTINGS_KEY, MemoryStore
from passgen.strength import label_for, get_scorer


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="passgen",
        description="Generate passwords and estimate their strength.",
    )
    parser.add_argument("--log-level", default=None, help="Logging level")
    parser.add_argument(
        "--scorer",
        choices=["zxcvbn", "entropy"],
        default=config.scorer,
        help=f"Strength scorer (default: {config.scorer})",
    )
    sub = parser.add_subparsers(dest="command")

    # ── generate ───────────────────────────────────────────────────────
    gen_p = sub.add_parser("generate", help="Generate passwords")
    _add_settings_arguments(gen_p)
    gen_p.add_argument(
        "-c", "--count", type=int, default=1,
        help="Number of passwords to generate (default: 1)",
    )

    # ── score ──────────────────────────────────────────────────────────
    score_p = sub.add_parser("score", help="Estimate password strength")
    score_p.add_argument("passwords", nargs="*", help="Passwords to score")
    score_p.add_argument(
        "-f", "--file",
        help="Read passwords from a file (one per line)",
    )

    # ── watch ──────────────────────────────────────────────────────────
    watch_p = sub.add_parser(
        "watch",
        help="Interactive session: type passwords, scores follow",
    )
    _add_settings_arguments(watch_p)

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "generate":
        return asyncio.run(_cmd_generate(args))
    if args.command == "score":
        return asyncio.run(_cmd_score(args))
    if args.command == "watch":
        return asyncio.run(_cmd_watch(args))

    parser.print_help()
    return 0


def _add_settings_arguments(p: argparse.ArgumentParser) -> None:
    defaults = PasswordSettings()
    p.add_argument(
        "-n", "--length", type=int, default=defaults.password_length,
        help=f"Password length (default: {defaults.password_length})",
    )
    p.add_argument(
        "-m", "--mode",
        choices=[m.value for m in Mode],
        default=defaults.mode.value,
        help=f"Generation mode (default: {defaults.mode.value})",
    )
    p.add_argument("--no-lowercase", action="store_true")
    p.add_argument("--no-uppercase", action="store_true")
    p.add_argument("--no-numbers", action="store_true")
    p.add_argument("--no-symbols", action="store_true")


def _settings_from_args(args: argparse.Namespace) -> PasswordSettings:
    return PasswordSettings(
        password_length=args.length,
        mode=Mode(args.mode),
        with_lowercase=not args.no_lowercase,
        with_uppercase=not args.no_uppercase,
        with_numbers=not args.no_numbers,
        with_symbols=not args.no_symbols,
    )


def _bar(score: int | None) -> str:
    filled = 0 if score is None else score + 1
    return "#" * filled + "-" * (5 - filled)


async def _cmd_generate(args: argparse.Namespace) -> int:
    try:
        settings = _settings_from_args(args)
    except ValidationError as exc:
        print(f"Error: invalid settings: {exc}", file=sys.stderr)
        return 1

    scorer = get_scorer(args.scorer)
    for _ in range(args.count):
        pwd = generate_password(settings)
        result = await scorer(pwd)
        print(f"  {pwd}  ({label_for(result['score'])})")

    return 0


async def _cmd_score(args: argparse.Namespace) -> int:
    passwords = list(args.passwords)

    if args.file:
        with open(args.file) as f:
            passwords.extend(line.strip() for line in f if line.strip())

    if not passwords:
        print("Error: provide passwords as arguments or via --file", file=sys.stderr)
        return 1

    scorer = get_scorer(args.scorer)
    results = await asyncio.gather(*(scorer(pwd) for pwd in passwords))
    for pwd, result in zip(passwords, results):
        score = result["score"]
        print(f"  [{_bar(score)}] {label_for(score):<11}  '{pwd}'")
        for w in result.get("warnings", []):
            print(f"            ! {w}")

    return 0


async def _cmd_watch(args: argparse.Namespace) -> int:
    try:
        settings = _settings_from_args(args)
    except ValidationError as exc:
        print(f"Error: invalid settings: {exc}", file=sys.stderr)
        return 1

    store = MemoryStore({SETTINGS_KEY: settings.to_storage()})
    session = PasswordSession(store, scorer=get_scorer(args.scorer))

    def show(score: int | None) -> None:
        shown = "*" * len(session.password) if session.hidden else session.password
        print(f"  [{_bar(score)}] {label_for(score):<11}  {shown}")

    session.evaluator.on_score = show
    print("Type a password, or :regen, :mode <mode>, :length <n>, :show, :quit")

    async with session:
        while True:
            line = await asyncio.to_thread(sys.stdin.readline)
            if not line:
                break
            line = line.rstrip("\n")
            if line == ":quit":
                break
            if line == ":regen":
                session.regenerate()
            elif line == ":show":
                session.toggle_hidden()
                show(session.score)
            elif line.startswith((":mode ", ":length ")):
                command, _, value = line.partition(" ")
                field = "mode" if command == ":mode" else "password_length"
                try:
                    session.update_settings(**{field: value.strip()})
                except ValidationError as exc:
                    print(f"Error: {exc.errors()[0]['msg']}", file=sys.stderr)
            else:
                session.edit_password(line)
        await session.join()

    return 0


if __name__ == "__main__":
    sys.exit(main())
