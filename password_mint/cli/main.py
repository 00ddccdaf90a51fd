"""
Main CLI orchestration - derive one password, or several in a session
"""

import argparse
import sys

from pydantic import ValidationError

from password_mint.cli.prompts import SESSION_FORGET, DerivationPrompts
from password_mint.config import get_settings, validate_settings
from password_mint.constants import ITERATIONS
from password_mint.errors import DerivationError
from password_mint.logging_config import setup_logging
from password_mint.schemas.derivation import CharacterClass, DerivationRequest
from password_mint.services.generator import derive_from_request
from password_mint.services.phrase_holder import RememberedPhrase


def build_parser(settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="password-mint",
        description="Derive a reproducible password from a phrase, a site and a version. "
                    "Nothing is stored.",
    )
    parser.add_argument("site", nargs="?", help="Site, app name or URL")
    parser.add_argument("--version", dest="password_version", default=None,
                        help=f"Rotation version (default: {settings.MINT_DEFAULT_VERSION})")
    parser.add_argument("--length", type=int, default=None,
                        help=f"Password length (default: {settings.MINT_DEFAULT_LENGTH})")
    parser.add_argument("--level", choices=list(ITERATIONS),
                        default=settings.MINT_DEFAULT_SECURITY_LEVEL,
                        help="PBKDF2 iteration level")
    parser.add_argument("--no-upper", action="store_true", help="Disable uppercase letters")
    parser.add_argument("--no-lower", action="store_true", help="Disable lowercase letters")
    parser.add_argument("--no-digits", action="store_true", help="Disable digits")
    parser.add_argument("--no-symbols", action="store_true", help="Disable symbols")
    parser.add_argument("--exclude-ambiguous", action=argparse.BooleanOptionalAction,
                        default=settings.MINT_EXCLUDE_AMBIGUOUS,
                        help="Drop O 0 I l 1")
    parser.add_argument("--exclude-problematic", action=argparse.BooleanOptionalAction,
                        default=settings.MINT_EXCLUDE_PROBLEMATIC,
                        help="Drop quotes, space, backslash and backtick")
    parser.add_argument("--show-site", action="store_true",
                        help="Print the normalized site the password is bound to")
    parser.add_argument("--session", action="store_true",
                        help="Derive passwords for several sites in one run")
    parser.add_argument("--remember", action="store_true",
                        help="In a session, keep the phrase in memory until exit")
    return parser


def enabled_classes_from_args(args) -> frozenset:
    disabled = set()
    if args.no_upper:
        disabled.add(CharacterClass.UPPER)
    if args.no_lower:
        disabled.add(CharacterClass.LOWER)
    if args.no_digits:
        disabled.add(CharacterClass.DIGIT)
    if args.no_symbols:
        disabled.add(CharacterClass.SYMBOL)
    return frozenset(CharacterClass) - disabled


def make_request(args, site, phrase, version, length) -> DerivationRequest:
    return DerivationRequest(
        phrase=phrase,
        site=site,
        version=version,
        length=length,
        security_level=args.level,
        enabled_classes=enabled_classes_from_args(args),
        exclude_ambiguous=args.exclude_ambiguous,
        exclude_problematic=args.exclude_problematic,
    )


def print_error(message):
    print(f"[MINT] ERROR: {message}", file=sys.stderr)


def derive_and_print(request: DerivationRequest, show_site: bool) -> bool:
    """Derive and print the password. Returns False on failure."""
    try:
        result = derive_from_request(request)
    except DerivationError as e:
        print_error(e.message)
        return False

    if show_site:
        print(f"[MINT] Site: {result.normalized_site}", file=sys.stderr)
    print(result.password.get_secret_value())
    return True


def run_once(args, settings, prompts: DerivationPrompts) -> int:
    site = args.site or prompts.prompt_site()
    phrase = prompts.prompt_phrase()
    version = args.password_version
    if version is None:
        version = settings.MINT_DEFAULT_VERSION
    length = args.length if args.length is not None else settings.MINT_DEFAULT_LENGTH

    try:
        request = make_request(args, site, phrase, version, length)
    except ValidationError as e:
        print_error(_format_validation_error(e))
        return 1

    return 0 if derive_and_print(request, args.show_site) else 1


def run_session(args, settings, prompts: DerivationPrompts) -> int:
    """Loop over sites until the user quits; the phrase never outlives the loop"""
    remember = args.remember or prompts.confirm_remember()
    failures = 0

    with RememberedPhrase(enabled=remember) as holder:
        site = args.site
        while True:
            if site is None:
                site = prompts.prompt_session_site()
                if site is None:
                    break
                if site == SESSION_FORGET:
                    holder.forget()
                    print("[MINT] Phrase forgotten.")
                    site = None
                    continue

            phrase = holder.get() or prompts.prompt_phrase()
            version = args.password_version or prompts.prompt_version(settings.MINT_DEFAULT_VERSION)
            length = args.length or prompts.prompt_length(settings.MINT_DEFAULT_LENGTH)

            try:
                request = make_request(args, site, phrase, version, length)
            except ValidationError as e:
                print_error(_format_validation_error(e))
                failures += 1
                site = None
                continue

            if derive_and_print(request, args.show_site):
                holder.remember(phrase)
            else:
                failures += 1
            site = None

    print("[MINT] Session ended. Nothing was stored.", file=sys.stderr)
    return 1 if failures else 0


def _format_validation_error(error: ValidationError) -> str:
    problems = []
    for item in error.errors():
        field = ".".join(str(part) for part in item.get("loc", ()))
        problems.append(f"{field}: {item.get('msg')}")
    return "; ".join(problems)


def main(argv=None) -> int:
    """Main entry point"""
    try:
        settings = get_settings()
    except ValidationError as e:
        print_error("Invalid configuration: " + _format_validation_error(e))
        return 1

    try:
        validate_settings(settings)
    except ValueError as e:
        print_error(e)
        return 1

    setup_logging(settings.MINT_LOG_LEVEL)

    args = build_parser(settings).parse_args(argv)
    prompts = DerivationPrompts()

    try:
        if args.session:
            return run_session(args, settings, prompts)
        return run_once(args, settings, prompts)
    except (KeyboardInterrupt, EOFError):
        print("\n[MINT] Aborted.", file=sys.stderr)
        return 130


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
