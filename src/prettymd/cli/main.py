"""CLI entry point for prettymd."""
import argparse
import asyncio
import logging
import os
import sys
import traceback
from pathlib import Path

from dotenv import load_dotenv

from prettymd import __version__
from prettymd.clients.base import AIModelClient
from prettymd.clients.exceptions import ApiKeyMissingError, ProviderError
from prettymd.core.exceptions import FixError, MarkdownValidationError
from prettymd.core.fix_pipeline import FixPipeline, validate_markdown_path
from prettymd.models import FixResult
from prettymd.utils.diff_runner import DiffRunner
from prettymd.utils.file_io import LocalFileIO

load_dotenv()

logger = logging.getLogger(__name__)

# Exit codes
EXIT_SUCCESS = 0
EXIT_CHANGES_PENDING = 1
EXIT_INVALID_INPUT = 2
EXIT_PROVIDER_ERROR = 3
EXIT_IO_ERROR = 4
EXIT_UNEXPECTED = 5
EXIT_KEYBOARD_INTERRUPT = 130

# Defaults
DEFAULT_STYLE = "technical"
DEFAULT_PROVIDER = "openai"
PROVIDERS = ("openai", "anthropic")
SUBCOMMANDS = frozenset({"fix"})
TOP_LEVEL_FLAGS = frozenset({"-h", "--help", "--version"})

# Environment variables
ENV_STYLE = "PRETTYMD_STYLE"
ENV_MODEL = "PRETTYMD_MODEL"
ENV_PROVIDER = "PRETTYMD_PROVIDER"
API_KEY_ENV = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
}

CHECK_FAILED_MESSAGE = "Markdown file would be modified by prettymd"
CHECK_PASSED_MESSAGE = "Markdown file is already well-formatted"


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    parser = argparse.ArgumentParser(
        prog="prettymd",
        description="AI-powered Markdown formatter for developer workflows",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    fix = subparsers.add_parser(
        "fix", help="Polish and improve existing Markdown files"
    )
    fix.add_argument("path", type=str, help="Path to the Markdown file to fix")
    fix.add_argument(
        "--in-place",
        action="store_true",
        help="Write the polished Markdown back to the file",
    )
    fix.add_argument(
        "--style",
        type=str,
        default=None,
        help=(
            "Set the tone style (concise, technical, friendly) "
            f"(default: ${ENV_STYLE} or {DEFAULT_STYLE})"
        ),
    )
    fix.add_argument(
        "--check",
        action="store_true",
        help="Exit with non-zero status if changes would be made",
    )
    fix.add_argument(
        "--mock",
        action="store_true",
        help="Use mock AI client for testing (no API key required)",
    )
    fix.add_argument(
        "--diff",
        action="store_true",
        help="Show diff between original and fixed content",
    )
    fix.add_argument(
        "--model",
        type=str,
        default=None,
        help=f"Model ID to use (default: ${ENV_MODEL} or the provider default)",
    )
    fix.add_argument(
        "--provider",
        type=str,
        default=None,
        choices=PROVIDERS,
        help=f"Model provider (default: ${ENV_PROVIDER} or {DEFAULT_PROVIDER})",
    )
    fix.add_argument("--verbose", action="store_true", help="Enable verbose output")
    return parser


def _with_default_subcommand(argv: list[str]) -> list[str]:
    """Insert 'fix' unless a subcommand or only top-level flags are given."""
    if not argv or argv[0] in SUBCOMMANDS:
        return argv
    if all(arg in TOP_LEVEL_FLAGS for arg in argv):
        return argv
    return ["fix", *argv]


def resolve_style(flag_value: str | None) -> str:
    """Resolve style: --style flag, then $PRETTYMD_STYLE, then DEFAULT_STYLE."""
    if flag_value is not None:
        return flag_value
    return os.getenv(ENV_STYLE) or DEFAULT_STYLE


def resolve_model(flag_value: str | None) -> str | None:
    if flag_value is not None:
        return flag_value
    return os.getenv(ENV_MODEL) or None


def resolve_provider(flag_value: str | None) -> str:
    if flag_value is None:
        flag_value = os.getenv(ENV_PROVIDER) or DEFAULT_PROVIDER
    provider = flag_value.lower()
    if provider not in PROVIDERS:
        raise MarkdownValidationError(
            f"Unsupported provider '{provider}'. Choose one of: {', '.join(PROVIDERS)}"
        )
    return provider


def create_client(args: argparse.Namespace) -> AIModelClient:
    """Create the model client selected by CLI arguments and environment.

    Live client imports are deferred so --mock and --help never load the
    provider SDKs.

    Raises:
        MarkdownValidationError: If the selected provider has no API key.
    """
    from prettymd.clients.mock_client import MockClient

    if args.mock:
        return MockClient()

    provider = resolve_provider(args.provider)
    env_var = API_KEY_ENV[provider]
    api_key = os.getenv(env_var)
    if not api_key:
        raise MarkdownValidationError(
            f"{env_var} environment variable is required. "
            f'Set it with: export {env_var}="..."'
        )

    model = resolve_model(args.model)
    try:
        if provider == "anthropic":
            from prettymd.clients.anthropic_client import AnthropicClient

            return AnthropicClient(api_key=api_key, model=model)

        from prettymd.clients.openai_client import OpenAIClient

        return OpenAIClient(api_key=api_key, model=model)
    except ApiKeyMissingError as exc:
        raise MarkdownValidationError(str(exc)) from exc


async def run_fix(args: argparse.Namespace, client: AIModelClient) -> FixResult:
    """Run the fix pipeline for args.path and release the client afterwards."""
    async with client:
        pipeline = FixPipeline(client=client, file_io=LocalFileIO())
        return await pipeline.fix_file(args.path, resolve_style(args.style))


def emit_result(args: argparse.Namespace, result: FixResult) -> int:
    """Write, check or print the result according to the selected mode."""
    if args.check:
        if result.has_changes:
            print(CHECK_FAILED_MESSAGE, file=sys.stderr)
            return EXIT_CHANGES_PENDING
        print(CHECK_PASSED_MESSAGE)
        return EXIT_SUCCESS

    if args.in_place:
        if result.has_changes:
            LocalFileIO().write_file(result.content, args.path)
            print(f"File updated: {args.path}")
        else:
            print(f"No changes needed for: {args.path}")
        return EXIT_SUCCESS

    if args.diff and result.has_changes:
        print(
            DiffRunner().render(
                result.original_content, result.content, Path(args.path).name
            )
        )
    else:
        print(result.content, end="")
    return EXIT_SUCCESS


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _handle_error(label: str, exc: BaseException, verbose: bool, exit_code: int) -> int:
    """Print error message to stderr and return the exit code."""
    print(f"{label}: {exc}", file=sys.stderr)
    if verbose:
        traceback.print_exc(file=sys.stderr)
    return exit_code


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code integer.
    """
    parser = build_parser()
    args = parser.parse_args(
        _with_default_subcommand(sys.argv[1:] if argv is None else list(argv))
    )
    configure_logging(args.verbose)

    try:
        validate_markdown_path(args.path)
        client = create_client(args)
        logger.debug("Using %s client", client.provider_name)
        result = asyncio.run(run_fix(args, client))
        return emit_result(args, result)

    except MarkdownValidationError as exc:
        return _handle_error("Error", exc, args.verbose, EXIT_INVALID_INPUT)

    except ProviderError as exc:
        return _handle_error("Provider error", exc, args.verbose, EXIT_PROVIDER_ERROR)

    except FixError as exc:
        return _handle_error("Fix error", exc, args.verbose, EXIT_UNEXPECTED)

    except (OSError, UnicodeDecodeError) as exc:
        return _handle_error("I/O error", exc, args.verbose, EXIT_IO_ERROR)

    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_KEYBOARD_INTERRUPT

    except Exception as exc:
        return _handle_error("Unexpected error", exc, args.verbose, EXIT_UNEXPECTED)


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
