"""Command-line interface for pathtree.

This module provides the ``pathtree`` command: it walks a directory up to a
depth limit, records every entry in a PathTree and prints the tree diagram.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution
    2: Command-line syntax error
    126: Permission denied
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (e.g., when piping to `head`)

Example:
    # List the current directory, hidden entries included, three levels deep
    $ pathtree -a 3
"""

import logging
import os
import sys

from pathtree.cli.argparser import create_parser, validate_args
from pathtree.config import ListingConfig
from pathtree.directory_scanner import DirectoryScanner
from pathtree.exclusion_rules.git_rules import GitIgnoreExclusionRules


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, at DEBUG level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_exclusion_rules(config: ListingConfig) -> GitIgnoreExclusionRules:
    """Collect the ignore files and patterns of ``config`` into one rule set.

    Raises:
        FileNotFoundError: If an ignore file does not exist.
    """
    exclusion_rules = GitIgnoreExclusionRules()
    for rules_file in config.exclude:
        exclusion_rules.load_rules(rules_file)
    for pattern in config.ignore:
        exclusion_rules.add_rule(pattern)
    return exclusion_rules


def main() -> None:
    """Main entry point for the pathtree command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        126: Permission denied
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe
    """
    try:
        parser = create_parser()
        args = parser.parse_args()
        validate_args(args)

        config = ListingConfig.from_args(args)
        configure_logging(config.verbose)

        scanner = DirectoryScanner(
            config.directory,
            show_hidden=config.show_hidden,
            max_depth=config.max_depth,
            exclusion_rules=build_exclusion_rules(config),
        )
        tree = scanner.scan()
        tree.describe(write_to_stdout=True, colorize=config.colorize)
        sys.stdout.flush()

    except BrokenPipeError:
        # Keep the interpreter from complaining about stdout again at shutdown
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(141)
    except KeyboardInterrupt:
        sys.exit(130)
    except PermissionError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(126)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
