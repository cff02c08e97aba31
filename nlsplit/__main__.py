"""Main entry point for nlsplit package."""

from loguru import logger

from nlsplit.cli import create_parser
from nlsplit.core import Config, Terminator, load_config
from nlsplit.core.terminators import format_terminator_display, format_terminator_set
from nlsplit.pipeline import run_split
from nlsplit.utils.logging import setup_logger


def _print_terminator_list() -> None:
    """Print every catalog entry, one per line."""
    for terminator in Terminator:
        print(f"{terminator.name:<20} {format_terminator_display(terminator)}")


def _validate_config(config: Config, chunk_size_given: bool) -> None:
    """Warn about settings that will have no effect."""
    if config.format != "text" and chunk_size_given:
        logger.warning(
            f"--chunk-size is ignored for {config.format} output (input is read whole)"
        )
    if config.format != "text" and config.keep_terminators:
        logger.warning(
            f"--keep-terminators is ignored for {config.format} output "
            "(records report content and terminator separately)"
        )
    if not config.terminators:
        logger.warning("No terminators selected: the input will be written as a single line")


def _print_config_summary(config: Config) -> None:
    """Print configuration summary if verbose."""
    if config.verbose:
        logger.info("Configuration:")
        logger.info(f"  Input: {config.input or 'stdin'}")
        logger.info(f"  Output: {config.output or 'stdout'}")
        logger.info(f"  Terminators: {format_terminator_set(config.terminators)}")
        logger.info(f"  Keep terminators: {config.keep_terminators}")
        logger.info(f"  Format: {config.format}")
        logger.info("")


def _run_split_with_error_handling(config: Config) -> None:
    """Run the split with proper error handling."""
    try:
        run_split(config)
    except KeyboardInterrupt:
        logger.warning("Splitting interrupted by user")
        raise
    except Exception:
        if config.verbose:
            logger.error("✗ Splitting failed")
        raise


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.list_terminators:
        _print_terminator_list()
        return

    # Load configuration
    config = load_config(args.config, args, parser)

    # Setup logging
    setup_logger(verbose=config.verbose, debug=config.debug)

    # Validate configuration
    _validate_config(config, args.chunk_size is not None)

    # Print configuration summary
    _print_config_summary(config)

    # Run split
    _run_split_with_error_handling(config)


if __name__ == "__main__":
    main()
