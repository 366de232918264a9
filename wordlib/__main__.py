"""Main entry point for the wordlib command."""

from loguru import logger

from wordlib.cli import create_parser
from wordlib.core import load_config
from wordlib.pipeline import run_query
from wordlib.utils import add_log_file_handler, setup_logger


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config, args, parser)
    except ValueError as e:
        parser.error(str(e))

    setup_logger(verbose=config.verbose, debug=config.debug)
    if config.log_file:
        add_log_file_handler(config.log_file, verbose=config.verbose, debug=config.debug)

    if config.verbose:
        logger.info("Configuration:")
        logger.info(f"  Source: {config.source}")
        if config.word_file:
            logger.info(f"  Word file: {config.word_file}")
        if config.output:
            logger.info(f"  Output: {config.output}")
        logger.info("")

    try:
        result = run_query(config)
    except KeyboardInterrupt:
        logger.warning("⚠️  Query interrupted by user")
        raise
    except Exception:
        if config.verbose:
            logger.error("✗ Query failed")
        raise

    if not config.output:
        for word in result:
            print(word)


if __name__ == "__main__":
    main()
