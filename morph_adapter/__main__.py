"""
Command line lookup.

Usage:
    python -m morph_adapter lat mare
    python -m morph_adapter grc φιλόσοφος --test-data
    python -m morph_adapter lat cepit --config ./my_config.json
"""

import argparse
import asyncio
import json
import sys

import httpx
import structlog

from morph_adapter.core.domain.exceptions import DomainError
from morph_adapter.shared.container import container
from morph_adapter.shared.logging_config import configure_logging

logger = structlog.get_logger()


async def lookup(lang: str, word: str, use_test_data: bool = False):
    if use_test_data:
        service = container.morphology_service()
        json_obj = await service.fetch_test_data(lang, word)
        return service.transform(json_obj, word)

    use_case = container.lookup_homonym_use_case()
    return await use_case.execute(lang, word)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="morph_adapter",
        description="Look up the morphological analysis of a word",
    )
    parser.add_argument("lang", help="Language code (lat, grc, ara, per)")
    parser.add_argument("word", help="Surface form to analyze")
    parser.add_argument("--test-data", action="store_true", help="Use recorded responses instead of the service")
    parser.add_argument("--config", type=str, default=None, help="Path to an adapter config JSON")
    args = parser.parse_args(argv)

    configure_logging()

    if args.config:
        container.config.MORPH_CONFIG_PATH.from_value(args.config)

    try:
        homonym = asyncio.run(lookup(args.lang, args.word, use_test_data=args.test_data))
    except DomainError as e:
        logger.error("cli_lookup_failed", error=e.message)
        return 1
    except (httpx.HTTPError, ValueError) as e:
        logger.error("cli_lookup_failed", error=str(e), error_type=type(e).__name__)
        return 1

    if homonym is None:
        logger.info("cli_no_analysis", lang=args.lang, word=args.word)
        return 2

    print(json.dumps(homonym.model_dump(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
