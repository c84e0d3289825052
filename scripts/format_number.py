#!/usr/bin/env python3
"""Format a single number through one of the pipelines."""
import sys

# Load .env file
from dotenv import load_dotenv
load_dotenv()

from number_humanizer.config import Settings
from number_humanizer.models.results import FormStatus
from number_humanizer.pipeline import AbbreviationPipeline, CompactCurrencyPipeline
from number_humanizer.utils.logging import setup_logging


def main(args: list[str]) -> int:
    """Run the number through the chosen pipeline and print the result."""
    settings = Settings()
    setup_logging(settings.log_level, json_output=settings.log_json)

    abbreviate = "--abbreviate" in args
    positional = [a for a in args if a != "--abbreviate"]
    if not positional:
        print("Error: no number given")
        return 1
    raw = positional[0]

    if abbreviate:
        pipeline = AbbreviationPipeline()
        selector = positional[1] if len(positional) > 1 else settings.default_format
    else:
        pipeline = CompactCurrencyPipeline()
        selector = positional[1] if len(positional) > 1 else settings.default_country

    result = pipeline.run(raw, selector)

    if result.status is FormStatus.INVALID:
        print(f"Error: {result.message}")
        return 1
    if result.status is FormStatus.EMPTY:
        print("Nothing to format")
        return 1

    print(f"Input: {raw}  ({pipeline.name}, {selector})")
    print("-" * 50)
    for field, value in result.output.model_dump().items():
        print(f"{field.capitalize()}: {value}")
    return 0


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python scripts/format_number.py <number> [selector] [--abbreviate]")
        print()
        print("Examples:")
        print("  python scripts/format_number.py 1234567 US")
        print("  python scripts/format_number.py 1234567 de --abbreviate")
        sys.exit(1)

    sys.exit(main(sys.argv[1:]))
