#!/usr/bin/env python3
"""Drive a number form from stdin.

Each line replaces the form input; a line like ``:DE`` or ``:fr`` switches the
selector. The abbreviation form debounces input the same way the web form does.
"""
import asyncio
import sys

# Load .env file
from dotenv import load_dotenv
load_dotenv()

from number_humanizer.config import Settings
from number_humanizer.form import NumberForm, abbreviation_form, compact_currency_form
from number_humanizer.utils.logging import setup_logging


async def main(mode: str, selector: str | None) -> None:
    settings = Settings()
    setup_logging(settings.log_level, json_output=settings.log_json)

    form: NumberForm = abbreviation_form(settings) if mode == "abbreviate" else compact_currency_form(settings)
    if selector:
        form.on_selector_change(selector)

    options = ", ".join(form.pipeline.selector_options)
    print(f"{form.pipeline.name} form, selector {form.selector} (options: {options})")
    print("Type a number, ':<selector>' to switch, Ctrl-D to quit.")

    loop = asyncio.get_running_loop()
    while True:
        line = await loop.run_in_executor(None, sys.stdin.readline)
        if not line:
            break
        line = line.rstrip("\n")

        if line.startswith(":"):
            form.on_selector_change(line[1:].strip())
        else:
            form.on_input_change(line)
            # Let a debounced recompute fire before echoing the result
            await asyncio.sleep(settings.debounce_seconds + 0.05 if mode == "abbreviate" else 0)

        print(f"[{form.selector}] {form.display_text}")


if __name__ == "__main__":
    mode = sys.argv[1] if len(sys.argv) > 1 else "compact"
    if mode not in ("compact", "abbreviate"):
        print("Usage: python scripts/interactive_form.py [compact|abbreviate] [selector]")
        sys.exit(1)

    asyncio.run(main(mode, sys.argv[2] if len(sys.argv) > 2 else None))
