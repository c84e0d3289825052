"""Make formatted strings safe to place in markup.

Runs on every displayed string, including ones built only from the static
locale tables.
"""
from __future__ import annotations
import html
import re

_SCRIPT_OR_STYLE = re.compile(r'<(script|style)\b[^>]*>.*?(?:</\1\s*>|$)', re.IGNORECASE | re.DOTALL)
_COMMENT = re.compile(r'<!--.*?(?:-->|$)', re.DOTALL)
_TAG = re.compile(r'</?[A-Za-z!/?][^<>]*>')


def sanitize_for_display(text: str) -> str:
    """Drop markup, then escape ``&``, ``<`` and ``>``.

    Entities are decoded before escaping so that running this twice gives the
    same result as running it once.
    """
    if not text:
        return ""

    stripped = _SCRIPT_OR_STYLE.sub('', text)
    stripped = _COMMENT.sub('', stripped)
    stripped = _TAG.sub('', stripped)
    return html.escape(html.unescape(stripped), quote=False)
