# recipe_harvest/services/utils.py
# Text cleanup shared by extractors
# - NBSP from WYSIWYG editors -> plain space
# - newline/tab runs left by <br> and indentation -> one space

from __future__ import annotations
import re

_BREAKS = re.compile(r"[\r\n\t]+")

def clean_text(s: str) -> str:
    # Total and idempotent: clean_text(clean_text(s)) == clean_text(s)
    s = (s or "").replace("\xa0", " ")
    s = _BREAKS.sub(" ", s)
    return s.strip()
