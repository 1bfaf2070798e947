"""
Translation lookup for user-visible strings.

Catalogs are looked up in ``SUSPEND_TIMER_LOCALE_DIR`` when set, otherwise in
the system locale directory. Missing catalogs fall back to the source strings.
"""

from __future__ import annotations

import gettext
import os
from typing import Mapping, Optional

DOMAIN = "suspend_timer"


def locale_dir(environ: Mapping[str, str] = os.environ) -> Optional[str]:
    value = environ.get("SUSPEND_TIMER_LOCALE_DIR", "").strip()
    return value or None


def load_translation(localedir: Optional[str] = None) -> gettext.NullTranslations:
    return gettext.translation(DOMAIN, localedir=localedir, fallback=True)


_translation = load_translation(locale_dir())


def _(message: str) -> str:
    return _translation.gettext(message)
