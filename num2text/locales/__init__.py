"""
Locale registry: resolves a language code to its LocaleBinding.

The built-in locales are validated and published at import time. After
that the registry is only read, except through ``register_locale``, which
validates a new binding and swaps it in under a lock.
"""

from __future__ import annotations

import logging
import threading

from ..exceptions import Num2TextError, UnsupportedLocaleError
from . import ar, en, es, hi, ja, ru
from .base import LocaleBinding, LocaleTokens, WordProvider, validate_binding

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_registry: dict[str, LocaleBinding] = {}


def normalize_code(code: str) -> str:
    """'en-US', 'EN_us' and 'en' all resolve to 'en'."""
    return code.strip().replace("_", "-").split("-")[0].lower()


def register_locale(binding: LocaleBinding) -> None:
    """Validate ``binding`` and make it resolvable by its code."""
    try:
        validate_binding(binding)
    except Num2TextError:
        logger.error("Locale %s failed validation", binding.code)
        raise
    code = normalize_code(binding.code)
    with _lock:
        _registry[code] = binding
    logger.debug("Registered locale %s (%s)", code, binding.name)


def get_locale(code: str) -> LocaleBinding:
    """Return the binding for ``code``.

    Raises:
        UnsupportedLocaleError: if no binding is registered for the code.
    """
    key = normalize_code(code)
    binding = _registry.get(key)
    if binding is None:
        raise UnsupportedLocaleError(
            f"Unsupported language code '{code}'",
            details={"code": code, "available": available_locales()},
        )
    return binding


def resolve_locale(code: str | None, default: str = "en") -> LocaleBinding:
    """Like ``get_locale`` but falls back to ``default`` for unknown codes."""
    if code:
        key = normalize_code(code)
        if key in _registry:
            return _registry[key]
        logger.warning("Unknown language code %r, using %r", code, default)
    return get_locale(default)


def available_locales() -> list[str]:
    return sorted(_registry)


for _module in (en, ru, es, ja, hi, ar):
    register_locale(_module.BINDING)


__all__ = [
    "LocaleBinding",
    "LocaleTokens",
    "WordProvider",
    "available_locales",
    "get_locale",
    "normalize_code",
    "register_locale",
    "resolve_locale",
]
