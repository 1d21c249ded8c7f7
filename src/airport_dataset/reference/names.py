"""Local-language and Chinese-script name derivation from OSM tags."""

import logging
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from airport_dataset.reference.countries import CountryLanguages

logger = logging.getLogger(__name__)

ScriptConverter = Callable[[str], str]

CHINESE_NAME_KEYS = ("name:zh-CN", "name:zh-Hans", "name:zh", "name:zh-Hant")
CHINESE_SCRIPT_COUNTRIES = frozenset({"CN", "TW", "HK", "MO"})


@dataclass(frozen=True)
class LocalName:
    """Derived local name and the language it was looked up in."""

    name: Optional[str]
    lang: Optional[str]


def _get(tags: Mapping[str, str], key: str) -> Optional[str]:
    value = tags.get(key)
    return value if value else None


def pick_local_name(
    tags: Mapping[str, str], languages: CountryLanguages, country: Optional[str]
) -> LocalName:
    """
    Prefer name:<lang> for the country's language, else the plain name.

    When the country has a language but only the plain name exists, the
    language is still reported. If neither tag exists both fields are None.
    """
    lang = languages.language_for(country)
    name = _get(tags, "name")
    if not lang:
        return LocalName(name=name, lang=None)

    localized = _get(tags, f"name:{lang}")
    if localized:
        return LocalName(name=localized, lang=lang)
    if name:
        return LocalName(name=name, lang=lang)
    return LocalName(name=None, lang=None)


def pick_chinese_name(tags: Mapping[str, str], country: Optional[str]) -> Optional[str]:
    """First Chinese name tag present, else the plain name in Chinese-script countries."""
    for key in CHINESE_NAME_KEYS:
        value = _get(tags, key)
        if value:
            return value
    if country and country in CHINESE_SCRIPT_COUNTRIES:
        return _get(tags, "name")
    return None


def to_simplified(value: Optional[str], converter: Optional[ScriptConverter]) -> Optional[str]:
    """Convert to Simplified Chinese. Returns None if there is nothing to convert or no converter."""
    if not value or converter is None:
        return None
    try:
        return converter(value) or None
    except Exception as e:
        logger.debug("Simplified conversion failed for %r: %s", value, e)
        return None


def load_simplified_converter() -> Optional[ScriptConverter]:
    """
    Traditional (Taiwan standard) -> Simplified converter backed by OpenCC.

    OpenCC is an optional extra (`pip install airport-dataset[zh]`);
    returns None when it is not installed.
    """
    try:
        from opencc import OpenCC
    except ImportError:
        logger.info("opencc not installed; name_zh_hans will be null")
        return None
    return OpenCC("tw2s").convert
