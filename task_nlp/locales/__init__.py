import logging
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from task_nlp.locales import de, en, es, fr, it, ja, nl, pt, ru, sv, uk, zh
from task_nlp.locales.types import Language, LanguagePack

logger = logging.getLogger(__name__)

LANGUAGE_PACKS: Mapping[Language, LanguagePack] = MappingProxyType(
    {
        Language.EN: en.PACK,
        Language.ES: es.PACK,
        Language.FR: fr.PACK,
        Language.DE: de.PACK,
        Language.RU: ru.PACK,
        Language.ZH: zh.PACK,
        Language.JA: ja.PACK,
        Language.IT: it.PACK,
        Language.NL: nl.PACK,
        Language.PT: pt.PACK,
        Language.SV: sv.PACK,
        Language.UK: uk.PACK,
    }
)

DEFAULT_LANGUAGE = Language.EN


def resolve_language(language_code) -> Language:
    """Normalize any caller-supplied code ("pt-BR", "EN", None, 42) to a supported Language."""
    if isinstance(language_code, Language):
        return language_code
    if not isinstance(language_code, str):
        return DEFAULT_LANGUAGE

    normalized = language_code.strip().lower().replace("_", "-").split("-")[0]
    try:
        return Language(normalized)
    except ValueError:
        logger.debug(f"Unsupported language code {language_code!r}, using {DEFAULT_LANGUAGE.value}")
        return DEFAULT_LANGUAGE


def get_pack(language_code: Optional[str]) -> LanguagePack:
    return LANGUAGE_PACKS[resolve_language(language_code)]


def is_supported(language_code: Optional[str]) -> bool:
    if not isinstance(language_code, str):
        return False
    return language_code.strip().lower().replace("_", "-").split("-")[0] in {lang.value for lang in Language}


def available_languages() -> List[Tuple[str, str]]:
    return [(lang.value, pack.name) for lang, pack in LANGUAGE_PACKS.items()]


__all__ = [
    "Language",
    "LanguagePack",
    "LANGUAGE_PACKS",
    "DEFAULT_LANGUAGE",
    "resolve_language",
    "get_pack",
    "is_supported",
    "available_languages",
]
