"""Translation lookups for widget labels."""

from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"

CATALOGS: Dict[str, Dict[str, str]] = {
    "en": {
        "admin.submit": "Submit",
        "admin.cancel": "Cancel",
        "admin.input": "Input",
        "admin.choose": "Choose",
        "admin.no_data": "No data.",
        "admin.loading": "Loading",
    },
    "zh_CN": {
        "admin.submit": "提交",
        "admin.cancel": "取消",
        "admin.input": "输入",
        "admin.choose": "选择",
        "admin.no_data": "暂无数据",
        "admin.loading": "加载中",
    },
}


class Translator:
    """Dictionary-backed translator with an ``en`` fallback."""

    def __init__(self, locale: str = DEFAULT_LOCALE, catalogs: Optional[Mapping[str, Mapping[str, str]]] = None):
        self.locale = locale
        self.catalogs: Dict[str, Dict[str, str]] = {name: dict(entries) for name, entries in CATALOGS.items()}
        for name, entries in (catalogs or {}).items():
            self.catalogs.setdefault(name, {}).update(entries)
        if locale not in self.catalogs:
            logger.warning("No catalog for locale '%s'; falling back to '%s'", locale, DEFAULT_LOCALE)

    def trans(self, key: str, locale: Optional[str] = None) -> str:
        for name in (locale or self.locale, DEFAULT_LOCALE):
            catalog = self.catalogs.get(name)
            if catalog and key in catalog:
                return catalog[key]
        return key
