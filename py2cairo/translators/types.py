"""
Python type annotation to Cairo type mapping
"""

from types import MappingProxyType
from typing import Mapping, Optional

from ..core.config import PY_TYPE_TO_CAIRO, FALLBACK_CAIRO_TYPE


class TypeMapper:
    """
    Closed lookup table from annotation text to Cairo primitive types.

    Lookup is an exact, case-sensitive match on the literal annotation text.
    Anything not in the table, including a missing annotation, resolves to
    the fallback type.
    """

    def __init__(self,
                 table: Optional[Mapping[str, str]] = None,
                 fallback: str = FALLBACK_CAIRO_TYPE):
        self._table = MappingProxyType(dict(PY_TYPE_TO_CAIRO if table is None else table))
        self._fallback = fallback

    @property
    def table(self) -> Mapping[str, str]:
        return self._table

    @property
    def fallback(self) -> str:
        return self._fallback

    def resolve(self, type_text: Optional[str]) -> str:
        if type_text is None:
            return self._fallback
        return self._table.get(type_text, self._fallback)

    def __repr__(self):
        return f"TypeMapper({dict(self._table)!r}, fallback={self._fallback!r})"


DEFAULT_TYPE_MAPPER = TypeMapper()
