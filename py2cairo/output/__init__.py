"""Report output"""
from .json_formatter import TranslationJSONFormatter

__all__ = ['TranslationJSONFormatter']
