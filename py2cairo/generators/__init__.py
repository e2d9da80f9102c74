"""Target code generation"""
from .cairo import generate_cairo_contract

__all__ = ['generate_cairo_contract']
