"""py2cairo FastAPI Server"""
from .app import app

__all__ = ['app']
