"""Rotas web do E-Plenarius"""

from .users import setup_user_routes
from .camara import setup_camara_routes

__all__ = [
    "setup_user_routes",
    "setup_camara_routes",
]
