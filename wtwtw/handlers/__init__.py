# wtwtw/handlers/__init__.py
from .picks_handler import PicksHandler

__all__ = ["PicksHandler"]
