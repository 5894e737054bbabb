"""Frequency-weighted spelling correction with ranked sentence candidates."""

from .spelling import SmartSpeller
from .startup_setup import get_speller, initialize_speller

__all__ = ["SmartSpeller", "get_speller", "initialize_speller"]
