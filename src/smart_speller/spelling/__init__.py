"""SymSpell-style spelling correction core."""

from .deletion_index import DeletionIndex, build_deletion_index, deletions
from .edit_distance import distance, trimmed_distance
from .frequency_table import FrequencyTable, load_frequency_table
from .lookup import LookupEngine, is_pass_through
from .models import RankedSentence, SentenceCorrectionResult, WordSuggestion
from .sentence_expander import SentenceExpander
from .speller import SmartSpeller

__all__ = [
    "DeletionIndex",
    "FrequencyTable",
    "LookupEngine",
    "RankedSentence",
    "SentenceCorrectionResult",
    "SentenceExpander",
    "SmartSpeller",
    "WordSuggestion",
    "build_deletion_index",
    "deletions",
    "distance",
    "is_pass_through",
    "load_frequency_table",
    "trimmed_distance",
]
