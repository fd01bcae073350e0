from .validator import validate_root_list, pretty_summary
from .io import read_words, write_words

__all__ = ["validate_root_list", "pretty_summary", "read_words", "write_words"]
