"""Story template engine: blank markers, substitution and word wrap.

Typical usage::

    from fill_in_blank.template import scan_labels, substitute, word_wrap

    labels = scan_labels(story)
    filled = substitute(story, responses)
    print(word_wrap(filled, 70))
"""

from fill_in_blank.template.markers import Marker, TextRun, scan_labels, substitute, tokenize
from fill_in_blank.template.wrap import check_width, word_wrap

__all__ = [
    "Marker",
    "TextRun",
    "check_width",
    "scan_labels",
    "substitute",
    "tokenize",
    "word_wrap",
]
