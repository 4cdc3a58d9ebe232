"""Project settings for cleanread.

Plain module-level constants.  Extraction thresholds are tuned for
article-style pages; changing them changes which element wins selection.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------
# BeautifulSoup tree builder for full page documents.
HTML_PARSER = "lxml"

# Builder for sanitizer fragments.  Unlike lxml it adds no <html>/<body>
# wrappers and never wraps loose text in <p>, so re-parsing sanitized output
# yields the same tree.
FRAGMENT_PARSER = "html.parser"

# ---------------------------------------------------------------------------
# Main-content selection
# ---------------------------------------------------------------------------
# Flattened text (stripped) below this length is never returned as an article.
MIN_TEXT_LENGTH = 100

# <article> (multi-article case) and <main> must exceed this to be chosen.
LANDMARK_MIN_TEXT_LENGTH = 200

# Paragraphs at or below this length do not contribute to a container score.
PARAGRAPH_MIN_TEXT_LENGTH = 40

# Subtracted from a container score once per level of nesting.
DEPTH_PENALTY = 10

EXCERPT_LENGTH = 200

# ---------------------------------------------------------------------------
# Distractor removal
# ---------------------------------------------------------------------------
# Labels shorter than this are matched by prefix as well as exact text.
SHORT_LABEL_LENGTH = 50

# Divs with more element children than this are skipped by the text pass.
MAX_LABEL_CHILDREN = 5

# Ancestors inspected above an "also read" label.
RELATED_ANCESTOR_DEPTH = 3

# Following siblings inspected when no ancestor qualified.
RELATED_SIBLING_SCAN = 5

# A paragraph longer than this ends the sibling scan (back in the article).
RELATED_STOP_PARAGRAPH_LENGTH = 50

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
