"""Path placeholder grammar.

A placeholder is ``{name}`` where *name* is an identifier. It stands for
exactly one path segment.
"""

import re

# {name}: name must start with a letter or underscore
PLACEHOLDER = re.compile(r"\{([a-zA-Z_][a-zA-Z0-9_]*)\}")

# What a placeholder captures: one or more characters, never "/"
SEGMENT = r"[^/]+"
