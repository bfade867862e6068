"""
Common constants and mappings used across the jsonrescue library.
"""

# Private-use code points, never produced by JSON encoders
ESCAPED_QUOTE_SENTINEL = "\ue000ESCQ\ue001"
ESCAPED_QUOTE = '\\"'

BYTE_ORDER_MARK = "\ufeff"

# Python literals emitted in place of JSON ones
FOREIGN_LITERALS = {
    "True": "true",
    "False": "false",
    "None": "null",
}

# JavaScript literals only the aggressive pass rewrites
AGGRESSIVE_LITERALS = {
    **FOREIGN_LITERALS,
    "undefined": "null",
}

OBJECT_BRACKETS = ("{", "}")
ARRAY_BRACKETS = ("[", "]")

# Characters that may follow a closed single-quoted key or value
LITERAL_FOLLOW_CHARS = ",:]}"
