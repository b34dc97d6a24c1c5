"""
Common constants and lexical patterns used across the jsonaccess library.
"""

# Single-character escapes; any other escaped character decodes to itself
JSON_ESCAPE_MAP = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    '"': '"',
    "\\": "\\",
    "/": "/",
}

STRUCTURAL_CHARS = "{}[]:,"

# One alternative per lexeme class, tried at the current position.
WHITESPACE_PATTERN = r"[ \t\r\n]+"
STRUCTURAL_PATTERN = r"[{}\[\]:,]"
# Terminated by an unescaped quote or by the end of the line.
STRING_PATTERN = r'"(?:\\.|[^"\\\r\n])*(?:"|(?=[\r\n])|\Z)'
NUMBER_PATTERN = r"-?[0-9]+(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?"
KEYWORD_PATTERN = r"null|true|false"

TOKEN_PATTERN = (
    rf"(?P<whitespace>{WHITESPACE_PATTERN})"
    rf"|(?P<structural>{STRUCTURAL_PATTERN})"
    rf"|(?P<string>{STRING_PATTERN})"
    rf"|(?P<number>{NUMBER_PATTERN})"
    rf"|(?P<keyword>{KEYWORD_PATTERN})"
)

# Splits a string lexeme into its body; the closing quote may be absent.
STRING_BODY_PATTERN = r'"((?:\\.|[^"\\\r\n])*)"?\Z'

SURROGATE_PAIR_PATTERN = r"\\u([dD][89abAB][0-9a-fA-F]{2})\\u([dD][c-fC-F][0-9a-fA-F]{2})"
ESCAPE_PATTERN = rf"{SURROGATE_PAIR_PATTERN}|\\u([0-9a-fA-F]{{4}})|\\(.)"
