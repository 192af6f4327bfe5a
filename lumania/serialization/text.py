"""Color code formatting for display text."""

__all__ = [
    "SECTION_SIGN",
    "COLOR_CODES",
    "translate_alternate_color_codes",
]

# Native formatting marker used by the game client
SECTION_SIGN = "§"

# Colors 0-9a-f, formats k-o, reset r, hex prefix x
COLOR_CODES = "0123456789AaBbCcDdEeFfKkLlMmNnOoRrXx"


def translate_alternate_color_codes(alt_char: str, text: str) -> str:
    """
    Replace *alt_char* followed by a color code character with native markup.

    The code character is lowercased. A marker not followed by a valid code
    character is left untouched, e.g. with '&': 'a &b c' becomes 'a §b c',
    while 'rock & roll' is unchanged.

    Args:
        alt_char (str): The alternate marker character, usually '&'
        text (str): Text containing alternate color codes

    Returns:
        str: Text with native color codes
    """
    chars = list(text)
    for i in range(len(chars) - 1):
        if chars[i] == alt_char and chars[i + 1] in COLOR_CODES:
            chars[i] = SECTION_SIGN
            chars[i + 1] = chars[i + 1].lower()
    return "".join(chars)
