"""
Text utilities for handling Arabic text and numbers.
"""

ARABIC_DIGITS = ['٠', '١', '٢', '٣', '٤', '٥', '٦', '٧', '٨', '٩']


def to_arabic_number(number: int) -> str:
    """
    Convert a number to its Arabic-Indic numeral representation.

    Args:
        number: Non-negative integer to convert

    Returns:
        String containing the number in Arabic numerals

    Examples:
        >>> to_arabic_number(123)
        '١٢٣'
        >>> to_arabic_number(55)
        '٥٥'
    """
    return ''.join(ARABIC_DIGITS[int(d)] for d in str(number))


def format_reference(surah: int, ayah: int, arabic: bool = False) -> str:
    """Format a verse reference as 'surah:ayah', optionally in Arabic numerals."""
    if arabic:
        return f"{to_arabic_number(surah)}:{to_arabic_number(ayah)}"
    return f"{surah}:{ayah}"
