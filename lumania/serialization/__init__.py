"""
Value Serialization

This module contains the domain value types stored in config files and the
codecs mapping them onto store paths:
- Location and ItemStack models
- Color code formatting for display text
- Location and item codecs
"""
