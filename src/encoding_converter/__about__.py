# encoding_converter/__about__.py

APP_NAME        = "Encoding Converter"
APP_TITLE       = "Integer ⇆ Sign-Magnitude / 1's / 2's Complement Converter"
AUTHOR          = "Wired Square"
COPYRIGHT_YEAR  = "2025"
COPYRIGHT       = f"© {COPYRIGHT_YEAR} {AUTHOR}"


__version__ = "0.1.0"

__all__ = [
    "__version__",
    "APP_NAME", "APP_TITLE",
    "AUTHOR", "COPYRIGHT_YEAR", "COPYRIGHT",
]

