"""
CredScan - Local file scanner for credential patterns and literal queries

Loads local text files and scans them for:
- user@domain:password credential patterns
- Arbitrary literal substrings, with every occurrence highlighted

Copyright (c) 2026 CredScan Contributors
Licensed under the Apache License 2.0
"""

__version__ = "1.0.0"


__all__ = [
    "__version__",
]
