"""
Restaurant directory.

Responsibilities:
- Load the static restaurant fixture (restaurants and their menus).
- Validate it into immutable records.
- Expose lookups and sorted views without ever mutating the source.
"""
