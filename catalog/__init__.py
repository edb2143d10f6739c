"""Book Catalog - Core Application Package

This package contains the core catalog modules including:
- Book records (book.py)
- CSV record loading (loader.py)
- In-memory library store (library.py)
- Typed commands (commands/)
- Error types (errors.py)
"""
