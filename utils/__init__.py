"""Book Catalog - Utilities Package

Console output helpers (ui_helpers.py) and argument validation (validators.py).
"""
