"""tripweek.tools package

Developer utilities (plan validation, etc.).

Keep this package's __init__ free of eager imports so modules run cleanly
via `python -m ...`.
"""

__all__: list[str] = []
