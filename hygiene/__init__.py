"""Repository hygiene package.

Provides typed settings, structured logging, the error taxonomy, and the
frontmatter schema shared by the guard scripts under ``tools/guards``.
"""
