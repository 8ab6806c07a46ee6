"""Internal tooling for repository hygiene checks.

This package hosts guard scripts that keep a working tree clean:
- No sensitive files (dotenv, keys, credentials, IDE secrets)
- No oversized files and no video files
- No trailing whitespace; exactly one final newline
- Valid, unique frontmatter in agents/, skills/ and commands/

Each guard is runnable on its own; `python -m tools.guard` runs them all.
"""
