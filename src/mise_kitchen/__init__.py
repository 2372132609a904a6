"""
Mise Kitchen - recipe application layer around the Mise core.

Recipe and import models, import parsing, step editing, sharing, and the CLI.
"""
