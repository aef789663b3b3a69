"""
Diario: a tiny terminal journal.

A menu-driven notebook that provides:
- Append-only capture of free-text notes
- A single plain UTF-8 file as the whole journal
- Read-back of the full log on demand
"""

__version__ = "0.1.0"
