"""
Core infrastructure shared by the rest of the application.

Settings, logging setup, SQLite connection and migration helpers, and
the ``StoreError`` exception live here.
"""
