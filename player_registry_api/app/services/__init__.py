"""
Service layer.

``player_rules`` and ``player_query`` are pure and never touch the
database; ``player_service`` combines them with SQLite storage.
"""
