# pellet_duel/__init__.py - Two-player server-authoritative pellet duel
