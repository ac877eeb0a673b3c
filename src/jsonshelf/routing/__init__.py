"""Routing — static paths plus one trailing catch-all parameter.

Routes are registered during setup and compiled into an immutable
lookup structure when the app freezes.
"""
