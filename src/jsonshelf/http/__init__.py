"""HTTP types — immutable Request and Response."""
