"""Small shared helpers (time formatting, number parsing)."""
