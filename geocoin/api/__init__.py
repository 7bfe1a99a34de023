"""HTTP API exposing the game session."""
