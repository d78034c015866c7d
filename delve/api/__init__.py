"""HTTP adapter exposing a GameSession to a presentation client."""
