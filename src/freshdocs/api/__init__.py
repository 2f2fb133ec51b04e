"""HTTP API exposing build-time state."""
