"""HTTP endpoints for listing races and sporting events."""
