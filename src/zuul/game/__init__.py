"""Game logic for Zuul."""
