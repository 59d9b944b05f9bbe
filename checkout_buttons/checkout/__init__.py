"""Host checkout state."""
