"""Text rendering and artifact output."""
