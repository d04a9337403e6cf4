"""Task providers and caller-side volatility resolution."""
