"""JSON contracts for scanner output."""
