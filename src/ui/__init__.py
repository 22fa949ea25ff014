"""Screen-space UI helpers (text rendering)."""
