"""Infrastructure adapters (storage, PDF rendering)."""
