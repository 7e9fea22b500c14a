"""Report renderers — terminal, JSON."""
