"""Pure types for the journal parser (no I/O)."""
