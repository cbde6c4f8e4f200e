"""Host integrations for textmemento."""
