"""Board governance portal backend."""
