"""Internal implementation modules for dgweights."""
