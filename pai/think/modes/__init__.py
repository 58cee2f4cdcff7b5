"""One scaffold generator per thinking mode."""
