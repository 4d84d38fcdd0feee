"""Runtime services (logging, profiling)."""
