"""Infrastructure: configuration, logging, tracing and wiring."""
