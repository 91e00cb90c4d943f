"""Cross-cutting infrastructure: config, logging, exceptions and DI wiring."""
