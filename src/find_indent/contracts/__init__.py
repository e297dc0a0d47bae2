"""JSON contracts for the artifacts the CLI and API emit."""
