"""Cross-cutting logging, tracing and metrics helpers."""
