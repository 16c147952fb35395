"""Observability: structured logging with PII masking, Prometheus metrics."""
