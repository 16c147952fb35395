"""Requester context, resource ownership and content access policy."""
