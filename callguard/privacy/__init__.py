"""Role-based response filtering, masking and content encryption.

Modules:
    classification: static field classes (forbidden, masked, encrypted)
    masking: total display-masking functions
    encryption: AES-256-GCM payload cipher
    filters: recursive role-based filter
    builders: per-entity allow-list responses
    validation: forbidden-field contract check

Usage:
    from callguard.privacy.filters import filter_response_by_role

    safe = filter_response_by_role(call_rows, role="client")
"""
