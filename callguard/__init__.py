"""callguard: role-based response filtering and content encryption for a
multi-tenant voice-calling platform."""

__version__ = "0.1.0"
