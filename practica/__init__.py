"""Classic programming exercises and a small contact book stored as binary records."""

__version__ = "0.1.0"
__all__ = ["basics", "challenges", "cli", "contacts", "drills", "textbook", "tricks"]