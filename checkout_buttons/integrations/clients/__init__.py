"""Mock and real clients for the collaborators defined in ``contracts``."""
