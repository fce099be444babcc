"""Fight the Landlord server helpers: buffers, hashing, Base64, AES, Redis rooms, MySQL and static HTTP."""

__version__ = "0.1.0"