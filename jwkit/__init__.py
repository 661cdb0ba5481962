"""JSON Web Key types, base64 helpers, key information and conversions to cryptography keys."""

__version__ = "0.1.0"