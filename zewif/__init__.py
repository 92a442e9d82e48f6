"""Binary parsing tools and value types for the Zcash Wallet Interchange Format."""

__version__ = "0.1.0"