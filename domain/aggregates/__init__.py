from .want import Want

__all__ = ["Want"]
