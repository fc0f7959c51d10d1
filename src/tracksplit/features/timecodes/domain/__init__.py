from .models import TimecodePair

__all__ = ["TimecodePair"]
