from .world import decode_world

__all__ = ["decode_world"]
