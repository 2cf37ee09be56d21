from .common import is_owner

__all__ = ["is_owner"]
