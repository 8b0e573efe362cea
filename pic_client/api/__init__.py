from .client import PocketIcClient

__all__ = ['PocketIcClient']
