from .polling import Deadline, poll, poll_sync
from .server import PocketIcServer, parse_port

__all__ = ['Deadline', 'poll', 'poll_sync', 'PocketIcServer', 'parse_port']
