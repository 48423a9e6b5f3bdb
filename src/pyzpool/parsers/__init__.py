from .zpool import ZPoolParser, parse_error_count

__all__ = ['ZPoolParser', 'parse_error_count']
