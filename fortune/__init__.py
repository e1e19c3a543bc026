"""Fortune lookup client.

Validates a fortune request, sends it to the fortune API, and returns
either a Prefecture or one classified FortuneError.
"""

__version__ = "0.1.0"
