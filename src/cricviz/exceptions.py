class CricvizException(Exception):
    """Base class for errors raised by cricviz."""
