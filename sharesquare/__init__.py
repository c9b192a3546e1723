"""Split transactions into fixed-size namespaced shares and parse transactions and blobs back out."""

__version__ = "0.1.0"