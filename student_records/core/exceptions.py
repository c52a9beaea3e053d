"""Storage error types shared by every repository backend."""


class StorageError(OSError):
    """
    Raised when the backing store cannot be read or written.
    
    The original cause (an OSError, a decode error or a database error) is
    chained as ``__cause__``.
    """
