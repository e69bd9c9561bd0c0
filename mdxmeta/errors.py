"""Exception types raised at the mdxmeta command boundary."""


class MdxMetaError(RuntimeError):
    """Base class for faults that abort a whole batch run."""


class ConfigError(MdxMetaError):
    """Raised when the configuration file or a run option cannot be used."""


class InputError(MdxMetaError):
    """Raised when the set of documents to process cannot be determined."""
