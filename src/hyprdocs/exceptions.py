"""Custom exceptions for hyprdocs."""


class HyprdocsError(Exception):
    """Base exception for hyprdocs operations."""


class DocumentStructureError(HyprdocsError):
    """Document does not have the heading structure the extractor relies on."""


class ParseError(HyprdocsError):
    """Error during content parsing."""


class LoadError(HyprdocsError):
    """Documentation source could not be loaded."""


class HeadingNotFoundError(HyprdocsError):
    """No heading matches the requested anchor slug."""


class SerializationError(HyprdocsError):
    """Error while serializing a node back to markup."""


class ModelBuildError(HyprdocsError):
    """The documentation model could not be built."""
