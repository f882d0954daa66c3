"""Custom exceptions.

docs-config uses a small hierarchy of exceptions so the CLI can tell a failed
build apart from a programming error:

Example:
    >>> from docsconfig.core.exceptions import ManifestError, DocsConfigError
    >>> isinstance(ManifestError("bad toc"), DocsConfigError)
    True
    >>> try:
    ...     raise ManifestError("toc missing")
    ... except DocsConfigError as e:
    ...     print(f"Caught: {type(e).__name__}")
    Caught: ManifestError
"""

from __future__ import annotations


class DocsConfigError(Exception):
    """Base exception for docs-config.

    Example:
        >>> from docsconfig.core.exceptions import DocsConfigError
        >>> e = DocsConfigError("something went wrong")
        >>> str(e)
        'something went wrong'
    """


class ConfigurationError(DocsConfigError):
    """Settings are invalid."""


class ManifestError(DocsConfigError):
    """The table-of-contents manifest is unreadable or malformed.

    Example:
        >>> from docsconfig.core.exceptions import ManifestError
        >>> raise ManifestError("toc must be a list")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ManifestError: toc must be a list
    """


class PackageError(DocsConfigError):
    """A package descriptor is unreadable or malformed.

    Example:
        >>> from docsconfig.core.exceptions import PackageError
        >>> raise PackageError("missing name")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        PackageError: missing name
    """


class ExtractionError(DocsConfigError):
    """The metadata extractor failed for a package.

    Attributes:
        package: Name of the package being extracted.
    """

    def __init__(self, message: str, package: str | None = None) -> None:
        super().__init__(message)
        self.package = package


class UnknownNodeError(DocsConfigError):
    """A metadata node has a kind this tool does not recognize.

    Example:
        >>> from docsconfig.core.exceptions import UnknownNodeError
        >>> e = UnknownNodeError("RecordType", context="type")
        >>> str(e)
        "Unrecognized type node: 'RecordType'"
    """

    def __init__(self, kind: object, context: str = "node") -> None:
        super().__init__(f"Unrecognized {context} node: {kind!r}")
        self.kind = kind
        self.context = context
