"""Error taxonomy for the OCR client.

Every error carries the underlying engine message behind a short prefix
naming the step that failed. The original exception is chained as
``__cause__``.
"""
from __future__ import annotations


class OCRError(Exception):
    """Base class for all OCR client errors."""


class OCRConfigurationError(OCRError):
    """The engine could not be configured with the requested languages."""


class OCRValidationError(OCRError):
    """The input was rejected before the engine was touched."""


class OCREngineError(OCRError):
    """The engine failed to load the provided image."""


class OCRRecognitionError(OCRError):
    """Text extraction failed after the image was loaded."""


class OCRReleaseError(OCRError):
    """The engine failed to free its session."""


class OCRNotInstalledError(OCRError):
    """The tesseract binary is not on the search path."""


class OCRClientReleasedError(OCRError):
    """A recognition call was made on a client that was already closed."""
