"""Error taxonomy for palette-extractor.

Every error carries a fixed, user-facing `hint`. Errors that wrap a
collaborator failure (decoder, engine, encoder) keep the original exception
only as `__cause__`; its text is never part of the message.
"""

from pathlib import Path


class PaletteError(Exception):
    """Base class for all errors reported to the user."""

    hint = ''

    def __init__(self, message: str, hint: str | None = None):
        super().__init__(message)
        self.message = message
        if hint is not None:
            self.hint = hint


class InvalidQuality(PaletteError):
    hint = 'Pass a quality between 1 (best, slowest) and 10 (fastest).'

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"The quality provided isn't valid: {value}")


class InvalidMaxColors(PaletteError):
    hint = 'Pass a maximum colour count between 2 and 255.'

    def __init__(self, value: int):
        self.value = value
        super().__init__(f'The maximum colours provided are incorrect: {value}')


class InvalidImagePath(PaletteError):
    hint = 'Check the path for typos and make sure the file exists.'

    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(f'The image path does not exist: {path}')


class InvalidAlgorithm(PaletteError):
    hint = 'Use one of: kmeans, median-cut.'

    def __init__(self, value: str):
        self.value = value
        super().__init__(f'Unknown palette algorithm: {value!r}')


class ImageOpenError(PaletteError):
    hint = 'Make sure the file is a readable, uncorrupted image (PNG, JPEG, GIF, BMP, WebP, ...).'

    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(f'Failed to open image at {path}')


class PaletteExtractionError(PaletteError):
    hint = 'Try a lower quality value or a different image.'

    def __init__(self):
        super().__init__('Failed to get color palette')


class ImageSaveError(PaletteError):
    hint = 'Use a supported extension (.png, .jpg, .gif, .bmp, .webp) in a writable directory.'

    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(f'Failed to save palette grid to {path}')
