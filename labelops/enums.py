"""Enumeration classes for labelops type definitions."""

from enum import Enum, auto


class ImageType(Enum):
    """Enumeration of supported image file formats.

    Attributes:
        NUMPY: NumPy ``.npy`` array file
        NIFTI: NIfTI format (``.nii`` or ``.nii.gz``)
        UNKNOWN: Unknown or unsupported format
    """

    NUMPY = auto()
    NIFTI = auto()
    UNKNOWN = auto()
