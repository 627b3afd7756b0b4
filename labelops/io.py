"""I/O utilities for loading images and saving command outputs.

This module contains functions for:
- Detecting the format of an image file from its name
- Loading ``.npy`` and NIfTI images as dask arrays
- Saving images back to ``.npy`` or NIfTI
- Writing min/max radius results as CSV
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union

import dask.array as da
import nibabel as nib
import numpy as np

from .enums import ImageType
from .logging import get_logger

logger = get_logger(__name__)


def detect_image_type(path: Union[str, Path]) -> ImageType:
    """Infer the image format from a file name.

    Args:
        path: Path to the image file

    Returns:
        ImageType matching the file extension, or ImageType.UNKNOWN
    """
    name = str(path).lower()
    if name.endswith(".npy"):
        return ImageType.NUMPY
    if name.endswith(".nii") or name.endswith(".nii.gz"):
        return ImageType.NIFTI
    return ImageType.UNKNOWN


def load_image(path: Union[str, Path], chunks: Any = "auto") -> da.Array:
    """Load an image file as a dask array.

    NIfTI data is read with its stored dtype (no scaling to float), so integer
    label images stay integer. Unscaled NIfTI images are read chunk by chunk
    through the nibabel array proxy; scaled ones are read into memory first.

    Args:
        path: Path to a ``.npy`` or ``.nii``/``.nii.gz`` file
        chunks: Chunk specification passed to ``dask.array.from_array``

    Returns:
        Dask array holding the image data

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file format is not supported
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Image file '{path}' does not exist")

    image_type = detect_image_type(path)
    if image_type == ImageType.NUMPY:
        array = np.load(path, mmap_mode="r")
    elif image_type == ImageType.NIFTI:
        proxy = nib.load(path).dataobj
        if proxy.slope != 1.0 or proxy.inter != 0.0:
            # scaled data changes dtype on read
            array = np.asanyarray(proxy)
        else:
            array = proxy
    else:
        raise ValueError(
            f"Unsupported image format for '{path}', expected .npy, .nii or .nii.gz"
        )

    logger.debug(
        "Loaded %s image %s with shape %s and dtype %s",
        image_type.name,
        path,
        array.shape,
        array.dtype,
    )
    return da.from_array(array, chunks=chunks)


def _nifti_dtype(data: np.ndarray) -> np.dtype:
    """Pick the on-disk dtype for NIfTI output.

    64-bit integers are narrowed to 32 bits when every value fits, since
    nibabel refuses to infer a 64-bit integer header type.
    """
    if data.dtype.kind in "iu" and data.dtype.itemsize == 8:
        narrow = np.dtype(np.int32 if data.dtype.kind == "i" else np.uint32)
        info = np.iinfo(narrow)
        if data.size == 0 or (data.min() >= info.min and data.max() <= info.max):
            return narrow
    return data.dtype


def save_image(path: Union[str, Path], image: Any) -> str:
    """Save an image to ``.npy`` or NIfTI (identity affine).

    Args:
        path: Output path; the extension selects the format
        image: numpy or dask array

    Returns:
        The output path as a string

    Raises:
        ValueError: If the output format is not supported
    """
    data = image.compute() if isinstance(image, da.Array) else np.asarray(image)

    image_type = detect_image_type(path)
    if image_type == ImageType.NUMPY:
        np.save(path, data)
    elif image_type == ImageType.NIFTI:
        nib.save(nib.Nifti1Image(data, np.eye(4), dtype=_nifti_dtype(data)), str(path))
    else:
        raise ValueError(
            f"Unsupported output format for '{path}', expected .npy, .nii or .nii.gz"
        )

    logger.debug("Saved image with shape %s to %s", data.shape, path)
    return str(path)


def save_radii(path: Union[str, Path], values: np.ndarray) -> str:
    """Write a flat ``[min_1, max_1, min_2, max_2, ...]`` sequence as CSV.

    The file has a ``min_radius,max_radius`` header and one row per region.

    Args:
        path: Output CSV path
        values: Flat array of even length

    Returns:
        The output path as a string

    Raises:
        ValueError: If ``values`` has odd length
    """
    values = np.asarray(values, dtype=np.float64)
    if values.size % 2 != 0:
        raise ValueError(f"Expected an even number of values, got {values.size}")

    np.savetxt(
        path,
        values.reshape(-1, 2),
        delimiter=",",
        header="min_radius,max_radius",
        comments="",
        fmt="%.17g",
    )
    return str(path)
