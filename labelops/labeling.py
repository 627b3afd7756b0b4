"""Label maps, slice decomposition and region enumeration.

A :class:`LabelMap` pairs an integer index image with a mapping from index
values to label sets, so a single cell may carry several labels at once.
Two-dimensional slices of a map are produced lazily with
:meth:`LabelMap.iter_slices`, and :meth:`LabelMap.regions` enumerates the
labeled regions of one slice.
"""

from __future__ import annotations

import operator
from typing import (
    Any,
    Dict,
    FrozenSet,
    Hashable,
    Iterator,
    List,
    Sequence,
    Tuple,
    Union,
)

import dask.array as da
import numpy as np
from attrs import define, field

from .logging import get_logger

logger = get_logger(__name__)


class InvalidArgumentError(ValueError):
    """Raised when an operation is given arguments it cannot work with."""

    pass


def parse_dim_indices(value: Union[str, Sequence[int]]) -> List[int]:
    """Parse axis indices given as integers or comma-separated text.

    Args:
        value: Either a sequence of integers or text such as "0,1"

    Returns:
        List of axis indices; empty for blank text

    Raises:
        InvalidArgumentError: If an entry is not an integer
    """
    if isinstance(value, str):
        if not value.strip():
            return []
        try:
            return [int(part.strip()) for part in value.split(",")]
        except ValueError:
            raise InvalidArgumentError(
                f"Could not parse axis indices from {value!r}, "
                "expected comma-separated integers such as '0,1'"
            ) from None

    try:
        return [operator.index(dim) for dim in value]
    except TypeError:
        raise InvalidArgumentError(
            f"Axis indices must be integers, got {value!r}"
        ) from None


def normalize_selected_dims(
    selected_dims: Sequence[int], ndim: int
) -> Tuple[int, int]:
    """Validate a pair of axis indices and resolve negative indices.

    Args:
        selected_dims: Axis indices spanning the plane of each slice
        ndim: Number of dimensions of the map being sliced

    Returns:
        The two axes as non-negative indices, in the order given

    Raises:
        InvalidArgumentError: If there are not exactly two indices, an index is
            out of range, or both indices name the same axis
    """
    dims = list(selected_dims)
    if len(dims) != 2:
        raise InvalidArgumentError(
            "Selected dimensions do not yield two-dimensional slices: "
            f"expected 2 axis indices, got {len(dims)} ({dims})"
        )

    normalized = []
    for dim in dims:
        try:
            dim = operator.index(dim)
        except TypeError:
            raise InvalidArgumentError(
                f"Axis index must be an integer, got {dim!r}"
            ) from None
        if not -ndim <= dim < ndim:
            raise InvalidArgumentError(
                f"Axis index {dim} is out of range for a {ndim}D label map"
            )
        normalized.append(dim % ndim)

    if normalized[0] == normalized[1]:
        raise InvalidArgumentError(
            f"Selected dimensions must name two distinct axes, got {dims}"
        )

    return normalized[0], normalized[1]


@define
class LabelRegion:
    """Cells of one 2D slice whose label set contains ``label``.

    Attributes:
        label: The label shared by every cell of the region
        mask: Boolean 2D array marking the region's cells within the slice
        position: Indices of the slice along the non-selected axes
    """

    label: Hashable
    mask: np.ndarray
    position: Tuple[int, ...] = ()

    @property
    def size(self) -> int:
        """Number of cells in the region."""
        return int(np.count_nonzero(self.mask))

    @property
    def coords(self) -> np.ndarray:
        """(N, 2) array of cell coordinates in slice axis order."""
        return np.argwhere(self.mask)


@define
class LabelMap:
    """
    N-dimensional grid in which every cell holds zero or more labels.

    The index image stores one integer per cell; ``label_sets`` maps each index
    value to the labels of the cells holding it. Index values that are missing
    from ``label_sets`` denote cells without labels.

    Attributes:
        index_img: Integer numpy or dask array
        label_sets: Mapping of index value to frozenset of labels. Its
            iteration order defines the order in which regions are enumerated.
        position: For slices, the indices along the axes that were fixed
    """

    index_img: Any
    label_sets: Dict[int, FrozenSet[Hashable]] = field(factory=dict)
    position: Tuple[int, ...] = ()
    _label_index: Dict[Hashable, List[int]] = field(
        init=False, default=None, repr=False, eq=False
    )

    @classmethod
    def from_label_image(cls, image: Any, background: int = 0) -> "LabelMap":
        """
        Build a label map from a plain integer label image.

        Every distinct value other than ``background`` becomes a label of the
        same value. Labels are ordered by value.

        Args:
            image: Integer numpy or dask array
            background: Value marking unlabeled cells

        Returns:
            LabelMap sharing the input array as its index image

        Raises:
            ValueError: If the image does not have an integer dtype
        """
        if not isinstance(image, da.Array):
            image = np.asarray(image)

        if not np.issubdtype(image.dtype, np.integer) and image.dtype != bool:
            raise ValueError(
                f"Label images must have an integer dtype, got {image.dtype}"
            )

        if isinstance(image, da.Array):
            values = da.unique(image).compute()
        else:
            values = np.unique(image)

        label_sets = {
            int(value): frozenset([int(value)])
            for value in values
            if int(value) != background
        }
        logger.debug(
            "Built label map with shape %s and %d labels", image.shape, len(label_sets)
        )
        return cls(index_img=image, label_sets=label_sets)

    @property
    def ndim(self) -> int:
        """Number of dimensions of the index image."""
        return self.index_img.ndim

    @property
    def shape(self) -> tuple:
        """Shape of the index image."""
        return tuple(self.index_img.shape)

    def label_index(self) -> Dict[Hashable, List[int]]:
        """
        Map each label to the index values whose label set contains it.

        Keys follow first-appearance order in ``label_sets``. The mapping is
        built on first use and handed on to every slice of the map.
        """
        if self._label_index is None:
            lookup: Dict[Hashable, List[int]] = {}
            for index, label_set in self.label_sets.items():
                try:
                    ordered = sorted(label_set)
                except TypeError:
                    # mixed label types
                    ordered = sorted(label_set, key=repr)
                for label in ordered:
                    lookup.setdefault(label, []).append(index)
            self._label_index = lookup
        return self._label_index

    def labels(self) -> List[Hashable]:
        """All labels of the map, in first-appearance order of ``label_sets``."""
        return list(self.label_index())

    def indices_for(self, label: Hashable) -> List[int]:
        """Index values whose label set contains ``label``."""
        return list(self.label_index().get(label, []))

    def iter_slices(self, selected_dims: Sequence[int]) -> Iterator["LabelMap"]:
        """
        Decompose the map into two-dimensional slices.

        One slice is produced for every combination of indices along the axes
        not in ``selected_dims``, in C order (last free axis fastest). The axes
        of each slice follow the order of ``selected_dims``. The dimensions are
        validated immediately; slices are produced lazily and dask-backed maps
        compute one slice at a time.

        Args:
            selected_dims: Exactly two axis indices spanning each slice

        Returns:
            Iterator of 2D LabelMap objects sharing this map's label sets

        Raises:
            InvalidArgumentError: If the selection does not name two distinct,
                existing axes
        """
        dims = normalize_selected_dims(selected_dims, self.ndim)
        return self._generate_slices(dims)

    def _generate_slices(self, dims: Tuple[int, int]) -> Iterator["LabelMap"]:
        lookup = self.label_index()
        free_axes = [axis for axis in range(self.ndim) if axis not in dims]
        free_shape = tuple(self.shape[axis] for axis in free_axes)
        transpose = dims[0] > dims[1]

        for position in np.ndindex(*free_shape):
            index = [slice(None)] * self.ndim
            for axis, value in zip(free_axes, position):
                index[axis] = value

            plane = self.index_img[tuple(index)]
            if transpose:
                plane = plane.T
            if isinstance(plane, da.Array):
                plane = plane.compute()

            logger.debug("Slice at position %s along axes %s", position, free_axes)
            label_slice = LabelMap(
                index_img=np.asarray(plane),
                label_sets=self.label_sets,
                position=position,
            )
            label_slice._label_index = lookup
            yield label_slice

    def regions(self) -> Iterator[LabelRegion]:
        """
        Enumerate the labeled regions of a two-dimensional map.

        Regions are yielded in the order of :meth:`labels`; labels without any
        cell in this map are skipped.

        Returns:
            Iterator of LabelRegion objects

        Raises:
            ValueError: If the map is not two-dimensional
        """
        if self.ndim != 2:
            raise ValueError(
                f"Regions can only be enumerated on 2D slices, got {self.ndim}D"
            )

        index_img = np.asarray(self.index_img)
        present = set(np.unique(index_img).tolist())

        for label, label_indices in self.label_index().items():
            indices = [i for i in label_indices if i in present]
            if not indices:
                continue
            if len(indices) == 1:
                mask = index_img == indices[0]
            else:
                mask = np.isin(index_img, indices)
            yield LabelRegion(label=label, mask=mask, position=self.position)
