import numpy as np
import pytest

from labelops.plugins.geometry.base import GeometryPlugin, hookimpl


@pytest.fixture
def square_labels():
    """40x40 label image with a single 20x20 square (label 1)."""
    labels = np.zeros((40, 40), dtype=np.uint16)
    labels[10:30, 10:30] = 1
    return labels


@pytest.fixture
def disk_labels():
    """64x64 label image with a disk of radius 15 centered at (32, 32)."""
    rows, cols = np.mgrid[:64, :64]
    labels = np.zeros((64, 64), dtype=np.uint16)
    labels[(rows - 32) ** 2 + (cols - 32) ** 2 <= 15**2] = 1
    return labels


@pytest.fixture
def stack_labels():
    """3x48x48 stack: label 1 in every slice, label 2 in slices 1 and 2 only."""
    labels = np.zeros((3, 48, 48), dtype=np.uint16)
    labels[:, 4:20, 4:20] = 1
    labels[1:, 28:44, 30:40] = 2
    return labels


class FixedGeometry(GeometryPlugin):
    """Geometry backend returning a fixed centroid and polygon."""

    def __init__(self, centroid=(0.0, 0.0), polygon=((3.0, 4.0), (0.0, 1.0), (6.0, 8.0))):
        super().__init__()
        self.centroid = np.asarray(centroid, dtype=np.float64)
        self.polygon = np.asarray(polygon, dtype=np.float64).reshape(-1, 2)
        self.closed_args = []
        self.regions = []

    @hookimpl
    def compute_centroid(self, region):
        self.regions.append(region)
        return self.centroid

    @hookimpl
    def compute_contour(self, region, closed):
        self.closed_args.append(closed)
        return self.polygon

    @hookimpl
    def geometry_plugin_name(self):
        return "Fixed Geometry"

    @hookimpl
    def geometry_plugin_description(self):
        return "Returns the same centroid and polygon for every region"


@pytest.fixture
def fixed_geometry():
    return FixedGeometry()


@pytest.fixture
def empty_contour_geometry():
    return FixedGeometry(polygon=np.empty((0, 2)))
