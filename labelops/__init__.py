from .labeling import InvalidArgumentError, LabelMap, LabelRegion, parse_dim_indices
from .analysis import RegionRadiusAnalyzer, compute_min_max_radii
from .io import load_image, save_image, save_radii
from .logging import configure_logging, get_logger

__all__ = [
    "LabelMap",
    "LabelRegion",
    "InvalidArgumentError",
    "RegionRadiusAnalyzer",
    "compute_min_max_radii",
    "parse_dim_indices",
    "load_image",
    "save_image",
    "save_radii",
    "configure_logging",
    "get_logger",
]
