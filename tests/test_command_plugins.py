"""
Tests for command plugins.

This module tests the CopyImage and MinMaxRadius commands and the
CommandPlugin base interface.
"""

import dask.array as da
import numpy as np
import pytest
from numpy.testing import assert_array_equal

from labelops import InvalidArgumentError, compute_min_max_radii
from labelops.plugins import CommandPlugin, CopyImage, MinMaxRadius


class TestCommandPlugin:
    """Test the base CommandPlugin interface."""

    def test_base_methods_raise(self):
        """Base class methods raise NotImplementedError."""
        plugin = CommandPlugin()

        with pytest.raises(NotImplementedError):
            plugin.run(np.zeros((2, 2)))

        with pytest.raises(NotImplementedError):
            plugin.command_name()

        with pytest.raises(NotImplementedError):
            plugin.command_description()

        with pytest.raises(NotImplementedError):
            plugin.command_menu_path()

    def test_plugin_interface(self):
        """A minimal subclass provides name, description and menu path."""

        class InvertCommand(CommandPlugin):
            def run(self, image):
                return image.max() - image

            def command_name(self):
                return "Invert"

            def command_description(self):
                return "Inverts an image"

            def command_menu_path(self):
                return "DeveloperPlugins>Invert"

        plugin = InvertCommand(param1=10)

        assert plugin.name == "Invert"
        assert plugin.description == "Inverts an image"
        assert plugin.menu_path == "DeveloperPlugins>Invert"
        assert plugin.params == {"param1": 10}
        assert_array_equal(plugin.run(np.array([0, 1, 3])), [3, 2, 0])


class TestCopyImage:
    """Tests for the pixel-wise copy command."""

    def test_metadata(self):
        plugin = CopyImage()

        assert plugin.name == "Copy Image"
        assert plugin.description == "Copies an image pixel-wise"
        assert plugin.menu_path == "DeveloperPlugins>Copy Image"

    def test_numpy_copy(self):
        image = np.random.rand(8, 9, 3).astype(np.float32)

        copy = CopyImage().run(image)

        assert isinstance(copy, np.ndarray)
        assert copy.dtype == image.dtype
        assert_array_equal(copy, image)
        assert not np.shares_memory(copy, image)

    def test_copy_is_independent(self):
        image = np.arange(6, dtype=np.uint16).reshape(2, 3)

        copy = CopyImage().run(image)
        copy[0, 0] = 100

        assert image[0, 0] == 0

    def test_dask_copy(self):
        data = np.arange(64, dtype=np.int32).reshape(4, 4, 4)
        image = da.from_array(data, chunks=(2, 2, 2))

        copy = CopyImage().run(image)

        assert isinstance(copy, da.Array)
        assert copy.dtype == image.dtype
        assert copy.chunks == image.chunks
        assert_array_equal(copy.compute(), data)

    def test_repr(self):
        assert repr(CopyImage()) == "CopyImage()"


class TestMinMaxRadius:
    """Tests for the min/max radius command."""

    def test_metadata(self):
        plugin = MinMaxRadius()

        assert plugin.name == "Min Max"
        assert plugin.menu_path == "DeveloperPlugins>Min Max"
        assert "min and max radius" in plugin.description

    def test_dims_from_text(self):
        assert MinMaxRadius(selected_dims="1, 2").selected_dims == [1, 2]

    def test_dims_from_list(self):
        assert MinMaxRadius(selected_dims=[2, 0]).selected_dims == [2, 0]

    def test_default_dims(self):
        assert MinMaxRadius().selected_dims == [0, 1]

    def test_unparsable_dims(self):
        with pytest.raises(InvalidArgumentError):
            MinMaxRadius(selected_dims="x,y")

    def test_run_matches_function(self, stack_labels):
        radii = MinMaxRadius(selected_dims="1,2").run(stack_labels)

        assert_array_equal(radii, compute_min_max_radii(stack_labels, [1, 2]))

    def test_wrong_dimension_count(self, stack_labels):
        plugin = MinMaxRadius(selected_dims="0")

        with pytest.raises(InvalidArgumentError, match="two-dimensional"):
            plugin.run(stack_labels)

    def test_custom_geometry(self, square_labels, fixed_geometry):
        radii = MinMaxRadius(selected_dims="0,1", geometry=fixed_geometry).run(
            square_labels
        )

        assert_array_equal(radii, [1.0, 10.0])

    def test_repr(self):
        assert repr(MinMaxRadius(selected_dims="1,2")) == "MinMaxRadius(selected_dims=1,2)"
