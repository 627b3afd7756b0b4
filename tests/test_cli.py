"""Tests for the CLI console scripts.

This module tests the minmax-radii and copy-img console scripts by running
them as ``python -m labelops.cli``.
"""

import subprocess
import sys

import nibabel as nib
import numpy as np
import pytest
from numpy.testing import assert_array_equal

from labelops import compute_min_max_radii


class TestCLIScripts:
    """Test class for CLI console scripts."""

    @pytest.fixture
    def sample_labels(self, tmp_path, stack_labels):
        """Write the label stack fixture to a .npy file."""
        path = tmp_path / "labels.npy"
        np.save(path, stack_labels)
        return path

    def run_cli_script(self, script_name, args, expect_success=True):
        """Helper to run CLI scripts and return result."""
        cmd = [sys.executable, "-m", "labelops.cli", script_name] + args
        result = subprocess.run(cmd, capture_output=True, text=True)

        if expect_success and result.returncode != 0:
            pytest.fail(
                f"CLI script {script_name} failed with return code {result.returncode}\n"
                f"stdout: {result.stdout}\n"
                f"stderr: {result.stderr}"
            )

        return result

    def test_minmax_radii_to_csv(self, sample_labels, stack_labels, tmp_path):
        """Radii written to CSV match the library result."""
        output_csv = tmp_path / "radii.csv"

        result = self.run_cli_script(
            "minmax-radii",
            [str(sample_labels), "--dims", "1,2", "--output", str(output_csv)],
        )

        assert result.returncode == 0
        assert "Measured 5 regions" in result.stdout
        assert output_csv.exists()

        table = np.loadtxt(output_csv, delimiter=",", skiprows=1)
        expected = compute_min_max_radii(stack_labels, [1, 2]).reshape(-1, 2)
        assert_array_equal(table, expected)

    def test_minmax_radii_to_stdout(self, sample_labels, stack_labels):
        """Without --output, radii are printed as CSV rows."""
        result = self.run_cli_script("minmax-radii", [str(sample_labels), "--dims", "1,2"])

        lines = result.stdout.splitlines()
        header = lines.index("min_radius,max_radius")
        rows = [
            [float(v) for v in line.split(",")] for line in lines[header + 1 :]
        ]

        expected = compute_min_max_radii(stack_labels, [1, 2]).reshape(-1, 2)
        assert_array_equal(np.array(rows), expected)

    def test_minmax_radii_nifti_input(self, tmp_path, square_labels):
        """NIfTI label images are accepted."""
        path = tmp_path / "labels.nii.gz"
        nib.save(nib.Nifti1Image(square_labels.astype(np.int16), np.eye(4)), str(path))

        result = self.run_cli_script("minmax-radii", [str(path), "--dims", "0,1"])

        assert "Measured 1 regions" in result.stdout

    def test_minmax_radii_wrong_dimension_count(self, sample_labels):
        """A dimension list that is not a pair fails with exit code 1."""
        result = self.run_cli_script(
            "minmax-radii",
            [str(sample_labels), "--dims", "0,1,2"],
            expect_success=False,
        )

        assert result.returncode == 1
        assert "two-dimensional" in result.stderr

    def test_minmax_radii_unparsable_dims(self, sample_labels):
        result = self.run_cli_script(
            "minmax-radii", [str(sample_labels), "--dims", "a,b"], expect_success=False
        )

        assert result.returncode == 1
        assert "Error" in result.stderr

    def test_minmax_radii_missing_input(self, tmp_path):
        result = self.run_cli_script(
            "minmax-radii", [str(tmp_path / "missing.npy")], expect_success=False
        )

        assert result.returncode == 1
        assert "does not exist" in result.stderr

    def test_minmax_radii_debug_logging(self, sample_labels):
        """--log-level DEBUG prints library log messages to stderr."""
        result = self.run_cli_script(
            "minmax-radii",
            [str(sample_labels), "--dims", "1,2", "--log-level", "DEBUG"],
        )

        assert "labelops" in result.stderr
        assert "Computed min/max radii for 5 regions across 3 slices" in result.stderr

    def test_copy_img(self, sample_labels, stack_labels, tmp_path):
        """Copied images equal their input."""
        output = tmp_path / "copy.npy"

        result = self.run_cli_script("copy-img", [str(sample_labels), str(output)])

        assert "Copy completed successfully!" in result.stdout
        copy = np.load(output)
        assert copy.dtype == stack_labels.dtype
        assert_array_equal(copy, stack_labels)

    def test_copy_img_to_nifti(self, sample_labels, stack_labels, tmp_path):
        output = tmp_path / "copy.nii.gz"

        self.run_cli_script("copy-img", [str(sample_labels), str(output)])

        assert_array_equal(np.asanyarray(nib.load(str(output)).dataobj), stack_labels)

    def test_copy_img_int64_to_nifti(self, tmp_path):
        """Default-dtype integer .npy images can be copied to NIfTI."""
        source = tmp_path / "labels.npy"
        labels = np.zeros((6, 6), dtype=np.int64)
        labels[1:4, 2:5] = 3
        np.save(source, labels)
        output = tmp_path / "copy.nii.gz"

        self.run_cli_script("copy-img", [str(source), str(output)])

        assert_array_equal(np.asanyarray(nib.load(str(output)).dataobj), labels)

    def test_copy_img_unsupported_output(self, sample_labels, tmp_path):
        result = self.run_cli_script(
            "copy-img",
            [str(sample_labels), str(tmp_path / "copy.png")],
            expect_success=False,
        )

        assert result.returncode == 1
        assert "Unsupported output format" in result.stderr

    def test_unknown_script(self):
        result = self.run_cli_script("frobnicate", [], expect_success=False)

        assert result.returncode == 1
        assert "Usage" in result.stdout
