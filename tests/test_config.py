"""Tests for config module."""

from pathlib import Path

import pytest

from slurm_form.config import ConfigError, create_example_form, load_form
from slurm_form.script.renderer import render_script
from slurm_form.script.request import JobRequest


class TestLoadForm:
    """Tests for load_form function."""

    def test_loads_values(self, temp_dir: Path) -> None:
        """Test loading form values."""
        path = temp_dir / "job.yml"
        path.write_text(
            'job-name: sim\nnodes: 2\ntime: "02:00:00"\nmail-end: true\n'
            "modules: |\n  gcc/11\n  openmpi\n"
        )
        form = load_form(path)
        assert form["job-name"] == "sim"
        assert form["nodes"] == "2"
        assert form["mail-end"] == "true"
        assert form["modules"] == "gcc/11\nopenmpi\n"

    def test_empty_file(self, temp_dir: Path) -> None:
        """Test that an empty file gives an empty form."""
        path = temp_dir / "job.yml"
        path.write_text("")
        assert load_form(path) == {}

    def test_missing_file(self, temp_dir: Path) -> None:
        """Test error for a missing file."""
        with pytest.raises(FileNotFoundError):
            load_form(temp_dir / "missing.yml")

    def test_invalid_yaml(self, temp_dir: Path) -> None:
        """Test error for invalid YAML."""
        path = temp_dir / "job.yml"
        path.write_text("job-name: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_form(path)

    def test_not_a_mapping(self, temp_dir: Path) -> None:
        """Test error when the file is a list."""
        path = temp_dir / "job.yml"
        path.write_text("- job-name\n- nodes\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_form(path)

    def test_unknown_field(self, temp_dir: Path) -> None:
        """Test error for unknown form fields."""
        path = temp_dir / "job.yml"
        path.write_text("job-name: sim\nmemroy: 8G\n")
        with pytest.raises(ConfigError, match="memroy"):
            load_form(path)

    def test_nested_value(self, temp_dir: Path) -> None:
        """Test error for a non-scalar value."""
        path = temp_dir / "job.yml"
        path.write_text("modules:\n  - gcc\n")
        with pytest.raises(ConfigError, match="modules"):
            load_form(path)

    def test_values_kept_as_written(self, temp_dir: Path) -> None:
        """Test that unquoted times and yes/no words stay as typed."""
        path = temp_dir / "job.yml"
        path.write_text("time: 12:00:00\nqos: no\nnodes: 010\nmail-begin: yes\n")
        form = load_form(path)
        assert form == {
            "time": "12:00:00",
            "qos": "no",
            "nodes": "010",
            "mail-begin": "yes",
        }

        script = render_script(JobRequest.from_form(form))
        assert "#SBATCH --time='12:00:00'\n" in script
        assert "#SBATCH --qos='no'\n" in script
        assert "#SBATCH --nodes='010'\n" in script
        assert JobRequest.from_form(form).mail_begin is True

    def test_blank_value_uses_default(self, temp_dir: Path) -> None:
        """Test that a key with no value falls back to the default."""
        path = temp_dir / "job.yml"
        path.write_text("partition:\n")
        assert JobRequest.from_form(load_form(path)).partition == "normal"


class TestCreateExampleForm:
    """Tests for create_example_form function."""

    def test_example_loads_as_defaults(self, temp_dir: Path) -> None:
        """Test that the example form gives the default request."""
        path = temp_dir / "job.yml"
        create_example_form(path)
        request = JobRequest.from_form(load_form(path))
        assert request == JobRequest()
