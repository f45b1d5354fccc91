"""
Tests rendering fixture documents against their expected HTML
"""
import os

import pytest

from markdown_test_utils import find_test_files, render_and_compare


@pytest.mark.parametrize("markdown_path,expected_html_path", find_test_files())
def test_render_fixture_files(markdown_path, expected_html_path):
    """Test rendering markdown files against expected HTML outputs."""
    is_match, diff = render_and_compare(markdown_path, expected_html_path)
    assert is_match, f"HTML mismatch for {os.path.basename(markdown_path)}:\n{diff}"


def test_fixture_files_exist():
    """Test the fixture directory holds paired files."""
    assert len(find_test_files()) >= 3
