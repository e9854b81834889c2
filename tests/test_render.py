"""
Tests for rosvoid/render.py result tables.
"""
from io import StringIO
from unittest.mock import patch

from rich.console import Console

from rosvoid import render

RESULTS = [
    {'name': 'roscpp_core', 'status': 'rendered', 'path': 'out/ros-melodic-roscpp-core/template',
     'error': None, 'sub_packages': 4},
    {'name': 'docs_only', 'status': 'no_release', 'path': None, 'error': None, 'sub_packages': 0},
    {'name': 'broken', 'status': 'failed', 'path': None,
     'error': 'broken: Failed to fetch https://example.com/broken.tar.gz', 'sub_packages': 0},
]


def capture(func, *args):
    buffer = StringIO()
    with patch.object(render, 'console', Console(file=buffer, width=200, force_terminal=False)):
        func(*args)
    return buffer.getvalue()


class TestRenderResultsTable:
    """Tests for render_results_table."""

    def test_empty_results_shows_message(self):
        assert "No repositories processed" in capture(render.render_results_table, [])

    def test_rows_and_details(self):
        output = capture(render.render_results_table, RESULTS)
        for name in ("roscpp_core", "docs_only", "broken"):
            assert name in output
        assert "out/ros-melodic-roscpp-core/template" in output
        assert "Failed to fetch" in output

    def test_sorted_by_name(self):
        output = capture(render.render_results_table, RESULTS)
        assert output.index("broken") < output.index("docs_only") < output.index("roscpp_core")


class TestPrintResultsSummary:
    """Tests for print_results_summary."""

    def test_counts(self):
        output = capture(render.print_results_summary, RESULTS)
        assert "Total repositories: 3" in output
        assert "Rendered: 1" in output
        assert "No release: 1" in output
        assert "Failed: 1" in output

    def test_no_failures_line_when_clean(self):
        output = capture(render.print_results_summary, RESULTS[:1])
        assert "Failed" not in output
        assert "No release" not in output

    def test_empty(self):
        assert capture(render.print_results_summary, []) == ""
