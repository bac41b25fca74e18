"""
Tests for the markers applied at collection time.
"""


class TestCollectionMarkers:
    """Markers added by tests/conftest.py."""

    def test_unit_marker_applied(self, request):
        assert request.node.get_closest_marker("unit") is not None
        assert request.node.get_closest_marker("slow") is None

    def test_deep_tests_are_marked_slow(self, request):
        assert request.node.get_closest_marker("slow") is not None
