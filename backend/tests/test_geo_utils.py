"""
Tests for geographic utilities (Haversine distance, endpoint distance, bounding boxes).
"""
import math

import pytest

from quietroute.utils.geo_utils import (
    distance_to_endpoints,
    get_bounding_box,
    haversine_distance,
)


class TestHaversineDistance:
    """Tests for haversine_distance()"""

    def test_same_point_is_zero(self):
        assert haversine_distance(22.5726, 88.3639, 22.5726, 88.3639) == 0.0

    def test_one_degree_latitude(self):
        """One degree of latitude is ~111.2 km"""
        distance = haversine_distance(0.0, 0.0, 1.0, 0.0)
        assert distance == pytest.approx(111195, rel=1e-3)

    def test_symmetric(self):
        d1 = haversine_distance(22.5726, 88.3639, 22.5448, 88.3426)
        d2 = haversine_distance(22.5448, 88.3426, 22.5726, 88.3639)
        assert d1 == pytest.approx(d2)

    def test_short_east_west_distance(self):
        """0.001° of longitude at 22.57°N is ~103m"""
        distance = haversine_distance(22.5726, 88.3639, 22.5726, 88.3649)
        assert distance == pytest.approx(102.7, abs=1.0)

    def test_antipodal_points(self):
        """Half the Earth's circumference"""
        distance = haversine_distance(0.0, 0.0, 0.0, 180.0)
        assert distance == pytest.approx(math.pi * 6371000, rel=1e-6)

    def test_near_antipodal_points_do_not_overflow(self):
        """Rounding must not push the haversine term past 1"""
        distance = haversine_distance(
            -6.377647337239125, -146.93007968748378, 6.377647337239125, 33.06992031251622
        )
        assert distance == pytest.approx(math.pi * 6371000, rel=1e-6)


class TestDistanceToEndpoints:
    """Tests for distance_to_endpoints()"""

    def test_nearest_endpoint_is_used(self):
        coords = ((22.5726, 88.3639), (22.5736, 88.3639))
        # Point sitting on the end coordinate
        assert distance_to_endpoints(22.5736, 88.3639, coords) == pytest.approx(0.0)

    def test_midpoint_is_not_considered(self):
        """A point on the segment's midpoint is measured to the endpoints"""
        coords = ((22.5726, 88.3639), (22.5736, 88.3639))
        distance = distance_to_endpoints(22.5731, 88.3639, coords)
        assert distance == pytest.approx(55.6, abs=1.0)

    def test_intermediate_points_ignored(self):
        coords = ((22.5726, 88.3639), (22.5800, 88.3639), (22.5736, 88.3639))
        # Right on the intermediate point, but only endpoints count
        assert distance_to_endpoints(22.5800, 88.3639, coords) > 700

    def test_single_point_segment(self):
        coords = ((22.5726, 88.3639),)
        assert distance_to_endpoints(22.5726, 88.3639, coords) == 0.0

    def test_empty_coordinates_is_infinite(self):
        assert distance_to_endpoints(22.5726, 88.3639, ()) == math.inf


class TestBoundingBox:
    """Tests for get_bounding_box()"""

    def test_unpadded_box(self):
        south, north, west, east = get_bounding_box([(22.57, 88.37), (22.58, 88.36)])
        assert south == 22.57
        assert north == 22.58
        assert west == 88.36
        assert east == 88.37

    def test_padding_expands_every_side(self):
        coords = [(22.57, 88.36), (22.58, 88.37)]
        south, north, west, east = get_bounding_box(coords, padding_m=1110)
        assert south == pytest.approx(22.56, abs=1e-4)
        assert north == pytest.approx(22.59, abs=1e-4)
        # Longitude padding is wider than latitude padding away from the equator
        assert (88.36 - west) > 0.01
        assert (east - 88.37) > 0.01

    def test_padding_covers_points_at_high_latitude(self):
        """A point padding_m due east of a coordinate lies inside the box"""
        lat, lon = 64.1466, -21.9426
        south, north, west, east = get_bounding_box([(lat, lon)], padding_m=50)
        # Walk 50m east along the parallel
        point_lon = lon + math.degrees(50 / (6371000 * math.cos(math.radians(lat))))
        assert haversine_distance(lat, lon, lat, point_lon) == pytest.approx(50.0, abs=0.01)
        assert west <= point_lon <= east
        assert south < lat < north
