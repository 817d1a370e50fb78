"""
Tests for Noise Weighting Module

Key formula tested:
- multiplier = 1 + (base_weight - 1) × quietness, clamped to [0.5, 3.0]
- quietness = 0 returns exactly 1.0
"""
import pytest

from quietroute.services.noise_weighting import (
    NOISE_WEIGHT_BY_CLASS,
    calculate_noise_multiplier,
    get_noise_weight,
)
from quietroute.services.road_attributes import RoadClass
from quietroute.services.scoring_config import MAX_NOISE_MULTIPLIER, MIN_NOISE_MULTIPLIER


class TestNoiseWeights:
    """Tests for the per-class base weight table"""

    def test_every_road_class_has_a_weight(self):
        assert set(NOISE_WEIGHT_BY_CLASS) == set(RoadClass)

    def test_unknown_is_neutral(self):
        assert get_noise_weight(RoadClass.UNKNOWN) == 1.0

    def test_weights_descend_from_motorway_to_footway(self):
        order = [
            RoadClass.MOTORWAY,
            RoadClass.TRUNK,
            RoadClass.PRIMARY,
            RoadClass.SECONDARY,
            RoadClass.TERTIARY,
            RoadClass.RESIDENTIAL,
            RoadClass.LIVING_STREET,
            RoadClass.PEDESTRIAN,
            RoadClass.FOOTWAY,
        ]
        weights = [get_noise_weight(rc) for rc in order]
        assert weights == sorted(weights, reverse=True)


class TestCalculateNoiseMultiplier:
    """Tests for calculate_noise_multiplier()"""

    def test_motorway_full_quietness(self):
        assert calculate_noise_multiplier(RoadClass.MOTORWAY, 1.0) == pytest.approx(3.0)

    def test_primary_half_quietness(self):
        """1 + (2.5 - 1) × 0.5 = 1.75"""
        assert calculate_noise_multiplier(RoadClass.PRIMARY, 0.5) == pytest.approx(1.75)

    def test_footway_is_preferred(self):
        """1 + (0.5 - 1) × 1.0 = 0.5"""
        assert calculate_noise_multiplier(RoadClass.FOOTWAY, 1.0) == pytest.approx(0.5)

    def test_residential_is_neutral(self):
        assert calculate_noise_multiplier(RoadClass.RESIDENTIAL, 1.0) == pytest.approx(1.0)

    @pytest.mark.parametrize("road_class", list(RoadClass))
    def test_zero_quietness_is_exactly_one(self, road_class):
        assert calculate_noise_multiplier(road_class, 0.0) == 1.0

    @pytest.mark.parametrize("road_class", list(RoadClass))
    @pytest.mark.parametrize("quietness", [0.0, 0.25, 0.5, 0.75, 1.0])
    def test_within_band(self, road_class, quietness):
        multiplier = calculate_noise_multiplier(road_class, quietness)
        assert MIN_NOISE_MULTIPLIER <= multiplier <= MAX_NOISE_MULTIPLIER

    def test_monotonic_in_quietness_for_loud_roads(self):
        values = [calculate_noise_multiplier(RoadClass.TRUNK, q) for q in (0.0, 0.3, 0.6, 1.0)]
        assert values == sorted(values)
