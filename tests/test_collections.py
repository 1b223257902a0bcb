#
# Ethunits - Collection Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from ethunits.collections import BiDirectionalMap


# Tests ----------------------------------------------------------------------------------------------------------------
class TestBiDirectionalMap:

    @pytest.fixture
    def populated_map(self):
        """Fixture providing a pre-populated BiDirectionalMap instance."""
        return BiDirectionalMap({
            0: "Wei",
            3: "GWei",
            6: "Ether",
        })

    def test_lookup(self, populated_map):
        assert populated_map[6] == "Ether"
        assert populated_map.get(3) == "GWei"
        assert populated_map.get(9) is None
        assert populated_map.get_key("Wei") == 0

    def test_from_pairs(self):
        bimap = BiDirectionalMap(enumerate(["Wei", "KWei"]))
        assert dict(bimap) == {0: "Wei", 1: "KWei"}

    def test_value_uniqueness(self):
        with pytest.raises(ValueError, match="Value <str: 'Wei'> already exists"):
            BiDirectionalMap([(0, "Wei"), (1, "Wei")])

    def test_key_uniqueness(self):
        with pytest.raises(ValueError, match="Key <int: 0> already exists"):
            BiDirectionalMap([(0, "Wei"), (0, "KWei")])

    def test_contains(self, populated_map):
        assert 0 in populated_map  # Checks key
        assert "Wei" not in populated_map
        assert populated_map.get_key("GWei") == 3
        with pytest.raises(KeyError):
            populated_map.get_key("Finney")

    def test_keys_values_items(self, populated_map):
        assert list(populated_map.keys()) == [0, 3, 6]
        assert list(populated_map.values()) == ["Wei", "GWei", "Ether"]
        assert set(populated_map.items()) == {(0, "Wei"), (3, "GWei"), (6, "Ether")}
        assert len(populated_map) == 3

    def test_read_only(self, populated_map):
        with pytest.raises(TypeError):
            populated_map[9] = "Gigaether"
        with pytest.raises(AttributeError, match="read-only"):
            populated_map._forward_map = {}

    def test_equality_and_hash(self, populated_map):
        assert populated_map == {0: "Wei", 3: "GWei", 6: "Ether"}
        assert populated_map == BiDirectionalMap({6: "Ether", 3: "GWei", 0: "Wei"})
        assert hash(populated_map) == hash(BiDirectionalMap({0: "Wei", 3: "GWei", 6: "Ether"}))
        assert populated_map != [0, 3, 6]

    def test_empty(self):
        assert len(BiDirectionalMap()) == 0
        assert repr(BiDirectionalMap({1: "KWei"})) == "BiDirectionalMap({1: 'KWei'})"
