import pytest
from charge_sim.config import SimConfig


def test_defaults():
    cfg = SimConfig()
    assert cfg.k_coulomb == 800.0
    assert cfg.friction == 0.02
    assert cfg.min_distance == 8.0
    assert (cfg.width, cfg.height) == (1000.0, 600.0)
    assert cfg.streamline_step == 2.2
    assert cfg.max_streamline_len == 600
    assert cfg.num_lines_per_charge == 32
    assert cfg.field_threshold == 0.01
    assert not cfg.show_field and not cfg.show_field_lines


@pytest.mark.parametrize("changes", [
    {"friction": -0.1},
    {"friction": 1.0},
    {"min_distance": 0.0},
    {"width": 0.0},
    {"height": -5.0},
    {"streamline_step": 0.0},
    {"max_streamline_len": -1},
    {"num_lines_per_charge": -2},
    {"field_grid_spacing": 0.0},
])
def test_invalid_values(changes):
    with pytest.raises(ValueError):
        SimConfig(**changes)


def test_replace_returns_validated_copy():
    cfg = SimConfig()
    new = cfg.replace(k_coulomb=1200.0, show_field=True)

    assert new.k_coulomb == 1200.0 and new.show_field
    assert cfg.k_coulomb == 800.0 and not cfg.show_field


def test_replace_unknown_key():
    with pytest.raises(ValueError, match="globalFriction"):
        SimConfig().replace(globalFriction=0.1)
