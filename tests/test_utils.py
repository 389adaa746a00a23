# tests/test_utils.py
import pytest

from bstmap.utils import build_map, depth_profile, summarize_profile, save_depth_profile


def test_build_map_values_are_insert_positions():
    m = build_map([3, 1, 2])
    assert dict(m.items()) == {3: 0, 1: 1, 2: 2}


def test_depth_profile_shape_and_sorted_is_degenerate():
    df = depth_profile([5, 20], trials=3, seed=0)
    assert list(df.columns) == ["n", "order", "trial", "height"]
    assert len(df) == 2 * 2 * 3

    sorted_rows = df[df["order"] == "sorted"]
    assert (sorted_rows["height"] == sorted_rows["n"]).all()

    random_rows = df[df["order"] == "random"]
    assert (random_rows["height"] <= random_rows["n"]).all()
    assert (random_rows["height"] >= 1).all()


def test_depth_profile_is_reproducible_with_seed():
    a = depth_profile([30], trials=4, seed=42, orders=["random"])
    b = depth_profile([30], trials=4, seed=42, orders=["random"])
    assert a["height"].tolist() == b["height"].tolist()


def test_depth_profile_rejects_bad_args():
    with pytest.raises(ValueError):
        depth_profile([10], trials=0)
    with pytest.raises(ValueError):
        depth_profile([0])
    with pytest.raises(ValueError):
        depth_profile([10], orders=["reversed"])
    with pytest.raises(ValueError):
        depth_profile([10 ** 6], orders=["sorted"])


def test_summarize_and_save(tmp_path):
    df = depth_profile([7], trials=2, seed=0)
    summary = summarize_profile(df)
    assert set(summary.columns) == {"n", "order", "height_mean", "height_max", "height_ideal"}
    assert summary["height_ideal"].tolist() == [3, 3]

    out = save_depth_profile(summary, tmp_path / "nested", "summary.csv")
    assert out.exists()
    assert out.read_text().splitlines()[0] == "n,order,height_mean,height_max,height_ideal"
