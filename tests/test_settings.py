"""
Test script for settings persistence and map debug images

Usage:
    python tests/test_settings.py
"""

import sys
import tempfile
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from tilemap.map import CharTile, LINE, parse_map
from tilemap.map.debug import BACKGROUND_COLOR, render_map_image, save_map_image
from tilemap.settings import DEFAULT_SETTINGS, load_settings, save_settings


def test_settings_defaults():
    """Missing or broken settings files fall back to defaults."""
    print("\n" + "="*60)
    print("TEST: Settings defaults")
    print("="*60)

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "config.json"
        assert load_settings(path) == DEFAULT_SETTINGS

        path.write_text("{not json", encoding="utf-8")
        assert load_settings(path) == DEFAULT_SETTINGS

        path.write_text("[1, 2]", encoding="utf-8")
        assert load_settings(path) == DEFAULT_SETTINGS

    print("  [PASS] Settings defaults tests")


def test_settings_round_trip():
    """Saved settings merge over defaults when loaded."""
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "config.json"
        save_settings({"puzzle_name": "expense_report"}, path)

        settings = load_settings(path)
        assert settings["puzzle_name"] == "expense_report"
        assert settings["data_dir"] == DEFAULT_SETTINGS["data_dir"]

        # Loading returns a copy; defaults are never mutated
        settings["data_dir"] = "elsewhere"
        assert DEFAULT_SETTINGS["data_dir"] == "data"


def test_map_image():
    """Test cell colors and image size."""
    print("\n" + "="*60)
    print("TEST: Map image")
    print("="*60)

    tile_map = parse_map("# \n #", CharTile)
    image = render_map_image(tile_map, cell_size=4, palette={"#": "#ff0000"})

    print(f"  Image size: {image.size}")
    assert image.size == (8, 8)
    assert image.getpixel((1, 1)) == (255, 0, 0)
    assert image.getpixel((5, 1)) == (0x20, 0x20, 0x20)
    assert BACKGROUND_COLOR == "#202020"

    try:
        render_map_image(parse_map("ab", CharTile, LINE))
    except ValueError:
        pass
    else:
        raise AssertionError("1-D map was drawn")

    print("  [PASS] Map image tests")


def test_save_map_image():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "nested" / "map.png"
        image = save_map_image(parse_map("ab\ncd", CharTile), path, cell_size=3)
        assert path.exists()
        assert image.size == (6, 6)


def _run(test) -> bool:
    try:
        test()
    except AssertionError as e:
        print(f"  [FAIL] {test.__name__}: {e}")
        return False
    return True


def main():
    """Run all tests."""
    print("\n" + "#"*60)
    print("# SETTINGS AND DEBUG IMAGE TESTS")
    print("#"*60)

    tests = [
        ("Settings defaults", test_settings_defaults),
        ("Settings round trip", test_settings_round_trip),
        ("Map image", test_map_image),
        ("Save map image", test_save_map_image),
    ]
    results = [(name, _run(test)) for name, test in tests]

    print("\n" + "="*60)
    print("SUMMARY")
    print("="*60)

    all_passed = True
    for name, passed in results:
        status = "PASS" if passed else "FAIL"
        print(f"  {name}: [{status}]")
        if not passed:
            all_passed = False

    print()
    if all_passed:
        print("All tests PASSED!")
        return 0
    else:
        print("Some tests FAILED!")
        return 1


if __name__ == "__main__":
    sys.exit(main())
