import pytest

from udl_planner.editing import apply_patch, move_item


def test_apply_patch_sets_nested_value_on_a_copy():
	doc = {"tablePlan": {"steps": [{"phase": "도입"}, {"phase": "전개"}]}}
	patched = apply_patch(doc, "tablePlan.steps.1.phase", "활동")
	assert patched["tablePlan"]["steps"][1]["phase"] == "활동"
	assert doc["tablePlan"]["steps"][1]["phase"] == "전개"


def test_apply_patch_adds_missing_leaf_key():
	doc = {"worksheet": {"levels": [{"activities": [{"title": "t"}]}]}}
	patched = apply_patch(doc, "worksheet.levels.0.activities.0.imageUrl", "data:image/png;base64,AA")
	assert patched["worksheet"]["levels"][0]["activities"][0]["imageUrl"] == "data:image/png;base64,AA"


def test_materials_are_edited_as_comma_separated_text():
	doc = {"tablePlan": {"metadata": {"materials": []}}}
	patched = apply_patch(doc, "tablePlan.metadata.materials", "비커, 얼음 ,, 온도계")
	assert patched["tablePlan"]["metadata"]["materials"] == ["비커", "얼음", "온도계"]


@pytest.mark.parametrize("path", ["missing.field", "tablePlan.steps.5.phase", "", "tablePlan..steps"])
def test_apply_patch_rejects_unresolvable_paths(path):
	doc = {"tablePlan": {"steps": [{"phase": "도입"}]}}
	with pytest.raises(LookupError):
		apply_patch(doc, path, "x")


def test_move_item_swaps_neighbours():
	assert move_item(["a", "b", "c"], 1, "up") == ["b", "a", "c"]
	assert move_item(["a", "b", "c"], 1, "down") == ["a", "c", "b"]


def test_move_item_ignores_moves_past_the_ends():
	items = ["a", "b"]
	assert move_item(items, 0, "up") == ["a", "b"]
	assert move_item(items, 1, "down") == ["a", "b"]
	assert move_item(items, 7, "up") == ["a", "b"]
