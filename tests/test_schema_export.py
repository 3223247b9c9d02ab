from udl_planner.generation import StandardsResponse
from udl_planner.schema_export import model_to_gemini_schema
from udl_planner.schemas import GeneratedLessonPlan, UdlEvaluationPlan, Worksheet


def _walk(node):
	yield node
	for sub in node.get("properties", {}).values():
		yield from _walk(sub)
	if "items" in node:
		yield from _walk(node["items"])


def test_simple_list_response():
	schema = model_to_gemini_schema(StandardsResponse)
	assert schema == {
		"type": "OBJECT",
		"properties": {"standards": {"type": "ARRAY", "items": {"type": "STRING"}}},
		"required": ["standards"],
	}


def test_nested_models_are_inlined_with_camel_case_keys():
	schema = model_to_gemini_schema(Worksheet)
	activity = schema["properties"]["levels"]["items"]["properties"]["activities"]["items"]
	assert set(activity["properties"]) == {"title", "description", "content", "imagePrompt", "imageUrl"}
	assert activity["properties"]["imagePrompt"]["nullable"] is True
	assert "imagePrompt" not in activity["required"]
	for node in _walk(schema):
		assert "$ref" not in node
		assert node["type"].isupper()


def test_alias_exceptions_are_respected():
	schema = model_to_gemini_schema(GeneratedLessonPlan)
	assert "multimedia_resources" in schema["properties"]
	resource = schema["properties"]["multimedia_resources"]["items"]
	assert set(resource["properties"]) == {"title", "platform", "search_query"}
	levels = model_to_gemini_schema(UdlEvaluationPlan)["properties"]["achievementStandardLevels"]
	assert set(levels["properties"]) == {"A", "B", "C"}


def test_excluded_keys_are_dropped():
	schema = model_to_gemini_schema(GeneratedLessonPlan, exclude=("id", "tablePlan"))
	assert "id" not in schema["properties"]
	assert "tablePlan" not in schema["properties"]
	assert "id" not in schema["required"]
