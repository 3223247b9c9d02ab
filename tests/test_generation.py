import pytest

from udl_planner import generation
from udl_planner.errors import GenerationError
from udl_planner.schemas import GeneratedLessonPlan, LessonPlanInputs, MultimediaResource, UdlEvaluationPlan

from samples import plan_data, respond, table_data, udl_evaluation_data


def test_extract_json_object_accepts_plain_and_fenced_text():
	assert generation.extract_json_object('{"a": 1}') == {"a": 1}
	assert generation.extract_json_object('결과:\n```json\n{"a": 2}\n```') == {"a": 2}
	assert generation.extract_json_object('앞 {"a": 3} 뒤') == {"a": 3}


def test_extract_json_object_rejects_prose():
	with pytest.raises(ValueError):
		generation.extract_json_object("죄송합니다. 생성할 수 없습니다.")


@pytest.mark.anyio
async def test_udl_plan_carries_form_standard_and_no_id(fake_client):
	respond(fake_client, plan_data(id="from-ai", achievementStandard="ignored"))
	inputs = LessonPlanInputs(achievement_standards="[4과04-02]물의 상태 변화")

	plan = await generation.generate_udl_lesson_plan(fake_client, inputs)

	assert plan.id is None
	assert plan.achievement_standard == "[4과04-02]물의 상태 변화"
	kwargs = fake_client.generate.await_args.kwargs
	assert "tablePlan" not in kwargs["response_schema"]["properties"]
	assert "lessonTitle" in kwargs["response_schema"]["required"]


@pytest.mark.anyio
async def test_unparseable_answer_becomes_generation_error(fake_client):
	fake_client.generate.return_value = "this is not json"
	with pytest.raises(GenerationError) as info:
		await generation.generate_udl_lesson_plan(fake_client, LessonPlanInputs())
	assert info.value.message == "AI로부터 UDL 지도안을 생성하는 데 실패했습니다."


@pytest.mark.anyio
async def test_transport_failure_becomes_generation_error(fake_client):
	fake_client.generate.side_effect = RuntimeError("boom")
	with pytest.raises(GenerationError) as info:
		await generation.generate_table_lesson_plan(fake_client, LessonPlanInputs())
	assert info.value.message == "표 형식 지도안을 생성하는 중 오류가 발생했습니다."


@pytest.mark.anyio
async def test_revision_keeps_sibling_documents(fake_client):
	original = GeneratedLessonPlan.model_validate(plan_data(tablePlan=table_data(), achievementStandard="기준"))
	respond(fake_client, plan_data(lessonTitle="수정된 지도안"))

	revised = await generation.revise_udl_lesson_plan(fake_client, original, "더 쉽게")

	assert revised.lesson_title == "수정된 지도안"
	assert revised.table_plan == original.table_plan
	assert revised.achievement_standard == "기준"
	assert "더 쉽게" in fake_client.generate.await_args.args[0]


@pytest.mark.anyio
async def test_standards_without_data_skip_the_ai(fake_client):
	result = await generation.generate_achievement_standards(fake_client, "대학교", "1학기", "미술", "색")
	assert result == ["'미술' 과목의 성취기준 데이터가 없습니다."]
	fake_client.generate.assert_not_awaited()


@pytest.mark.anyio
async def test_standards_are_limited_to_the_official_list(fake_client):
	official = "[4과04-01]물이 얼 때와 얼음이 녹을 때의 무게와 부피 변화를 관찰할 수 있다."
	respond(fake_client, {"standards": [official, "[9과99-99]지어낸 성취기준"]})
	result = await generation.generate_achievement_standards(
		fake_client, "초등학교 (3-4학년)", "1학기", "과학", "액체와 기체"
	)
	assert result == [official]


@pytest.mark.anyio
async def test_empty_objective_options_are_an_error(fake_client):
	respond(fake_client, {"objectives": ["", "  "]})
	with pytest.raises(GenerationError) as info:
		await generation.generate_learning_objective_options(fake_client, "초3", "1학기", "과학", "물", "")
	assert info.value.message == "AI가 추천 학습 목표를 반환하지 못했습니다."


@pytest.mark.anyio
async def test_process_evaluation_prompt_includes_udl_evaluation(fake_client):
	respond(fake_client, {"title": "과정중심평가지"})
	evaluation = UdlEvaluationPlan.model_validate(udl_evaluation_data())
	sheet = await generation.generate_process_evaluation_worksheet(fake_client, LessonPlanInputs(), evaluation)

	assert sheet.title == "과정중심평가지"
	assert "순환 설명하기" in fake_client.generate.await_args.args[0]


@pytest.mark.parametrize(
	"platform, prefix",
	[
		("YouTube", "https://www.youtube.com/results?search_query="),
		("Google Images", "https://www.google.com/search?tbm=isch&q="),
		("웹사이트", "https://www.google.com/search?q="),
	],
)
def test_search_url_by_platform(platform, prefix):
	url = generation.search_url(MultimediaResource(title="t", platform=platform, search_query="물의 순환 & 증발"))
	assert url.startswith(prefix)
	assert "%26" in url
