from urllib.parse import quote

from fastapi.testclient import TestClient

from udl_planner.main import app
from udl_planner.settings import settings

from samples import plan_data, respond, table_data, udl_evaluation_data, worksheet_data


def _generate(api, fake_client, **overrides):
	respond(fake_client, plan_data(**overrides))
	response = api.post("/plans/generate")
	assert response.status_code == 200
	return response.json()["plan"]


def test_info(api):
	response = api.get("/info")
	assert response.status_code == 200
	assert response.json()["status"] == "ok"


def test_app_page_issues_workspace_cookie(api):
	response = api.get("/app")
	assert response.status_code == 200
	assert settings.workspace_cookie in response.cookies
	assert "지도안이 기다리고 있습니다" in response.text


def test_missing_api_key_is_reported(storage, monkeypatch):
	monkeypatch.setattr(settings, "gemini_api_key", None)
	response = TestClient(app).post("/suggest/topics")
	assert response.status_code == 503


def test_input_updates(api):
	response = api.patch("/inputs", json={"name": "topic", "value": "구름"})
	assert response.json()["topic"] == "구름"
	assert api.patch("/inputs", json={"name": "colour", "value": "x"}).status_code == 400

	toggled = api.post("/inputs/standards/toggle", json={"standard": "[4과05-01]"}).json()
	assert toggled["achievementStandards"].endswith("\n[4과05-01]")


def test_topic_suggestions(api, fake_client):
	respond(fake_client, {"topics": ["물의 순환", "구름 만들기"]})
	response = api.post("/suggest/topics")
	assert response.json() == {"topics": ["물의 순환", "구름 만들기"]}


def test_choosing_a_topic_fetches_objective_options(api, fake_client):
	respond(fake_client, {"objectives": ["목표 1", "목표 2"]})
	response = api.post("/suggest/objectives", json={"topic": "구름 만들기"})
	assert response.json() == {"objectives": ["목표 1", "목표 2"], "topic": "구름 만들기"}

	api.post("/inputs/objective", json={"objective": "목표 2"})
	assert api.get("/inputs").json()["objectives"] == "목표 2"


def test_generation_failure_maps_to_bad_gateway(api, fake_client):
	fake_client.generate.return_value = "not json"
	response = api.post("/plans/generate")
	assert response.status_code == 502
	assert response.json()["detail"] == "AI로부터 UDL 지도안을 생성하는 데 실패했습니다."
	assert api.get("/plans/current").json()["error"] == "AI로부터 UDL 지도안을 생성하는 데 실패했습니다."


def test_first_request_failing_still_issues_workspace_cookie(api, fake_client):
	fake_client.generate.return_value = "not json"
	failed = api.post("/plans/generate")
	assert failed.status_code == 502
	assert settings.workspace_cookie in failed.cookies
	assert api.get("/plans/current").json()["error"] == "AI로부터 UDL 지도안을 생성하는 데 실패했습니다."

	missing = TestClient(app).get("/print")
	assert missing.status_code == 404
	assert settings.workspace_cookie in missing.cookies


def test_save_select_and_delete(api, fake_client):
	_generate(api, fake_client)
	saved = api.post("/plans/save").json()["plan"]
	assert saved["id"].startswith("물의 여행-")
	assert api.get("/plans").json() == [{"id": saved["id"], "lessonTitle": "물의 여행"}]

	_generate(api, fake_client, lessonTitle="두 번째")
	selected = api.post(f"/plans/{quote(saved['id'])}/select").json()["plan"]
	assert selected["lessonTitle"] == "물의 여행"

	after = api.delete(f"/plans/{quote(saved['id'])}").json()
	assert after["plan"] is None
	assert api.get("/plans").json() == []
	assert api.post("/plans/missing/select").status_code == 404


def test_sibling_generation_is_idempotent(api, fake_client):
	_generate(api, fake_client)
	respond(fake_client, table_data())
	first = api.post("/plans/current/table")
	assert first.json()["plan"]["tablePlan"]["metadata"]["lessonTitle"] == "물의 여행 (표)"
	calls = fake_client.generate.await_count

	second = api.post("/plans/current/table")
	assert second.status_code == 200
	assert fake_client.generate.await_count == calls


def test_sibling_errors(api, fake_client):
	assert api.post("/plans/current/table").status_code == 404
	_generate(api, fake_client)
	assert api.post("/plans/current/slides").status_code == 404
	response = api.post("/plans/current/process-evaluation")
	assert response.status_code == 409
	assert "UDL 평가 계획" in response.json()["detail"]


def test_no_generation_while_editing(api, fake_client):
	_generate(api, fake_client)
	api.post("/plans/edit/start")
	calls = fake_client.generate.await_count

	sibling = api.post("/plans/current/table")
	assert sibling.status_code == 409
	assert "수정을 완료하거나 취소" in sibling.json()["detail"]
	assert api.post("/plans/revise", json={"feedback": "더 쉽게"}).status_code == 409
	assert fake_client.generate.await_count == calls

	page = api.get("/app", params={"view": "table"}).text
	assert 'data-action="generate-sibling"' not in page
	assert "수정을 마친 뒤 생성할 수 있습니다" in page


def test_edit_round_trip(api, fake_client):
	_generate(api, fake_client, tablePlan=None)
	assert api.patch("/plans/edit", json={"path": "contextAnalysis", "value": "x"}).status_code == 409

	api.post("/plans/edit/start")
	editing = api.get("/view/udl").text
	assert 'data-path="contextAnalysis"' in editing
	assert api.patch("/plans/edit", json={"path": "nowhere.at.all", "value": "x"}).status_code == 400
	api.patch("/plans/edit", json={"path": "contextAnalysis", "value": "운동장 수업"})
	state = api.post("/plans/edit/save").json()

	assert state["isEditing"] is False
	assert state["plan"]["contextAnalysis"] == "운동장 수업"
	reading = api.get("/view/udl").text
	assert "운동장 수업" in reading
	assert "<textarea" not in reading


def test_move_step_while_editing(api, fake_client):
	_generate(api, fake_client, tablePlan=table_data())
	api.post("/plans/edit/start")
	state = api.post("/plans/edit/move-step", json={"index": 0, "direction": "down"}).json()
	assert [s["phase"] for s in state["plan"]["tablePlan"]["steps"]] == ["전개", "도입", "정리"]
	assert api.post("/plans/edit/move-step", json={"index": 0, "direction": "sideways"}).status_code == 422


def test_export_downloads(api, fake_client):
	_generate(api, fake_client, udlEvaluation=udl_evaluation_data())
	response = api.get("/export/udl", params={"format": "doc"})
	assert response.status_code == 200
	assert response.headers["content-type"].startswith("application/msword")
	assert "filename*=UTF-8''" in response.headers["content-disposition"]
	assert quote("물의 여행.doc") in response.headers["content-disposition"]

	evaluation = api.get("/export/udlEvaluation")
	assert "<title>물의 순환 평가 계획</title>" in evaluation.text

	assert api.get("/export/table").status_code == 404
	assert api.get("/export/udl", params={"format": "pdf"}).status_code == 400


def test_print_page(api, fake_client):
	assert api.get("/print").status_code == 404
	_generate(api, fake_client, worksheet=worksheet_data())
	page = api.get("/print").text
	assert "window.print()" in page
	assert "물의 순환 활동지" in page


def test_image_proxy(api, fake_client, monkeypatch):
	monkeypatch.setattr(settings, "image_retry_delay_seconds", 0)
	missing = api.post("/api/generate-image", json={"title": "그림"})
	assert missing.status_code == 400
	assert missing.json() == {"error": "필수 정보가 누락되었습니다."}

	wrong_types = api.post("/api/generate-image", json={"title": 1, "content": "증발"})
	assert wrong_types.status_code == 400
	assert wrong_types.json() == {"error": "필수 정보가 누락되었습니다."}
	no_body = api.post("/api/generate-image", content=b"", headers={"Content-Type": "application/json"})
	assert no_body.status_code == 400
	assert no_body.json() == {"error": "필수 정보가 누락되었습니다."}

	fake_client.predict_image.side_effect = [RuntimeError("busy"), "QUJD"]
	ok = api.post("/api/generate-image", json={"title": "그림", "content": "증발", "imagePrompt": "clouds"})
	assert ok.json() == {"image": "data:image/png;base64,QUJD"}

	fake_client.predict_image.side_effect = RuntimeError("quota")
	failed = api.post("/api/generate-image", json={"title": "그림", "content": "증발"})
	assert failed.status_code == 500
	assert "quota" in failed.json()["error"]

	wrong_method = api.get("/api/generate-image")
	assert wrong_method.status_code == 405
	assert wrong_method.json() == {"error": "Method Not Allowed"}


def test_generated_image_is_attached_to_the_worksheet(api, fake_client):
	_generate(api, fake_client, worksheet=worksheet_data())
	response = api.post(
		"/plans/current/worksheet/image",
		json={"path": "worksheet.levels.0.activities.0.imageUrl", "image": "data:image/png;base64,QUJD"},
	)
	activity = response.json()["plan"]["worksheet"]["levels"][0]["activities"][0]
	assert activity["imageUrl"] == "data:image/png;base64,QUJD"
	assert '<img class="activity-image"' in api.get("/view/worksheet").text
