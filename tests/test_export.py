import pytest

from udl_planner.export import export_plan, safe_filename
from udl_planner.schemas import GeneratedLessonPlan
from udl_planner.views.print_layout import render_print_layout

from samples import plan_data, table_data, worksheet_data


def _plan(**overrides):
	return GeneratedLessonPlan.model_validate(plan_data(**overrides))


def test_udl_export_uses_plan_title_and_escapes_content():
	plan = _plan(lessonTitle="물 <순환> & 증발", contextAnalysis="<script>alert(1)</script>")

	exported = export_plan(plan, "udl")

	assert exported.title == "물 <순환> & 증발"
	assert "<title>물 &lt;순환&gt; &amp; 증발</title>" in exported.content
	assert "<script>alert(1)</script>" not in exported.content
	assert "&lt;script&gt;alert(1)&lt;/script&gt;" in exported.content
	assert exported.media_type.startswith("text/html")
	assert exported.filename == "물 _순환_ & 증발.html"


def test_sibling_export_uses_its_own_title():
	exported = export_plan(_plan(tablePlan=table_data()), "table")
	assert exported.title == "물의 여행 (표)"
	assert "<h1>물의 여행 (표)</h1>" in exported.content


def test_word_export_is_office_html_with_bom():
	exported = export_plan(_plan(worksheet=worksheet_data()), "worksheet", "doc")
	assert exported.media_type == "application/msword"
	assert exported.filename == "물의 순환 활동지.doc"
	assert exported.content.startswith("\ufeff<!DOCTYPE html>")
	assert 'xmlns:w="urn:schemas-microsoft-com:office:word"' in exported.content


def test_missing_sibling_exports_nothing():
	assert export_plan(_plan(), "udlEvaluation") is None


def test_bad_arguments():
	with pytest.raises(KeyError):
		export_plan(_plan(), "slides")
	with pytest.raises(ValueError):
		export_plan(_plan(), "udl", "pdf")


def test_safe_filename_never_returns_empty():
	assert safe_filename("a/b:c") == "a_b_c"
	assert safe_filename("///") == "지도안"


def test_print_layout_contains_every_generated_document():
	page = render_print_layout(_plan(tablePlan=table_data(), worksheet=worksheet_data()))
	assert page.count('<div class="print-section') == 3
	assert page.count('print-section page-break-before"') == 2
	assert "UDL 평가 계획" not in page
