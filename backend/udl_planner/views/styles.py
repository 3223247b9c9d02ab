BASE_CSS = """
body { font-family: 'Malgun Gothic', sans-serif; line-height: 1.6; margin: 0; padding: 20px; color: #1e293b; }
h1, h2, h3 { margin-top: 1.2em; }
table { border-collapse: collapse; width: 100%; margin-top: 1em; }
th, td { border: 1px solid #ccc; padding: 8px; text-align: left; vertical-align: top; }
th { background-color: #f2f2f2; }
ul { padding-left: 20px; }
ul.plain { list-style: none; padding-left: 0; }
.inline { display: inline; }
.udl-tag { display: inline-block; margin: 2px 4px 2px 0; padding: 0 8px; border-radius: 9999px; background: #e0e7ff; font-size: 0.85em; }
.worksheet-level-section { padding: 12px; margin: 12px 0; border: 1px solid #e2e8f0; border-radius: 8px; }
.level-basic { background: #f0fdf4; }
.level-support { background: #eff6ff; }
.level-advanced { background: #faf5ff; }
.activity { background: #fff; padding: 10px; margin: 8px 0; border: 1px solid #e2e8f0; border-radius: 6px; }
.activity-image { max-width: 320px; display: block; margin-top: 8px; }
.multimedia a { display: block; }
"""

APP_CSS = """
.layout { display: grid; grid-template-columns: 2fr 3fr; gap: 24px; }
.panel { background: #fff; padding: 20px; border: 1px solid #e2e8f0; border-radius: 12px; margin-bottom: 16px; }
textarea.editable { width: 100%; background: #eef2ff; border: 1px solid #c7d2fe; border-radius: 6px; resize: vertical; }
.error { color: #b91c1c; background: #fef2f2; padding: 12px; border-radius: 8px; }
.tabs button.active { font-weight: bold; border-bottom: 2px solid #4f46e5; }
.saved-plan { display: flex; justify-content: space-between; padding: 6px 8px; background: #f8fafc; margin: 4px 0; border-radius: 6px; }
"""

PRINT_CSS = """
@media print {
	@page { size: A4; margin: 1.5cm; }
	body { -webkit-print-color-adjust: exact !important; print-color-adjust: exact !important; padding: 0; }
	.page-break-before { page-break-before: always; }
	.print-section-header { page-break-after: avoid !important; }
	.page-break-avoid { page-break-inside: avoid !important; }
	tr { page-break-inside: avoid !important; }
	table { page-break-inside: auto; }
	thead { display: table-header-group; }
	.inner-table { page-break-inside: avoid !important; }
	.worksheet-level-section { page-break-inside: avoid !important; }
	.no-print { display: none !important; }
}
"""
