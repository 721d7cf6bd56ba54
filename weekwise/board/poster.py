"""Printable poster renderings of a PlanBoard."""

from __future__ import annotations

from datetime import date
from html import escape

from weekwise.board.plan_board import PlanBoard
from weekwise.utils.constants import WEEKDAY_KEYS
from weekwise.utils.messages import POSTER_TEXT, localized

_WEEKDAY_NAMES = {
    "zh": ("星期一", "星期二", "星期三", "星期四", "星期五", "星期六", "星期日"),
    "en": ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
}

_MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

_POSTER_CSS = """\
body { font-family: "Outfit", "PingFang SC", "Microsoft YaHei", sans-serif; margin: 0; }
.poster { width: 210mm; min-height: 297mm; margin: 0 auto; padding: 6px 50px 20px; box-sizing: border-box; }
.date-badge { display: inline-block; padding: 4px 16px; border-radius: 999px; background: #eef2ff; font-size: 13px; }
.header { text-align: center; margin: 16px 0; }
h1 { font-size: 28px; margin: 8px 0 0; }
.subtitle { color: #666; font-size: 13px; margin: 4px 0 0; }
table.schedule-table { width: 100%; border-collapse: collapse; table-layout: fixed; margin-bottom: 8px; }
.schedule-table th { background: #4f46e5; color: #fff; font-size: 12px; padding: 6px; }
.schedule-table td { border-bottom: 1px solid #e0e7ff; padding: 6px; vertical-align: middle; height: 70px; }
.day-cell { font-weight: bold; text-align: center; font-size: 12px; width: 10%; }
.content-cell { white-space: pre-line; line-height: 1.25; }
.time-cell { text-align: center; font-weight: bold; font-size: 12px; }
.done-cell { text-align: center; font-size: 16px; }
.text-11 { font-size: 11px; } .text-10 { font-size: 10px; } .text-9 { font-size: 9px; } .text-8 { font-size: 8px; }
.tips-title, .strategy-title { font-size: 12px; margin: 6px 0; }
.tips li { font-size: 11px; }
.strategies { display: grid; grid-template-columns: repeat(4, 1fr); gap: 6px; }
.strategy { border: 1px solid #e0e7ff; border-radius: 8px; padding: 4px 6px; font-size: 10px; }
.strategy strong { display: block; font-size: 11px; }
@page { size: A4; margin: 0; }
@media print {
  * { -webkit-print-color-adjust: exact !important; print-color-adjust: exact !important; }
  body { margin: 0; }
  .poster { width: 210mm; height: 297mm; overflow: hidden; page-break-after: avoid; }
  .schedule-table td { height: 62px; }
}
"""


def font_size_class(text: str, kind: str) -> str:
    """Shrink long cell text so the table keeps its one-page layout."""
    length = len(text)
    if kind == "content":
        if length < 100:
            return "text-11"
        if length < 150:
            return "text-10"
        if length < 200:
            return "text-9"
        return "text-8"
    if length < 50:
        return "text-11"
    if length < 80:
        return "text-10"
    return "text-9"


def format_date(day: date, language: str) -> str:
    weekday = _WEEKDAY_NAMES.get(language, _WEEKDAY_NAMES["zh"])[day.weekday()]
    if language == "en":
        return f"{weekday}, {_MONTH_NAMES[day.month - 1]} {day.day}, {day.year}"
    return f"{day.year}年{day.month}月{day.day}日{weekday}"


def render_poster_html(board: PlanBoard, language: str | None = None, today: date | None = None) -> str:
    """Render the live board as a standalone A4 HTML page ready to print."""
    language = language or board.language
    today = today or date.today()

    def text(key: str) -> str:
        return escape(localized(POSTER_TEXT, language, key))

    rows = []
    for key in WEEKDAY_KEYS:
        day = board.days[key]
        done = "☑" if board.completed[key] else "☐"
        rows.append(
            "<tr>"
            f'<td class="day-cell">{escape(day.day)}</td>'
            f'<td class="content-cell {font_size_class(day.content, "content")}">{escape(day.content)}</td>'
            f'<td class="time-cell">{escape(day.duration)}</td>'
            f'<td class="content-cell {font_size_class(day.notes, "notes")}">{escape(day.notes)}</td>'
            f'<td class="done-cell">{done}</td>'
            "</tr>"
        )
    body_rows = "\n".join(rows)
    tips = "".join(f"<li>{escape(tip)}</li>" for tip in board.tips)
    strategies = "".join(
        f'<div class="strategy"><strong>{escape(s.title)}</strong>{escape(s.description)}</div>'
        for s in board.strategies
    )
    subtitle = f'<p class="subtitle">{escape(board.subtitle)}</p>' if board.subtitle else ""
    html_lang = "zh-CN" if language == "zh" else "en"

    return f"""<!DOCTYPE html>
<html lang="{html_lang}">
<head>
<meta charset="utf-8">
<title>{escape(board.title)}</title>
<style>
{_POSTER_CSS}</style>
</head>
<body>
<div class="poster">
<div class="header">
<span class="date-badge">📅 {escape(format_date(today, language))}</span>
<h1>{escape(board.title)}</h1>
{subtitle}
</div>
<table class="schedule-table">
<thead><tr><th></th><th>{text("content")}</th><th>{text("duration")}</th><th>{text("notes")}</th><th>{text("done")}</th></tr></thead>
<tbody>
{body_rows}
</tbody>
</table>
<h3 class="tips-title">{text("tips")}</h3>
<ul class="tips">{tips}</ul>
<h3 class="strategy-title">{text("strategies")}</h3>
<div class="strategies">{strategies}</div>
</div>
</body>
</html>
"""


def render_poster_text(board: PlanBoard, language: str | None = None) -> str:
    language = language or board.language
    lines = [f"### {board.title}"]
    if board.subtitle:
        lines.append(board.subtitle)
    for key in WEEKDAY_KEYS:
        day = board.days[key]
        mark = "[x]" if board.completed[key] else "[ ]"
        lines.append("")
        lines.append(f"{mark} {day.day} · {day.duration}")
        lines.extend(f"    {line}" for line in day.content.splitlines())
        if day.notes:
            lines.append(f"    > {day.notes}")
    lines.append("")
    lines.append(localized(POSTER_TEXT, language, "tips"))
    lines.extend(f"- {tip}" for tip in board.tips)
    lines.append("")
    lines.append(localized(POSTER_TEXT, language, "strategies"))
    lines.extend(f"- {s.title}: {s.description}" for s in board.strategies)
    return "\n".join(lines)
