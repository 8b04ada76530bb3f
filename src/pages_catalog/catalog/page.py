"""目錄頁面 HTML 產生。"""

from html import escape

from pages_catalog.config import Settings
from pages_catalog.models.view import Card, ViewState

STYLE = """
body { font-family: system-ui, sans-serif; margin: 0; background: #f6f7f9; color: #222; }
header { padding: 1.5rem 2rem; background: #fff; border-bottom: 1px solid #e3e5e8; }
.controls { display: flex; gap: .75rem; flex-wrap: wrap; margin-top: 1rem; }
.controls input, .controls select { padding: .4rem .6rem; font-size: 1rem; }
.error { margin: 1rem 2rem; padding: .75rem 1rem; background: #fdecea; color: #8a1c1c; border-radius: 6px; }
#grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(260px, 1fr)); gap: 1.25rem; padding: 2rem; }
.card { background: #fff; border-radius: 8px; overflow: hidden; box-shadow: 0 1px 3px rgba(0,0,0,.08); }
.card-link { color: inherit; text-decoration: none; display: block; }
.screenshot { width: 100%; height: 150px; object-fit: cover; background: #ddd; display: block; }
.card-body { padding: .9rem 1rem 1rem; }
.card-title { margin: 0 0 .4rem; font-size: 1.1rem; }
.card-desc { margin: 0 0 .6rem; color: #555; font-size: .95rem; }
.tags { display: flex; flex-wrap: wrap; gap: .35rem; margin-bottom: .5rem; }
.tag { background: #eef2ff; color: #3342a8; border-radius: 999px; padding: .1rem .55rem; font-size: .8rem; }
.update-date { color: #888; font-size: .8rem; }
"""


# 停止輸入 300ms 後送出表單
SEARCH_DEBOUNCE = "clearTimeout(this._submitTimer); this._submitTimer = setTimeout(() => this.form.submit(), 300)"


def render_card(card: Card) -> str:
    tags = ""
    if card.tags:
        badges = "".join(f'<span class="tag">{escape(t)}</span>' for t in card.tags)
        tags = f'<div class="tags">{badges}</div>'
    return (
        '<article class="card">'
        f'<a class="card-link" href="{escape(card.href)}">'
        f'<img class="screenshot" src="{escape(card.image)}" alt="" loading="lazy">'
        '<div class="card-body">'
        f'<h2 class="card-title">{escape(card.title)}</h2>'
        f'<p class="card-desc">{escape(card.description)}</p>'
        f"{tags}"
        f'<span class="update-date">{escape(card.date_label)}</span>'
        "</div></a></article>"
    )


def _option(value: str, label: str, selected: bool) -> str:
    attr = " selected" if selected else ""
    return f'<option value="{escape(value)}"{attr}>{escape(label)}</option>'


def render_controls(vocabulary: list[str], state: ViewState) -> str:
    tag_options = [_option("", "All tags", state.all_tags)]
    tag_options += [_option(t, t, t == state.tag) for t in vocabulary]
    if not state.all_tags and state.tag not in vocabulary:
        # 網址帶入的標籤不在清單中時仍保留為已選取
        tag_options.append(_option(state.tag, state.tag, True))
    sort_options = [
        _option("desc", "Newest first", state.sort == "desc"),
        _option("asc", "Oldest first", state.sort == "asc"),
    ]
    autofocus = " autofocus" if state.query else ""
    # 任何控制項變更都重新送出表單，整頁重新計算；搜尋框輸入停頓後送出
    return (
        '<form class="controls" method="get" action="">'
        f'<input id="search-input" type="search" name="q" value="{escape(state.query)}" '
        'placeholder="Search projects" '
        f'oninput="{SEARCH_DEBOUNCE}" onfocus="this.setSelectionRange(this.value.length, this.value.length)"{autofocus}>'
        '<select id="tag-filter" name="tag" onchange="this.form.submit()">'
        f'{"".join(tag_options)}</select>'
        '<select id="sort-order" name="sort" onchange="this.form.submit()">'
        f'{"".join(sort_options)}</select>'
        "</form>"
    )


def render_page(
    cards: list[Card],
    vocabulary: list[str],
    state: ViewState,
    settings: Settings,
    error: str | None = None,
) -> str:
    title = escape(settings.site_title)
    banner = f'<div class="error" role="alert">{escape(error)}</div>' if error else ""
    grid = "".join(render_card(c) for c in cards)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{title}</title>
<style>{STYLE}</style>
</head>
<body>
<header>
<h1>{title}</h1>
{render_controls(vocabulary, state)}
</header>
{banner}
<main id="grid">{grid}</main>
</body>
</html>
"""
