"""Handlebars rendering for the character sheet pages.

Pages are HTMX-driven: the view fragment reloads when the API answers with
an ``HX-Trigger: updatedCharacter`` header, the stats fragment on
``updatedStats``.
"""

from collections.abc import Callable
from typing import Any

import pybars

from cypher_character.models import Character
from cypher_character.stats import CharacterStats, DamageTrack, EffortType

_compiler = pybars.Compiler()
_cache: dict[str, Callable] = {}


class SheetError(Exception):
    """Raised when a Handlebars template fails to compile or render."""


VIEW_TEMPLATE = """\
<section id="character-view" hx-get="/character/view" \
hx-trigger="updatedCharacter from:body" hx-swap="outerHTML">
  <h1>{{character.name}} <small>({{character.pronouns}})</small></h1>
  <p class="sentence">{{summary}}</p>
</section>
"""

EDIT_TEMPLATE = """\
<form id="character-edit" hx-put="/api/v1/character" hx-ext="json-enc" hx-swap="none">
  <label>Name <input name="name" value="{{character.name}}"></label>
  <label>Pronouns <input name="pronouns" value="{{character.pronouns}}"></label>
  <label>Descriptor <input name="descriptor" value="{{sentence.descriptor}}"></label>
  <label>Type <input name="character_type" value="{{sentence.character_type}}"></label>
  <label>Flavor <input name="flavor" value="{{sentence.flavor}}"></label>
  <label>Focus <input name="focus" value="{{sentence.focus}}"></label>
  <button type="submit">Save</button>
</form>
"""

STATS_TEMPLATE = """\
<section id="character-stats" hx-get="/character" hx-select="#character-stats" \
hx-trigger="updatedStats from:body" hx-swap="outerHTML">
  <p>Tier {{stats.tier}} &middot; Effort {{stats.effort}} &middot; XP {{stats.xp}}</p>
  <p class="damage-track">{{stats.damage_track}}{{#if is_impaired}} \
(+1 point per level of effort){{/if}}</p>
  <table class="pools">
    <tr><th>Pool</th><th>Current</th><th>Max</th><th>Edge</th><th>Effort cost</th></tr>
{{#each pools}}
    <tr>
      <td>{{name}}</td><td>{{current}}</td><td>{{max}}</td><td>{{edge}}</td>
      <td>{{#each costs}}<span class="cost" title="level {{level}}">{{cost}}</span> {{/each}}</td>
    </tr>
{{/each}}
  </table>
  <form hx-post="/api/v1/stats/spend-effort" hx-ext="json-enc" hx-swap="none">
    <select name="effort_type">
{{#each pools}}
      <option value="{{name}}">{{name}}</option>
{{/each}}
    </select>
    <input name="effort_level" type="number" min="1" max="{{stats.effort}}" value="1">
    <input name="edge" type="number" min="0" value="0">
    <button type="submit">Spend effort</button>
  </form>
</section>
"""

SHEET_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{{character.name}} - Character Sheet</title>
  <script src="https://unpkg.com/htmx.org@1.9.12"></script>
  <script src="https://unpkg.com/htmx.org@1.9.12/dist/ext/json-enc.js"></script>
</head>
<body>
{{{view}}}
{{{stats_section}}}
  <a href="/character/edit">Edit</a>
</body>
</html>
"""


def render_sheet(template_str: str, context: dict[str, Any]) -> str:
    """Compile and render a Handlebars template with the given context.

    Templates are cached by source string to avoid recompilation.
    """
    try:
        compiled = _cache.get(template_str)
        if compiled is None:
            compiled = _compiler.compile(template_str)
            _cache[template_str] = compiled
        return str(compiled(context))
    except Exception as e:
        raise SheetError(f"Template error: {e}") from e


def _pool_rows(stats: CharacterStats) -> list[dict[str, Any]]:
    """One row per pool with the cost of each affordable effort level."""
    rows = []
    for effort_type in EffortType:
        pool = stats.pool(effort_type)
        rows.append({
            "name": str(effort_type),
            "current": pool.current,
            "max": pool.max,
            "edge": pool.edge,
            "costs": [
                {"level": level, "cost": stats.effort_cost(level, pool.edge)}
                for level in range(1, stats.effort + 1)
            ],
        })
    return rows


def build_sheet_context(character: Character, stats: CharacterStats | None = None) -> dict[str, Any]:
    """Assemble template variables for the sheet, edit and view templates."""
    ctx: dict[str, Any] = {
        "character": character.model_dump(),
        "sentence": character.sentence.model_dump(),
        "summary": str(character),
    }
    if ctx["sentence"]["flavor"] is None:
        ctx["sentence"]["flavor"] = ""
    if stats is not None:
        ctx["stats"] = stats.model_dump(mode="json")
        ctx["is_impaired"] = stats.damage_track != DamageTrack.HALE
        ctx["pools"] = _pool_rows(stats)
    return ctx


def render_view(character: Character) -> str:
    return render_sheet(VIEW_TEMPLATE, build_sheet_context(character))


def render_edit(character: Character) -> str:
    return render_sheet(EDIT_TEMPLATE, build_sheet_context(character))


def render_page(character: Character, stats: CharacterStats) -> str:
    """The full character sheet page."""
    ctx = build_sheet_context(character, stats)
    ctx["view"] = render_sheet(VIEW_TEMPLATE, ctx)
    ctx["stats_section"] = render_sheet(STATS_TEMPLATE, ctx)
    return render_sheet(SHEET_TEMPLATE, ctx)
