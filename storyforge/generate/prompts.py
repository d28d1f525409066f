# Prompt templates per content kind.
# Pure string builders: no I/O, no globals mutated, same input -> same text.

from __future__ import annotations
from typing import Any, Callable, Dict, List, Mapping, Optional

from .types import ContentKind

PLACEHOLDER = "unspecified"

COPY_INSTRUCTIONS = (
    "Copy the prompt above and paste it into the AI tool of your choice "
    "(for example ChatGPT or Claude)."
)

CHARACTER_SECTIONS = [
    "Basic information (name, age, appearance)",
    "Personality traits (at least 3 defining traits)",
    "Backstory (upbringing, formative events)",
    "Motivation and goals (what drives the character)",
    "Weaknesses and fears (where the character is vulnerable)",
    "Special skills or abilities",
    "Relationships (ties to other characters)",
]

PLOT_SECTIONS = [
    "Setting and background",
    "Main characters",
    "Three-act structure:\n"
    "   - Act one: setup and the conflict taking shape\n"
    "   - Act two: rising action and climax\n"
    "   - Act three: resolution and ending",
    "Key turning points (at least 3)",
    "Subplots",
    "How the theme is developed",
]

SCENE_SECTIONS = [
    "Visual details (colour, light, shapes)",
    "Sounds and ambient noise",
    "Smell and touch",
    "Atmosphere",
    "Key objects or landmarks in the scene",
    "How the scene affects the characters' mood",
    "How the scene connects to the plot",
]

DIALOGUE_SECTIONS = [
    "Each character has a distinct way of speaking",
    "The dialogue moves the plot forward",
    "It shows the relationship dynamics between the characters",
    "It carries subtext and emotional layers",
    "Natural rhythm, including pauses",
    "Fitting gestures and facial expressions",
    "Word choice and tone true to each character",
]


def _field(params: Mapping[str, Any], key: str) -> str:
    value = params.get(key)
    if value is None or value == "":
        return PLACEHOLDER
    return str(value)


def _numbered(sections: List[str]) -> str:
    return "\n".join(f"{i}. {s}" for i, s in enumerate(sections, start=1))


def build_character_prompt(params: Mapping[str, Any]) -> str:
    return f"""You are a professional story-writing assistant. Create a detailed character from the following information:

Character type: {_field(params, "type")}
Genre: {_field(params, "genre")}
Background: {_field(params, "background")}

Cover the following for this character:
{_numbered(CHARACTER_SECTIONS)}

Make the character feel alive, three-dimensional and believable."""


def build_plot_prompt(params: Mapping[str, Any]) -> str:
    return f"""You are an experienced story architect. Create a complete story outline from the following information:

Theme: {_field(params, "theme")}
Length: {_field(params, "length")}
Core conflict: {_field(params, "conflict")}

The outline must include:
{_numbered(PLOT_SECTIONS)}

Keep the plot logic clear and the pacing under control, and give readers something to feel."""


def build_scene_prompt(params: Mapping[str, Any]) -> str:
    return f"""You are a writer with a gift for describing places. Create a vivid scene description from the following information:

Scene type: {_field(params, "type")}
Time: {_field(params, "time")}
Scene elements: {_field(params, "elements")}

The description should include:
{_numbered(SCENE_SECTIONS)}

Be concrete so the reader feels present in the scene. Prefer specific detail over abstraction."""


def build_dialogue_prompt(params: Mapping[str, Any]) -> str:
    return f"""You are a dialogue-writing expert. Write natural, flowing dialogue from the following information:

Dialogue type: {_field(params, "type")}
Participants: {_field(params, "participants")}
Characters: {_field(params, "characters")}
Goal of the conversation: {_field(params, "goal")}

The dialogue must meet these requirements:
{_numbered(DIALOGUE_SECTIONS)}

It should sound real, never preachy or forced. Every line needs a reason to exist."""


# keyed by the plain value; str-Enum members hash by name, not value
_BUILDERS: Dict[str, Callable[[Mapping[str, Any]], str]] = {
    ContentKind.CHARACTER.value: build_character_prompt,
    ContentKind.PLOT.value: build_plot_prompt,
    ContentKind.SCENE.value: build_scene_prompt,
    ContentKind.DIALOGUE.value: build_dialogue_prompt,
}


def build_prompt(kind, params: Optional[Mapping[str, Any]] = None) -> str:
    """Render the prompt for `kind`. Unknown kinds give an empty string."""
    if isinstance(kind, ContentKind):
        kind = kind.value
    if not isinstance(kind, str):
        return ""
    builder = _BUILDERS.get(kind)
    if builder is None:
        return ""
    return builder(params or {})
