"""
Prompt Builder: turns a PatternRequest into the single prompt sent to every provider.

The template lives in prompts/pattern_request.txt so it can be tuned without a
code change; a copy is kept inline in case the file is missing.
"""
from __future__ import annotations

from pathlib import Path

from ..models.requests import PatternRequest

PROMPTS_DIR = Path(__file__).parent.parent / "prompts"
PATTERN_PROMPT_FILE = "pattern_request.txt"
DEFAULT_SIZE = "Adjust to desired size"


def _load_prompt(filename: str) -> str:
    path = PROMPTS_DIR / filename
    if path.exists():
        return path.read_text(encoding="utf-8")
    return ""


def build_prompt(req: PatternRequest) -> str:
    template = _load_prompt(PATTERN_PROMPT_FILE) or _default_pattern_prompt()
    return template.format(
        project_type=req.project_type,
        skill_level=req.skill_level.value,
        yarn_weight=req.yarn_weight or "any",
        size=req.size or DEFAULT_SIZE,
        description=req.description,
    ).strip()


def _default_pattern_prompt() -> str:
    return """You are an expert crochet pattern designer. Create a detailed, accurate crochet pattern with the following specifications:

Project Type: {project_type}
Skill Level: {skill_level}
Yarn Weight: {yarn_weight}
Size: {size}
Description: {description}

Produce a complete pattern with these sections:
1. Pattern title
2. Materials (yarn amounts, hook size, notions)
3. Finished size
4. Gauge
5. Step-by-step instructions using standard crochet abbreviations, with stitch counts
6. Finishing
7. Notes and tips

The pattern must be technically accurate and achievable at the {skill_level} level."""
