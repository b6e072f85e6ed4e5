"""Small file bodies shared by more than one framework."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .templates import render

_COUNTER_STORE = """\
import { create } from 'zustand';

interface CounterState {
  count: number;
  increment: () => void;
  decrement: () => void;
  reset: () => void;
}

export const useCounterStore = create<CounterState>((set) => ({
  count: 0,
  increment: () => set((state) => ({ count: state.count + 1 })),
  decrement: () => set((state) => ({ count: state.count - 1 })),
  reset: () => set({ count: 0 }),
}));
"""


def render_counter_store() -> str:
    """Zustand store backing the counter demo in React and Next.js projects."""
    return _COUNTER_STORE


class EnvSection(BaseModel):
    """A commented group of ``KEY=value`` lines in a dotenv file."""

    title: str
    variables: dict[str, str] = Field(default_factory=dict)


_ENV_FILE = """\
{% for section in sections %}
{% if not loop.first %}

{% endif %}
# {{ section.title }}
{% for key, value in section.variables.items() %}
{{ key }}={{ value }}
{% endfor %}
{% endfor %}
"""


def render_env_file(sections: list[EnvSection]) -> str:
    return render(_ENV_FILE, sections=sections)


_FAVICON = """\
<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 128 128">
  <rect width="128" height="128" rx="24" fill="{{ color }}"/>
  <text x="64" y="84" font-family="system-ui, sans-serif" font-size="64" font-weight="700" text-anchor="middle" fill="#ffffff">{{ letter }}</text>
</svg>
"""


def render_favicon(project_name: str, color: str = "#4f46e5") -> str:
    """A square SVG favicon showing the project's initial."""
    base = project_name.rsplit("/", 1)[-1]
    letter = next((ch for ch in base if ch.isalnum()), "P").upper()
    return render(_FAVICON, color=color, letter=letter)
