# marginalia/templating.py
"""
Django template helpers shared by the page assembler and the orbit widgets.

Values substituted into these templates are trusted HTML. Callers wrap them
with ``mark_safe`` so the engine neither escapes nor double-escapes them.
"""

from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, Set

from django.template import Context, Engine
from django.template.base import Template, Variable, VariableNode

from .conf import configure_django
from .exceptions import TemplateSlotError

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Return the template engine, configuring Django on first use."""
    configure_django()
    return Engine(dirs=[str(TEMPLATES_DIR)])


def template_slots(template: Template) -> Set[str]:
    """Return the top-level variable names a template substitutes."""
    slots = set()
    for node in template.nodelist.get_nodes_by_type(VariableNode):
        var = node.filter_expression.var
        if isinstance(var, Variable) and var.lookups:
            slots.add(var.lookups[0])
    return slots


def load_template(source: str, required_slots: Iterable[str] = ()) -> Template:
    """
    Compile a template string and check that it exposes the required slots.

    Args:
        source: Template source in Django template syntax
        required_slots: Variable names the template must contain

    Returns:
        Compiled template

    Raises:
        TemplateSlotError: If a required slot is missing
    """
    template = get_engine().from_string(source)

    missing = sorted(set(required_slots) - template_slots(template))
    if missing:
        raise TemplateSlotError(
            "template has no slot for: " + ", ".join(missing)
        )

    return template


def render_template(template: Template, context: Dict[str, object]) -> str:
    return template.render(Context(context))
