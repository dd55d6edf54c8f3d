"""
Template engine wrapper for code generation.

Provides a small interface over Jinja2 and the built-in template used to
render value classes.
"""

from typing import Any, Dict

from jinja2 import DictLoader, Environment, StrictUndefined, select_autoescape

from ..errors import PojoGenError

VALUE_CLASS_TEMPLATE_NAME = "value_class.java.j2"


class TemplateError(PojoGenError):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for the Jinja2 environment holding the built-in templates."""

    def __init__(self):
        """Initialize template engine with an in-memory loader."""
        self._loader = DictLoader({})
        self._env = Environment(
            loader=self._loader,
            autoescape=select_autoescape(["html", "xml"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of the template
            context: Variables passed to the template

        Returns:
            Rendered template content

        Raises:
            TemplateError: If the template is missing or fails to render
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except Exception as e:
            raise TemplateError(
                f"Failed to render template {template_name}: {str(e)}"
            ) from e

    def add_template(self, name: str, content: str):
        """
        Add an in-memory template.

        Args:
            name: Template name
            content: Template content
        """
        self._loader.mapping[name] = content


def java_string_literal(value: str) -> str:
    """Quote value as a Java string literal."""
    escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


# Every line starts with pad(depth), which expands to the configured line
# prefix repeated depth + 1 times.
VALUE_CLASS_TEMPLATE = """\
{% if package_name %}
{{ pad(0) }}package {{ package_name }};
{{ pad(0) }}
{% endif %}
{% for line in auxiliary_lines %}
{{ pad(0) }}{{ line }}
{% endfor %}
{% if auxiliary_lines %}
{{ pad(0) }}
{% endif %}
{% if comments %}
{{ pad(0) }}/**
{{ pad(0) }} * Value object {{ class_name }}.
{{ pad(0) }} *
{% if immutable %}
{{ pad(0) }} * <p>Instances of this class are immutable.
{% else %}
{{ pad(0) }} * <p>Instances of this class are mutable.
{% endif %}
{{ pad(0) }} */
{% endif %}
{{ pad(0) }}public {% if immutable %}final {% endif %}class {{ class_name }} {
{% if fields %}
{{ pad(0) }}
{% for field in fields %}
{{ pad(1) }}private {% if field.constant %}final {% endif %}{{ field.type_name }} {{ field.name }};
{% endfor %}
{% endif %}
{{ pad(0) }}
{{ pad(1) }}public {{ class_name }}({{ constructor_parameters }}) {
{% for field in fields %}
{{ pad(2) }}this.{{ field.name }} = {{ field.name }};
{% endfor %}
{{ pad(1) }}}
{% for field in fields %}
{{ pad(0) }}
{{ pad(1) }}public {{ field.type_name }} {{ field.accessor }}() {
{{ pad(2) }}return this.{{ field.name }};
{{ pad(1) }}}
{% if field.mutable %}
{{ pad(0) }}
{{ pad(1) }}public void {{ field.mutator }}(final {{ field.type_name }} {{ field.name }}) {
{{ pad(2) }}this.{{ field.name }} = {{ field.name }};
{{ pad(1) }}}
{% endif %}
{% endfor %}
{{ pad(0) }}
{{ pad(1) }}@Override
{{ pad(1) }}public boolean equals(final Object other) {
{{ pad(2) }}if (this == other) {
{{ pad(3) }}return true;
{{ pad(2) }}}
{{ pad(2) }}if (!(other instanceof {{ class_name }})) {
{{ pad(3) }}return false;
{{ pad(2) }}}
{% if fields %}
{{ pad(2) }}final {{ class_name }} that = ({{ class_name }}) other;
{{ pad(2) }}return {{ equals_expression }};
{% else %}
{{ pad(2) }}return true;
{% endif %}
{{ pad(1) }}}
{{ pad(0) }}
{{ pad(1) }}@Override
{{ pad(1) }}public int hashCode() {
{{ pad(2) }}return java.util.Objects.hash({{ hash_arguments }});
{{ pad(1) }}}
{{ pad(0) }}
{{ pad(1) }}@Override
{{ pad(1) }}public String toString() {
{{ pad(2) }}return {{ to_string_expression }};
{{ pad(1) }}}
{{ pad(0) }}}
"""

# Default template engine instance
_default_engine = None


def create_template_engine() -> TemplateEngine:
    """Create a template engine with the built-in templates registered."""
    engine = TemplateEngine()
    engine.add_template(VALUE_CLASS_TEMPLATE_NAME, VALUE_CLASS_TEMPLATE)
    return engine


def get_default_template_engine() -> TemplateEngine:
    """Get the default template engine instance."""
    global _default_engine
    if _default_engine is None:
        _default_engine = create_template_engine()
    return _default_engine
