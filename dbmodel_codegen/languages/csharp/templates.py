"""
Built-in templates for Entity Framework Core models.

A template of the same name in the configured template directory
replaces the built-in one.
"""

ENTITY_TEMPLATE_NAME = "entity.cs.j2"
CONTEXT_TEMPLATE_NAME = "context.cs.j2"

ENTITY_TEMPLATE = """\
{% if header %}
{{ header | comment("//") }}
{% endif %}
{% for using in usings %}
using {{ using }};
{% endfor %}

namespace {{ namespace }}
{
{{ indent }}{{ table_annotation }}
{{ indent }}public partial class {{ class_name }}
{{ indent }}{
{% for member in members %}
{% for attribute in member.attributes %}
{{ member_indent }}{{ attribute }}
{% endfor %}
{{ member_indent }}{{ member.declaration }}

{% endfor %}
{{ indent }}}
}
"""

CONTEXT_TEMPLATE = """\
{% if header %}
{{ header | comment("//") }}
{% endif %}
{% for using in usings %}
using {{ using }};
{% endfor %}

namespace {{ namespace }}
{
{{ indent }}public partial class {{ context_name }} : {{ base_class }}
{{ indent }}{
{{ member_indent }}public {{ context_name }}({{ options_type }}<{{ context_name }}> options)
{{ member_indent }}{{ indent }}: base(options)
{{ member_indent }}{
{{ member_indent }}}

{% for accessor in accessors %}
{{ member_indent }}{{ accessor }}
{% endfor %}
{{ indent }}}
}
"""

BUILTIN_TEMPLATES = {
    ENTITY_TEMPLATE_NAME: ENTITY_TEMPLATE,
    CONTEXT_TEMPLATE_NAME: CONTEXT_TEMPLATE,
}
