"""HTML templates for reference lists, the widget, editor fields and the settings page.

Context objects are application DTOs (ReferenceBlock, WidgetInstance,
EditorForm, RelationDefinition, SettingsNotice...). Autoescape is on; only
theme-provided widget wrappers are marked safe.
"""

REFERENCE_LIST = """\
<ul class="reference-list-{{ block.key }}">
{%- for item in block.items %}<li><a href="{{ item.url }}">{{ item.title }}</a></li>{% endfor -%}
</ul>"""

WIDGET = """\
{{ args.before_widget | safe }}
{%- if instance.title %}{{ args.before_title | safe }}{{ instance.title }}{{ args.after_title | safe }}{% endif %}
{%- if instance.message %}<p class="references-widget-message">{{ instance.message }}</p>{% endif %}
<ul>
{%- for item in items %}<li><a href="{{ item.url }}">{{ item.title }}</a></li>{% endfor -%}
</ul>
{{- args.after_widget | safe }}"""

WIDGET_FORM = """\
{% if not definitions -%}
<p>You should create record(s) on the <a href="{{ settings_url }}">References settings page</a> first.</p>
{%- else -%}
<p>
    <label for="widget-title">Title:</label>
    <input class="widefat" id="widget-title" name="title" type="text" value="{{ instance.title }}" />
</p>
<p>
    <label for="widget-message">Description</label>
    <textarea class="widefat" rows="16" cols="20" id="widget-message" name="message">{{ instance.message }}</textarea>
</p>
<p>
    <label for="widget-ref">References</label>
    <select class="widefat" id="widget-ref" name="ref">
    {%- for d in definitions %}
        <option value="{{ d.meta_key }}"{% if d.meta_key == instance.ref %} selected{% endif %}>{{ d.title }} ({{ d.key }})</option>
    {%- endfor %}
    </select>
</p>
{%- endif %}"""

EDITOR_FIELDS = """\
<input type="hidden" name="{{ nonce_field }}" value="{{ form.nonce }}" />
{%- for field in form.fields %}
<div class="references-field" id="references-field-{{ field.definition.key }}">
    <h3>{{ field.definition.title }}</h3>
    <select class="references-select" id="id_{{ field.field_name }}" name="{{ field.field_name }}[]" multiple="multiple" size="10">
    {%- for c in field.candidates %}
        <option value="{{ c.record_id }}"{% if c.record_id in field.selected %} selected{% endif %}>{{ c.title }}</option>
    {%- endfor %}
    </select>
</div>
{%- endfor %}"""

_TYPE_SELECT = """\
{%- macro type_select(name, content_types, selected, multiple) -%}
<select name="{{ name }}{% if multiple %}[]{% endif %}"{% if multiple %} multiple="multiple"{% endif %}>
{%- for ct in content_types %}
    <option value="{{ ct.name }}"{% if ct.name in selected %} selected{% endif %}>{{ ct.label }}</option>
{%- endfor %}
</select>
{%- endmacro -%}
"""

SETTINGS_PAGE = _TYPE_SELECT + """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8" />
<title>References settings</title>
</head>
<body>
<h2>References settings</h2>
{%- for notice in notices %}
<div class="{{ notice.level }} notice is-dismissible"><p>{{ notice.message }}</p></div>
{%- endfor %}
{%- if definitions %}
<h3>Existing references.</h3>
{%- for d in definitions %}
<div class="refer">
    <form method="post">
    <table>
    <tr valign="top"><td>
        <p><b>Metabox Title *:</b><br />
        <input size="35" name="ref_title" type="text" value="{{ d.title }}"></p>
        <p><b>Content type:</b><br />
        {{ type_select("ref_post", content_types, [d.source_type], false) }}</p>
        <p><b>Used meta key:</b> _ref_<input size="10" type="text" name="ref_id" value="{{ d.key }}"></p>
        <input type="hidden" name="ref_index" value="{{ d.internal_id }}" />
        <input type="hidden" name="action" value="manage_reference" />
        <input type="submit" class="button-primary" name="sbm" value="Update" />
        <input type="submit" class="button-primary" name="sbm" value="Delete" />
    </td>
    <td>&nbsp;</td>
    <td>
        <p><b>Referenced post types:</b><br />
        {{ type_select("linked_post", content_types, d.target_types, true) }}</p>
    </td></tr>
    </table>
    </form>
</div>
{%- endfor %}
{%- endif %}
<h3>Add new reference.</h3>
<p>Connect different types of publications.</p>
<div class="refer">
    <form method="post">
    <table>
    <tr valign="top"><td>
        <p><b>Metabox Title *:</b><br />
        <input size="35" name="ref_title" type="text" value=""></p>
        <p><b>Add references metabox to editor of:</b><br />
        {{ type_select("ref_post", content_types, [], false) }}</p>
        <p><b>Use meta key:</b> _ref_<input size="10" type="text" name="ref_id" value="{{ next_id }}"><br />
        <small>Use this key [A-Za-z0-9_] to read the attached ids, e.g. meta key _ref_{{ next_id }}.</small></p>
        <input type="hidden" name="action" value="add_new_reference" />
        <input type="submit" class="button-primary" name="sbm" value="Add" />
    </td>
    <td>&nbsp;</td>
    <td>
        <p><b>To allow to connect only next types of articles:</b><br />
        Don't select any type if you need references to any type of records.<br />
        {{ type_select("linked_post", content_types, [], true) }}</p>
    </td></tr>
    </table>
    </form>
</div>
</body>
</html>
"""

DEFAULT_TEMPLATES: dict[str, str] = {
    "reference_list.html": REFERENCE_LIST,
    "widget.html": WIDGET,
    "widget_form.html": WIDGET_FORM,
    "editor_fields.html": EDITOR_FIELDS,
    "settings_page.html": SETTINGS_PAGE,
}
