import jinja2

SUMMARY_TEMPLATE = jinja2.Template(
    """# {{ desc.pretty_name }} ({{ desc.name }})
image: {{ image }}
{%- if files or desc.mounted_directories %}
mounts:
{%- for f in files %}
  {{ f.source }} -> {{ f.target }}
{%- endfor %}
{%- for d in desc.mounted_directories %}
  {{ d.source }}/ -> {{ d.target }}
{%- endfor %}
{%- endif %}
{%- if desc.env %}
env:
{%- for name, value in desc.env %}
  {{ name }}={{ value }}
{%- endfor %}
{%- endif %}
{%- if desc.setup_execs %}
setup:
{%- for cmd in desc.setup_execs %}
  {{ cmd | join(" ") }}
{%- endfor %}
{%- endif %}
ports: {% for p in ports %}{{ p.port }}{% if p.skip_healthcheck %} (no health check){% endif %}{% if not loop.last %}, {% endif %}{% else %}none{% endfor %}
{%- if desc.withheld_ports %}
withheld ports: {{ desc.withheld_ports | join(", ") }}
{%- endif %}
entrypoint: {% if entrypoint %}{{ entrypoint | join(" ") }}{% else %}image default{% endif %}
{%- if desc.insecure_root_capabilities %}
insecure root capabilities: yes
{%- endif %}
{%- if desc.bindings %}
bindings{% if not bindings_enabled %} (disabled){% endif %}: {% for b in desc.bindings %}{{ b.alias }}={{ b.component }}{% if not loop.last %}, {% endif %}{% endfor %}
{%- endif %}
"""
)
